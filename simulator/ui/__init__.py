"""
User interface module for the Dungeon Crawl Simulator.

This module provides the command-line shell around the engine: drawing the
map, reading one direction key per turn and reporting what happened.
"""
