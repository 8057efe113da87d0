"""
Utilities module for the simulator.

Provides console printing helpers with rich formatting shared by the
command-line shell.
"""

from __future__ import annotations

import io
from typing import Any

from rich.console import Console
from rich.rule import Rule

# Initialize the rich console.
_console = Console(markup=True, width=120, force_jupyter=False)


def cprint(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output.

    Args:
        *args: Arguments to pass to the console print function.
        **kwargs: Keyword arguments to pass to the console print function.

    """
    _console.print(*args, **kwargs)


def crule(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output with a rule.

    Args:
        *args: Arguments to pass to the Rule constructor.
        **kwargs: Keyword arguments to pass to the Rule constructor.

    """
    _console.print(Rule(*args, **kwargs))


def ccapture(content: Any, *, colour: bool = True) -> str:
    """
    Captures console output as a string.

    Args:
        content (Any): The content to capture.
        colour (bool): If False, the output is plain text (good for logs or tests).

    Returns:
        str: The captured output as a string.

    """
    if colour:
        with _console.capture() as capture:
            _console.print(content, markup=True, end="")
        return capture.get()
    buffer = io.StringIO()
    tmp = Console(file=buffer, color_system=None, width=_console.width)
    tmp.print(content, markup=True, end="")
    return buffer.getvalue()
