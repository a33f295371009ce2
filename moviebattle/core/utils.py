"""
Utilities module for the movie battle.

Provides console printing with rich formatting and the small integer helpers
shared by stat derivation and damage resolution.
"""

from typing import Any

from rich.console import Console
from rich.rule import Rule

# Initialize the rich console. Highlighting is off so that plain report lines
# reach stdout unchanged.
_console = Console(markup=True, highlight=False, width=120, force_jupyter=False)


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


def truncating_div(dividend: int, divisor: int) -> int:
    """
    Integer division rounding toward zero.

    Python's // floors, so -7 // 2 is -4; this returns -3.

    Args:
        dividend (int): The value to divide.
        divisor (int): The (non-zero) value to divide by.

    Returns:
        int: The quotient truncated toward zero.

    """
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend >= 0) == (divisor > 0) else -quotient


def make_bar(current: int, maximum: int, length: int = 10, color: str = "white") -> str:
    """
    Creates a visual progress bar representation.

    Args:
        current (int): The current value.
        maximum (int): The maximum value.
        length (int): The length of the bar in characters. Defaults to 10.
        color (str): The color for the filled portion. Defaults to "white".

    Returns:
        str: A formatted progress bar string.

    """
    if maximum <= 0:
        filled = 0
    else:
        # Health can drop below zero or exceed the starting value.
        filled = max(0, min(length, int((current / maximum) * length)))
    empty = length - filled
    bar = f"[{color}]" + "▮" * filled
    if empty > 0:
        bar += "[dim white]" + "▯" * empty + "[/]"
    bar += "[/]"
    return bar
