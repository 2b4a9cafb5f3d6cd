"""
Console and formatting helpers shared by the analyzer and its CLI.

Sections:
- Platform: stdio setup for Windows terminals
- Formatting: parameter values for tables and result sheets
- Console: colored text, prompts and message levels
"""

import io
import os
import sys
from typing import Dict, Optional

import numpy as np
from colorama import Fore, Style

from cluster_fit.config import PARAMETER_DELIMITER

# ============================================================================
# PLATFORM
# ============================================================================

def configure_windows_stdio() -> None:
    """
    Re-wrap stdout/stderr as UTF-8 on Windows consoles.

    Does nothing on other platforms, under pytest, or when the streams are
    already text wrappers.
    """
    if sys.platform != "win32" or os.environ.get("PYTEST_CURRENT_TEST"):
        return
    if not hasattr(sys.stdout, "buffer") or isinstance(sys.stdout, io.TextIOWrapper):
        return
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", errors="replace")
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding="utf-8", errors="replace")


# ============================================================================
# FORMATTING
# ============================================================================

def format_value(value: Optional[float]) -> str:
    """
    Render a fitted parameter for the console table.

    Small magnitudes get more decimals (4 / 6 / 8) so rates such as
    Lambda = 0.00012 stay readable. None, NaN and inf give "N/A".
    """
    if value is None or not np.isfinite(value):
        return "N/A"

    magnitude = abs(value)
    if magnitude >= 1 or magnitude == 0:
        decimals = 4
    elif magnitude >= 0.01:
        decimals = 6
    else:
        decimals = 8
    return f"{value:.{decimals}f}"


def format_parameters(
    parameters: Dict[str, float],
    delimiter: str = PARAMETER_DELIMITER,
) -> str:
    """
    Join "name: value" pairs for the result sheet.

    repr() keeps full float precision so the saved numbers can be parsed back.
    """
    return delimiter.join(f"{name}: {float(value)!r}" for name, value in parameters.items())


# ============================================================================
# CONSOLE
# ============================================================================

def color_text(text: str, color: str = Fore.WHITE, style: str = Style.NORMAL) -> str:
    """Wrap `text` in colorama style/color codes followed by a reset."""
    return f"{style}{color}{text}{Style.RESET_ALL}"


def prompt_user_input(
    prompt: str,
    default: Optional[str] = None,
    color: str = Fore.YELLOW,
) -> str:
    """
    Ask a question on the console.

    Args:
        prompt: Question shown to the user
        default: Returned when the answer is blank
        color: Prompt color

    Returns:
        Stripped answer, `default`, or "" when both are empty
    """
    answer = input(color_text(prompt, color)).strip()
    return answer or default or ""


def log_success(message: str) -> None:
    print(color_text(message, Fore.GREEN))


def log_error(message: str) -> None:
    print(color_text(message, Fore.RED, Style.BRIGHT))


def log_warn(message: str) -> None:
    print(color_text(message, Fore.YELLOW))


def log_data(message: str) -> None:
    """Loaded data and settings."""
    print(color_text(message, Fore.CYAN))


def log_analysis(message: str) -> None:
    """Section banners."""
    print(color_text(message, Fore.MAGENTA))


def log_progress(message: str) -> None:
    """Pipeline steps (reading, clustering, saving)."""
    print(color_text(message, Fore.YELLOW, Style.DIM))
