from unittest.mock import patch

import numpy as np
from colorama import Fore, Style

from cluster_fit.common.utils import (
    color_text,
    configure_windows_stdio,
    format_parameters,
    format_value,
    prompt_user_input,
)


def test_color_text_wraps_with_style_and_reset():
    assert color_text("hi", Fore.RED, Style.BRIGHT) == f"{Style.BRIGHT}{Fore.RED}hi{Style.RESET_ALL}"


def test_format_value_adapts_precision():
    assert format_value(123.456) == "123.4560"
    assert format_value(0.1234) == "0.123400"
    assert format_value(0.00001234) == "0.00001234"
    assert format_value(0) == "0.0000"


def test_format_value_handles_missing():
    assert format_value(None) == "N/A"
    assert format_value(np.nan) == "N/A"
    assert format_value(np.inf) == "N/A"


def test_format_parameters_joins_pairs():
    assert format_parameters({"Mean": 1.5, "StdDev": 0.25}) == "Mean: 1.5, StdDev: 0.25"
    assert format_parameters({"Lambda": np.float64(0.5)}, delimiter="; ") == "Lambda: 0.5"
    assert format_parameters({}) == ""


def test_prompt_user_input_uses_default_on_empty():
    with patch("builtins.input", return_value="   "):
        assert prompt_user_input("Value: ", default="3") == "3"
    with patch("builtins.input", return_value=" 7 "):
        assert prompt_user_input("Value: ", default="3") == "7"


def test_configure_windows_stdio_is_noop_off_windows():
    with patch("sys.platform", "linux"):
        configure_windows_stdio()
