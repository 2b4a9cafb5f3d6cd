"""
Interactive prompts for the analysis CLI.

This module asks for the input workbook, the output workbook and the number
of clusters, filling in whatever was not given on the command line.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from cluster_fit.common.exceptions import InvalidArgumentError
from cluster_fit.common.utils import log_error, prompt_user_input
from cluster_fit.config import (
    DEFAULT_CLUSTER_COUNT,
    DEFAULT_MAX_ITERATIONS,
    PROMPT_CLUSTER_COUNT,
    PROMPT_INPUT_PATH,
    PROMPT_OUTPUT_PATH,
)


@dataclass
class RunSettings:
    """Everything needed for one analysis run."""

    input_path: str
    output_path: str
    k: int = DEFAULT_CLUSTER_COUNT
    seed: Optional[int] = None
    max_iterations: int = DEFAULT_MAX_ITERATIONS


def default_output_path(input_path: str) -> str:
    """'data/measurements.xlsx' -> 'data/measurements_results.xlsx'."""
    source = Path(input_path)
    return str(source.with_name(f"{source.stem}_results.xlsx"))


def prompt_input_path() -> str:
    """Ask for the input workbook until a non-empty path is entered."""
    while True:
        path = prompt_user_input(PROMPT_INPUT_PATH)
        if path:
            return path
        log_error("Input path cannot be empty.")


def prompt_output_path(default: Optional[str] = None) -> str:
    """Ask for the output workbook; an empty answer takes `default` when set."""
    prompt = PROMPT_OUTPUT_PATH
    if default:
        prompt = f"{PROMPT_OUTPUT_PATH.rstrip(': ')} (default: {default}): "

    while True:
        path = prompt_user_input(prompt, default=default)
        if path:
            return path
        log_error("Output path cannot be empty.")


def prompt_cluster_count(default: int = DEFAULT_CLUSTER_COUNT) -> int:
    """Ask for a positive number of clusters; an empty answer takes `default`."""
    while True:
        choice = prompt_user_input(
            PROMPT_CLUSTER_COUNT.format(default=default),
            default=str(default),
        )
        try:
            k = int(choice)
        except ValueError:
            log_error("Invalid input. Please enter a whole number.")
            continue
        if k > 0:
            return k
        log_error("Number of clusters must be greater than 0.")


def resolve_run_settings(args: argparse.Namespace) -> RunSettings:
    """
    Combine command-line arguments with interactive answers.

    Args:
        args: Parsed command-line arguments

    Returns:
        RunSettings for the analysis

    Raises:
        InvalidArgumentError: if --no-prompt is set and --input is missing
    """
    allow_prompt = not args.no_prompt

    input_path = args.input_path
    if not input_path:
        if not allow_prompt:
            raise InvalidArgumentError("--input is required when --no-prompt is set")
        input_path = prompt_input_path()

    output_path = args.output_path
    if not output_path:
        fallback = default_output_path(input_path)
        output_path = prompt_output_path(fallback) if allow_prompt else fallback

    k = args.k
    if k is None:
        k = prompt_cluster_count() if allow_prompt else DEFAULT_CLUSTER_COUNT

    return RunSettings(
        input_path=input_path,
        output_path=output_path,
        k=k,
        seed=args.seed,
        max_iterations=args.max_iterations,
    )
