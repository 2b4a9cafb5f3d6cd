"""
Command-line interface components for cluster distribution analysis.

This package provides CLI utilities including argument parsing, interactive prompts,
and formatted display functions.
"""

# Argument parsing
from cluster_fit.kmeans_distribution.cli.argument_parser import parse_args

# Interactive prompts
from cluster_fit.kmeans_distribution.cli.interactive_prompts import (
    RunSettings,
    prompt_cluster_count,
    prompt_input_path,
    prompt_output_path,
    resolve_run_settings,
)

# Display utilities
from cluster_fit.kmeans_distribution.cli.display import (
    display_cluster_results,
    display_config,
)

__all__ = [
    # Argument parsing
    'parse_args',
    # Interactive prompts
    'RunSettings',
    'prompt_cluster_count',
    'prompt_input_path',
    'prompt_output_path',
    'resolve_run_settings',
    # Display utilities
    'display_cluster_results',
    'display_config',
]
