"""Cluster a one-dimensional sample and fit a distribution to every cluster."""

__version__ = "0.1.0"
