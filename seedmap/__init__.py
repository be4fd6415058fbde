"""Dependency graph and barrel index generation for component libraries."""

__version__ = "0.1.0"
