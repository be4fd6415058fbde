"""Builders that assemble recorded facts into output artifacts."""

from .graph import GraphSerializer
from .index import IndexGenerator

__all__ = ["GraphSerializer", "IndexGenerator"]
