"""Pattern extraction and per-file recorders."""

from .base import Recorder
from .dependencies import DependencyRecorder
from .exports import ExportRecorder
from .patterns import PatternExtractor, UnknownPattern

__all__ = [
    "DependencyRecorder",
    "ExportRecorder",
    "PatternExtractor",
    "Recorder",
    "UnknownPattern",
]
