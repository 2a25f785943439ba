"""Unused and broken import detection for JavaScript/TypeScript projects."""

__version__ = "0.1.0"

from .imports_analyzer.config import ImportsAnalyzerConfig, load_config
from .imports_analyzer.analyzer import ImportsAnalyzer, analyze_project
from .imports_analyzer.analyzer_types import ExportFormat, ImportsReport
from .imports_analyzer.error_handling import ConsoleErrorHandler, FileErrorHandler, CompositeErrorHandler

__all__ = [
    "ImportsAnalyzerConfig",
    "load_config",
    "ImportsAnalyzer",
    "analyze_project",
    "ExportFormat",
    "ImportsReport",
    "ConsoleErrorHandler",
    "FileErrorHandler",
    "CompositeErrorHandler",
]
