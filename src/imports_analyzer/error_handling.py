"""Error handling for the imports analyzer."""
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from rich.console import Console
from rich.markup import escape

from .analyzer_types import AnalysisError


@runtime_checkable
class ErrorHandler(Protocol):
    """Protocol for error handlers."""

    def handle_error(self, error: AnalysisError) -> None:
        """Handle an analysis error."""
        ...

    def get_errors(self) -> List[AnalysisError]:
        """Get all accumulated errors."""
        ...


class ConsoleErrorHandler:
    """Error handler that outputs to the console using rich."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)
        self.errors: List[AnalysisError] = []

    def handle_error(self, error: AnalysisError) -> None:
        """Handle an analysis error by printing it to the console."""
        self.errors.append(error)

        location = escape(error.file_path)
        if error.line_number is not None:
            location += f" (line {error.line_number})"

        message = f"[red]{error.error_type}[/red]: {escape(error.message)}"
        if error.context:
            message += f"\n  Context: {escape(error.context)}"

        self.console.print(f"{location}: {message}")

    def get_errors(self) -> List[AnalysisError]:
        """Get all accumulated errors."""
        return self.errors.copy()


class FileErrorHandler:
    """Error handler that writes to a log file."""

    def __init__(self, log_file: str):
        self.log_file = log_file
        self.errors: List[AnalysisError] = []

    def handle_error(self, error: AnalysisError) -> None:
        """Handle an analysis error by appending it to the log file."""
        self.errors.append(error)

        with open(self.log_file, 'a', encoding='utf-8') as f:
            f.write(f"{format_error(error)}\n")

    def get_errors(self) -> List[AnalysisError]:
        """Get all accumulated errors."""
        return self.errors.copy()


class CompositeErrorHandler:
    """Error handler that delegates to multiple handlers."""

    def __init__(self, handlers: List[ErrorHandler]):
        self.handlers = handlers
        self.errors: List[AnalysisError] = []

    def handle_error(self, error: AnalysisError) -> None:
        """Handle an analysis error by delegating to all handlers."""
        self.errors.append(error)
        for handler in self.handlers:
            handler.handle_error(error)

    def get_errors(self) -> List[AnalysisError]:
        """Get all accumulated errors."""
        return self.errors.copy()


def format_error(error: AnalysisError) -> str:
    """Format an analysis error for display."""
    location = error.file_path
    if error.line_number is not None:
        location += f" (line {error.line_number})"
    message = f"{location}: {error.error_type}: {error.message}"
    if error.context:
        message += f" ({error.context})"
    return message


def format_error_json(error: AnalysisError) -> Dict[str, Any]:
    """Format an analysis error as JSON."""
    location = error.file_path
    if error.line_number is not None:
        location += f" (line {error.line_number})"
    return {
        'location': location,
        'error_type': error.error_type,
        'message': error.message,
        'context': error.context
    }
