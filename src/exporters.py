"""Export functionality for imports reports."""
import csv
import json
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from src import __version__
from src.imports_analyzer.analyzer_types import ExportFormat, ImportsReport
from src.imports_analyzer.error_handling import format_error, format_error_json

COMMAND_NAME = 'imports'


def analysis_status(report: ImportsReport) -> str:
    """Overall status of a run: error, warning or success."""
    if report.broken_imports:
        return 'error'
    if report.unused_imports:
        return 'warning'
    return 'success'


def build_json_document(report: ImportsReport, duration_ms: Optional[int] = None) -> Dict[str, Any]:
    """Wrap a report in the standard response envelope."""
    summary: Dict[str, Any] = {
        'total_items': report.summary.files_scanned,
        'issues_found': report.summary.unused_imports + report.summary.broken_imports,
        'status': analysis_status(report),
    }
    if duration_ms is not None:
        summary['duration_ms'] = duration_ms

    data = report.to_dict()
    data['errors'] = [format_error_json(error) for error in report.errors]

    return {
        'command': COMMAND_NAME,
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'version': __version__,
        'data': data,
        'summary': summary,
    }


class BaseExporter(ABC):
    """Base class for exporters."""

    @abstractmethod
    def export(self, report: ImportsReport, output_file: Path) -> None:
        """Export an imports report.

        Args:
            report: The report to export
            output_file: Path to save the exported report

        Raises:
            IOError: If the output file cannot be written
        """
        raise NotImplementedError("Exporter subclasses must implement export method")


class JSONExporter(BaseExporter):
    """JSON exporter for imports reports."""

    def export(self, report: ImportsReport, output_file: Path) -> None:
        """Export the report wrapped in the standard JSON envelope."""
        with open(output_file, 'w', encoding='utf-8') as f:
            json.dump(build_json_document(report), f, indent=4, default=str)


class MarkdownExporter(BaseExporter):
    """Markdown exporter for imports reports."""

    def export(self, report: ImportsReport, output_file: Path) -> None:
        """Export the report to Markdown."""
        summary = report.summary
        content = [
            "# Imports Analysis Report\n",
            "## Summary\n",
            f"- Files scanned: {summary.files_scanned}",
            f"- Total imports: {summary.total_imports}",
            f"- Unused imports: {summary.unused_imports}",
            f"- Broken imports: {summary.broken_imports}",
            f"- Unreadable files: {summary.unreadable_files}",
            f"- Potential savings: {summary.potential_savings}\n",
            "## Unused Imports\n",
            *[f"- {item.file} (line {item.line}): `{item.import_statement}`\n  - unused: {', '.join(item.unused_items)}"
              for item in report.unused_imports],
            "\n## Broken Imports\n",
            *[f"- {item.file} (line {item.line}): `{item.import_path}` ({item.error_type.value})"
              + (f"\n  - suggestion: {item.suggestion}" if item.suggestion else "")
              for item in report.broken_imports],
            "\n## Errors\n",
            *[f"- {format_error(error)}" for error in report.errors],
        ]

        with open(output_file, 'w', encoding='utf-8') as f:
            f.write('\n'.join(content))


class CSVExporter(BaseExporter):
    """CSV exporter for imports reports."""

    def export(self, report: ImportsReport, output_file: Path) -> None:
        """Export the report to a directory of CSV files named after ``output_file``."""
        csv_dir = output_file.parent / output_file.stem
        csv_dir.mkdir(parents=True, exist_ok=True)

        with open(csv_dir / "summary.csv", 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(['Metric', 'Value'])
            writer.writerows([
                ['Files Scanned', report.summary.files_scanned],
                ['Total Imports', report.summary.total_imports],
                ['Unused Imports', report.summary.unused_imports],
                ['Broken Imports', report.summary.broken_imports],
                ['Unreadable Files', report.summary.unreadable_files],
                ['Potential Savings', report.summary.potential_savings],
            ])

        with open(csv_dir / "unused_imports.csv", 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(['File', 'Line', 'Import Type', 'Unused Item', 'Statement'])
            writer.writerows([
                [item.file, item.line, item.import_type.value, name, item.import_statement]
                for item in report.unused_imports
                for name in item.unused_items
            ])

        with open(csv_dir / "broken_imports.csv", 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(['File', 'Line', 'Import Path', 'Error Type', 'Suggestion'])
            writer.writerows([
                [item.file, item.line, item.import_path, item.error_type.value, item.suggestion or '']
                for item in report.broken_imports
            ])


def create_exporter(format: ExportFormat) -> BaseExporter:
    """Create an exporter based on the specified format."""
    exporters = {
        ExportFormat.JSON: JSONExporter,
        ExportFormat.MARKDOWN: MarkdownExporter,
        ExportFormat.CSV: CSVExporter
    }

    if not isinstance(format, ExportFormat):
        raise ValueError(f"Unsupported export format: {format}")

    return exporters[format]()
