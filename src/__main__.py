"""Main module for import-sniff."""
import argparse
import json
import logging
import sys
import time
from enum import IntEnum
from pathlib import Path
from typing import Optional

from rich.console import Console

from src.exporters import build_json_document, create_exporter
from src.imports_analyzer.analyzer import ImportsAnalyzer
from src.imports_analyzer.analyzer_types import ExportFormat
from src.imports_analyzer.config import load_config
from src.imports_analyzer.error_handling import (
    CompositeErrorHandler,
    ConsoleErrorHandler,
    ErrorHandler,
    FileErrorHandler,
)
from src.imports_analyzer.file_scanner import FileScanner
from src.imports_analyzer.logging_config import setup_logging
from src.imports_analyzer.reporter import RichProgress, print_report

logger = logging.getLogger('imports_analyzer.cli')

ERROR_LOG_NAME = 'errors.log'


class ExitCode(IntEnum):
    """Process exit codes."""
    SUCCESS = 0
    GENERAL_ERROR = 1
    VALIDATION_FAILED = 2


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Detect unused and broken imports')
    parser.add_argument('--project-path', type=str, help='Path to project to analyze (default: cwd)')
    parser.add_argument('--json', action='store_true', help='Print the report as JSON')
    parser.add_argument('--quiet', action='store_true', help='Only print findings')
    parser.add_argument('--export', type=str, choices=[f.value for f in ExportFormat], help='Export format')
    parser.add_argument('--output', type=str, help='Output file path for --export')
    parser.add_argument('--config', type=str, help='Project config file (default: sniff.toml lookup)')
    parser.add_argument('--log-dir', type=str, help='Directory for the debug log and error log files')
    args = parser.parse_args(args)
    args.project_path = Path(args.project_path) if args.project_path else Path.cwd()
    if args.export and not args.output:
        parser.error('--export requires --output')
    return args


def build_error_handler(log_dir: Optional[str] = None) -> ErrorHandler:
    """Console error handler, plus an error log file when a log directory is given."""
    console_handler = ConsoleErrorHandler()
    if not log_dir:
        return console_handler

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    return CompositeErrorHandler([console_handler, FileErrorHandler(str(log_path / ERROR_LOG_NAME))])


def run(args, console: Optional[Console] = None) -> int:
    """Run the analysis and return the exit code."""
    console = console or Console()
    config = load_config(args.project_path, args.config)

    if not args.quiet and not args.json:
        console.print("[bold blue]Scanning for unused and broken imports...[/bold blue]")

    started = time.monotonic()
    files = FileScanner(config).find_source_files(config.project_root)
    analyzer = ImportsAnalyzer(config, error_handler=build_error_handler(args.log_dir))

    with RichProgress("Analyzing imports", console=console, disable=args.quiet or args.json) as progress:
        report = analyzer.analyze(files, progress=progress)
    duration_ms = int((time.monotonic() - started) * 1000)

    if args.json:
        print(json.dumps(build_json_document(report, duration_ms), indent=2, default=str))
    else:
        print_report(report, console, quiet=args.quiet)

    if args.export:
        output_file = Path(args.output)
        create_exporter(ExportFormat(args.export)).export(report, output_file)
        logger.info(f"Exported report to {output_file}")

    return ExitCode.VALIDATION_FAILED if report.has_issues else ExitCode.SUCCESS


def main(args=None):
    """Main entry point."""
    args = parse_args(args)
    setup_logging(args.log_dir)
    logger.debug("Starting import-sniff CLI")
    try:
        exit_code = run(args)
    except KeyboardInterrupt:
        sys.exit(ExitCode.GENERAL_ERROR)
    except OSError as e:
        logger.error(f"Analysis failed: {e}")
        sys.exit(ExitCode.GENERAL_ERROR)
    sys.exit(int(exit_code))


if __name__ == '__main__':
    main()
