"""Imports analyzer: unused and broken import detection across a file set."""
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from .analyzer_types import (
    AnalysisError,
    FileAnalysis,
    ImportsReport,
    ImportsSummary,
    UnusedImport,
)
from .config import ImportsAnalyzerConfig
from .default_file_system import DefaultFileSystem
from .error_handling import ErrorHandler
from .file_scanner import FileScanner
from .file_system_interface import FileSystemInterface
from .parser import extract_imports
from .patterns import ImportPatterns, build_patterns
from .resolver import PathAliasResolver
from .usage import collect_used_identifiers, find_unused_items
from .validation import check_import_validity

logger = logging.getLogger('imports_analyzer.core')

# Called with (files_done, files_total) after each file in sequential mode
ProgressCallback = Callable[[int, int], None]


def calculate_savings(unused_imports: Sequence[UnusedImport]) -> str:
    """Human-readable estimate of the code removable by dropping unused imports."""
    total_lines = len(unused_imports)
    if total_lines == 0:
        return "0 lines"
    return f"~{total_lines} lines of code"


class ImportsAnalyzer:
    """Finds unused and broken imports.

    Per-file analyses share nothing but the read-only pattern table and
    alias resolver, so they can run in any order or in parallel.
    """

    def __init__(self, config: ImportsAnalyzerConfig,
                 fs: Optional[FileSystemInterface] = None,
                 patterns: Optional[ImportPatterns] = None,
                 error_handler: Optional[ErrorHandler] = None):
        self.config = config
        self.fs = fs or DefaultFileSystem()
        self.patterns = patterns or build_patterns()
        self.error_handler = error_handler
        self.project_root = Path(config.project_root).absolute()

    def load_resolver(self) -> Optional[PathAliasResolver]:
        """Load the project's alias configuration, None when aliasing is disabled."""
        resolver = PathAliasResolver.from_project_root(self.project_root, self.config.alias_config_files, self.fs)
        if resolver is None:
            logger.debug("Path aliasing disabled: no usable alias configuration")
        return resolver

    def analyze_file(self, path: Union[str, Path],
                     resolver: Optional[PathAliasResolver] = None) -> FileAnalysis:
        """Analyze the imports of one file.

        Read failures are returned on the FileAnalysis, never raised.
        """
        path = Path(path)
        str_path = str(path)

        try:
            content = self.fs.read_file(path)
        except OSError as e:
            logger.warning(f"Could not read {str_path}: {e}")
            return FileAnalysis(
                file=str_path,
                error=AnalysisError(
                    error_type='FileReadError',
                    message=str(e),
                    file=str_path,
                    context='File skipped',
                ),
            )

        lines = content.splitlines()
        statements = extract_imports(lines, self.patterns)
        used_identifiers = collect_used_identifiers(lines, self.patterns)

        analysis = FileAnalysis(file=str_path, total_imports=len(statements))
        for statement in statements:
            unused_items = find_unused_items(statement.parsed, used_identifiers)
            if unused_items:
                analysis.unused_imports.append(UnusedImport(
                    file=str_path,
                    line=statement.line_number,
                    import_statement=statement.text,
                    unused_items=unused_items,
                    import_type=statement.parsed.import_type,
                ))

            broken = check_import_validity(path, statement, resolver, self.config, self.fs)
            if broken is not None:
                analysis.broken_imports.append(broken)

        logger.debug(
            f"{str_path}: {analysis.total_imports} imports, "
            f"{len(analysis.unused_imports)} unused, {len(analysis.broken_imports)} broken"
        )
        return analysis

    def analyze(self, files: Sequence[Union[str, Path]],
                progress: Optional[ProgressCallback] = None) -> ImportsReport:
        """Analyze a file set and aggregate the results.

        Above ``parallel_threshold`` files are processed sequentially and
        ``progress`` is advanced after each one; smaller sets fan out over a
        thread pool. Results are concatenated in ``files`` order either way.

        Args:
            files: Files to analyze, in discovery order
            progress: Optional progress callback for the sequential mode

        Returns:
            The aggregated report
        """
        files = [Path(f) for f in files]
        files_count = len(files)
        resolver = self.load_resolver()

        logger.info(f"Analyzing imports in {files_count} files under {self.project_root}")

        if files_count > self.config.parallel_threshold:
            analyses = []
            for index, path in enumerate(files):
                analyses.append(self.analyze_file(path, resolver))
                if progress is not None:
                    progress(index + 1, files_count)
        elif files:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                # map() yields in submission order regardless of completion order
                analyses = list(executor.map(lambda p: self.analyze_file(p, resolver), files))
        else:
            analyses = []

        return self.aggregate(analyses)

    def aggregate(self, analyses: Sequence[FileAnalysis]) -> ImportsReport:
        """Combine per-file results, preserving their order."""
        report = ImportsReport()
        total_imports = 0

        for analysis in analyses:
            if analysis.error is not None:
                report.errors.append(analysis.error)
                if self.error_handler is not None:
                    self.error_handler.handle_error(analysis.error)
            total_imports += analysis.total_imports
            report.unused_imports.extend(analysis.unused_imports)
            report.broken_imports.extend(analysis.broken_imports)

        report.summary = ImportsSummary(
            files_scanned=len(analyses),
            total_imports=total_imports,
            unused_imports=len(report.unused_imports),
            broken_imports=len(report.broken_imports),
            potential_savings=calculate_savings(report.unused_imports),
            unreadable_files=len(report.errors),
        )
        return report


def analyze_project(config: ImportsAnalyzerConfig,
                    progress: Optional[ProgressCallback] = None,
                    error_handler: Optional[ErrorHandler] = None) -> ImportsReport:
    """Discover the project's source files and analyze them."""
    files = FileScanner(config).find_source_files(config.project_root)
    analyzer = ImportsAnalyzer(config, error_handler=error_handler)
    return analyzer.analyze(files, progress=progress)
