"""Imports analyzer package."""
from .analyzer import ImportsAnalyzer, analyze_project, calculate_savings
from .analyzer_types import (
    AnalysisError,
    BrokenImport,
    BrokenImportType,
    FileAnalysis,
    ImportStatement,
    ImportsReport,
    ImportsSummary,
    ImportType,
    ParsedImport,
    UnusedImport,
)
from .parser import extract_imports, parse_import_statement
from .patterns import ImportPatterns, build_patterns
from .resolver import PathAliasResolver
from .usage import collect_used_identifiers, find_unused_items
from .validation import check_import_validity, import_exists

__all__ = [
    'ImportsAnalyzer',
    'analyze_project',
    'calculate_savings',
    'AnalysisError',
    'BrokenImport',
    'BrokenImportType',
    'FileAnalysis',
    'ImportStatement',
    'ImportsReport',
    'ImportsSummary',
    'ImportType',
    'ParsedImport',
    'UnusedImport',
    'extract_imports',
    'parse_import_statement',
    'ImportPatterns',
    'build_patterns',
    'PathAliasResolver',
    'collect_used_identifiers',
    'find_unused_items',
    'check_import_validity',
    'import_exists',
]
