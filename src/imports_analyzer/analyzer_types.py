"""Type definitions for the imports analyzer."""
from dataclasses import dataclass, field, asdict
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union


class ImportType(str, Enum):
    """Shape of the bindings an import statement introduces."""
    DEFAULT = 'DefaultImport'
    NAMED = 'NamedImport'
    NAMESPACE = 'NamespaceImport'
    SIDE_EFFECT = 'SideEffectImport'


class BrokenImportType(str, Enum):
    """Why an import target could not be located."""
    FILE_NOT_FOUND = 'FileNotFound'
    MODULE_NOT_INSTALLED = 'ModuleNotInstalled'
    INVALID_PATH = 'InvalidPath'  # reserved, never produced


@dataclass(frozen=True)
class ParsedImport:
    """Bindings introduced by one import statement."""
    import_type: ImportType
    default_import: Optional[str] = None
    named_imports: Tuple[str, ...] = ()
    namespace_import: Optional[str] = None

    def bindings(self) -> List[str]:
        """Return every bound name: default, named (source order), namespace."""
        names = []
        if self.default_import:
            names.append(self.default_import)
        names.extend(self.named_imports)
        if self.namespace_import:
            names.append(self.namespace_import)
        return names


@dataclass(frozen=True)
class ImportStatement:
    """A grammar-recognised import line."""
    line_number: int
    text: str
    import_path: str
    parsed: ParsedImport


@dataclass
class AnalysisError:
    """Represents an error encountered while analyzing a file."""
    error_type: str
    message: str
    file: Optional[Union[str, Path]] = None
    line_number: Optional[int] = None
    context: Optional[str] = None

    @property
    def file_path(self) -> str:
        """Return the file path as a string."""
        return str(self.file) if self.file else ""

    def __str__(self) -> str:
        parts = []
        if self.error_type:
            parts.append(f"[{self.error_type}]")
        if self.file:
            parts.append(f"in {self.file}")
        if self.line_number is not None and self.line_number > 0:
            parts.append(f"at line {self.line_number}")
        if self.message:
            parts.append(self.message)
        if self.context:
            parts.append(f"({self.context})")
        return " ".join(parts)


@dataclass
class UnusedImport:
    """An import line with at least one binding never referenced in its file."""
    file: str
    line: int
    import_statement: str
    unused_items: List[str]
    import_type: ImportType


@dataclass
class BrokenImport:
    """An import whose target cannot be found on disk or among dependencies."""
    file: str
    line: int
    import_statement: str
    import_path: str
    error_type: BrokenImportType
    suggestion: Optional[str] = None


@dataclass
class FileAnalysis:
    """Results of import analysis for a single file."""
    file: str
    total_imports: int = 0
    unused_imports: List[UnusedImport] = field(default_factory=list)
    broken_imports: List[BrokenImport] = field(default_factory=list)
    error: Optional[AnalysisError] = None


@dataclass
class ImportsSummary:
    """Run-level counters."""
    files_scanned: int = 0
    total_imports: int = 0
    unused_imports: int = 0
    broken_imports: int = 0
    potential_savings: str = "0 lines"
    unreadable_files: int = 0

    def __str__(self) -> str:
        return (
            f"Files scanned: {self.files_scanned}\n"
            f"Total imports: {self.total_imports}\n"
            f"Unused imports: {self.unused_imports}\n"
            f"Broken imports: {self.broken_imports}\n"
            f"Potential savings: {self.potential_savings}\n"
            f"Unreadable files: {self.unreadable_files}\n"
        )


@dataclass
class ImportsReport:
    """Aggregate results of an imports analysis run."""
    unused_imports: List[UnusedImport] = field(default_factory=list)
    broken_imports: List[BrokenImport] = field(default_factory=list)
    summary: ImportsSummary = field(default_factory=ImportsSummary)
    errors: List[AnalysisError] = field(default_factory=list)

    @property
    def has_issues(self) -> bool:
        """True when any unused or broken import was found."""
        return bool(self.unused_imports) or bool(self.broken_imports)

    def to_dict(self) -> Dict[str, Any]:
        """Return the findings and summary as JSON-serialisable data."""
        return {
            'unused_imports': [_enum_values(asdict(item)) for item in self.unused_imports],
            'broken_imports': [_enum_values(asdict(item)) for item in self.broken_imports],
            'summary': asdict(self.summary),
        }


def _enum_values(data: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value.value if isinstance(value, Enum) else value for key, value in data.items()}


class ExportFormat(str, Enum):
    """Export format options."""
    JSON = 'json'
    MARKDOWN = 'md'
    CSV = 'csv'
