"""Import target resolution and validity checks."""
import logging
from pathlib import Path
from typing import Optional

from .analyzer_types import BrokenImport, BrokenImportType, ImportStatement
from .builtin_modules import is_builtin_module
from .config import ImportsAnalyzerConfig
from .default_file_system import DefaultFileSystem
from .file_system_interface import FileSystemInterface
from .resolver import PathAliasResolver

logger = logging.getLogger('imports_analyzer.validation')

SUPPORTED_EXTENSIONS = ('.js', '.ts', '.jsx', '.tsx', '.json', '.mjs', '.cjs')


def import_exists(base_path: Path, fs: Optional[FileSystemInterface] = None) -> bool:
    """Probe for an import target the way a module loader would.

    Tries the exact path, the path with each supported extension appended,
    then ``index.<ext>`` inside the path.
    """
    fs = fs or DefaultFileSystem()
    base_path = Path(base_path)

    if fs.exists(base_path):
        return True

    for ext in SUPPORTED_EXTENSIONS:
        if fs.exists(Path(f"{base_path}{ext}")):
            return True

    for ext in SUPPORTED_EXTENSIONS:
        if fs.exists(base_path / f"index{ext}"):
            return True

    return False


def resolve_import_path(current_dir: Path, import_path: str) -> Path:
    """Walk ``import_path`` segment by segment from ``current_dir``."""
    resolved = Path(current_dir)
    for part in import_path.split('/'):
        if part in ('', '.'):
            continue
        if part == '..':
            resolved = resolved.parent
        else:
            resolved = resolved / part
    return resolved


def find_similar_file(current_dir: Path, import_path: str,
                      fs: Optional[FileSystemInterface] = None) -> Optional[str]:
    """Suggest a nearby file whose stem contains the import's final segment.

    The current directory is searched before its parent; entries are sorted
    so the suggestion does not depend on directory iteration order.
    """
    fs = fs or DefaultFileSystem()
    filename = import_path.rstrip('/').split('/')[-1].lower()
    if filename in ('', '.', '..'):
        return None

    current_dir = Path(current_dir)
    for search_dir, prefix in ((current_dir, './'), (current_dir.parent, '../')):
        for entry_name in sorted(fs.list_dir(search_dir)):
            if filename in Path(entry_name).stem.lower():
                return f"{prefix}{entry_name}"
    return None


def package_name_for(import_path: str) -> str:
    """Derive the installable package name from a bare import path.

    ``@scope/pkg/sub`` gives ``@scope/pkg``; ``pkg/sub`` gives ``pkg``.
    """
    if import_path.startswith('@'):
        parts = import_path.split('/', 2)
        if len(parts) >= 2:
            return f"{parts[0]}/{parts[1]}"
        return import_path
    return import_path.split('/')[0]


def _broken(current_file: Path, statement: ImportStatement, error_type: BrokenImportType,
            suggestion: Optional[str]) -> BrokenImport:
    return BrokenImport(
        file=str(current_file),
        line=statement.line_number,
        import_statement=statement.text,
        import_path=statement.import_path,
        error_type=error_type,
        suggestion=suggestion,
    )


def check_package_import(current_file: Path, statement: ImportStatement,
                         config: ImportsAnalyzerConfig,
                         fs: FileSystemInterface) -> Optional[BrokenImport]:
    """Look the import's package up under the dependency directory."""
    package_name = package_name_for(statement.import_path)
    if not package_name:
        logger.debug(f"No package name in '{statement.import_path}'")
        return _broken(current_file, statement, BrokenImportType.FILE_NOT_FOUND, None)

    if config.allow_builtin_modules and is_builtin_module(package_name):
        return None

    if fs.exists(config.dependency_root() / package_name):
        return None

    logger.debug(f"Package '{package_name}' not found under {config.dependency_root()}")
    return _broken(
        current_file, statement, BrokenImportType.MODULE_NOT_INSTALLED,
        f"Run: {config.install_command} {package_name}",
    )


def check_import_validity(current_file: Path,
                          statement: ImportStatement,
                          resolver: Optional[PathAliasResolver],
                          config: ImportsAnalyzerConfig,
                          fs: Optional[FileSystemInterface] = None) -> Optional[BrokenImport]:
    """Classify an import as resolvable or broken.

    Args:
        current_file: File containing the import
        statement: The recognised import statement
        resolver: Alias resolver, None when aliasing is disabled
        config: Run configuration (dependency directory, install command)
        fs: File system used for existence probes

    Returns:
        A BrokenImport, or None when the target was found
    """
    fs = fs or DefaultFileSystem()
    current_file = Path(current_file)
    import_path = statement.import_path

    if not import_path.startswith('.'):
        alias_match = resolver.match(import_path) if resolver is not None else None
        if alias_match is not None:
            if import_exists(alias_match.resolved_path, fs):
                return None
            return _broken(
                current_file, statement, BrokenImportType.FILE_NOT_FOUND,
                f"Path alias '{alias_match.pattern}' resolves '{import_path}' to "
                f"'{alias_match.resolved_path}' but file not found",
            )
        if import_path.startswith('/'):
            if import_exists(Path(import_path), fs):
                return None
            return _broken(current_file, statement, BrokenImportType.FILE_NOT_FOUND, None)
        return check_package_import(current_file, statement, config, fs)

    current_dir = current_file.parent
    resolved_path = resolve_import_path(current_dir, import_path)
    if import_exists(resolved_path, fs):
        return None

    logger.debug(f"Relative import '{import_path}' in {current_file} resolves to missing {resolved_path}")
    return _broken(
        current_file, statement, BrokenImportType.FILE_NOT_FOUND,
        find_similar_file(current_dir, import_path, fs),
    )
