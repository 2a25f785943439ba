"""Test fixtures for the imports analyzer."""
from pathlib import Path
from typing import Dict, List, Union

import pytest

from src.imports_analyzer.config import ImportsAnalyzerConfig
from src.imports_analyzer.file_system_interface import FileSystemInterface
from src.imports_analyzer.patterns import build_patterns


@pytest.fixture(scope='session')
def patterns():
    """Shared pattern table."""
    return build_patterns()


@pytest.fixture
def config(temp_dir):
    """Config rooted at the temporary directory."""
    return ImportsAnalyzerConfig(project_root=temp_dir)


class MockFileSystem(FileSystemInterface):
    """In-memory file system for testing."""

    def __init__(self, base_dir: Union[str, Path], mock_files: Dict[str, str],
                 unreadable: List[str] = ()):
        """Initialize mock file system.

        Args:
            base_dir: Base directory for mock files
            mock_files: Relative file paths and their contents
            unreadable: Relative paths whose reads raise PermissionError
        """
        self.base_dir = Path(base_dir)
        self.mock_files = {self.base_dir / k: v for k, v in mock_files.items()}
        self.unreadable = {self.base_dir / k for k in unreadable}
        self.reads: List[Path] = []

    def _absolute(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        return path if path.is_absolute() else self.base_dir / path

    def read_file(self, path: Union[str, Path]) -> str:
        path = self._absolute(path)
        self.reads.append(path)
        if path in self.unreadable:
            raise PermissionError(f"Permission denied: '{path}'")
        if path in self.mock_files:
            return self.mock_files[path]
        raise FileNotFoundError(f"File not found: {path}")

    def _is_dir(self, path: Union[str, Path]) -> bool:
        path = self._absolute(path)
        return any(path in f.parents for f in self.mock_files)

    def exists(self, path: Union[str, Path]) -> bool:
        path = self._absolute(path)
        return path in self.mock_files or path in self.unreadable or self._is_dir(path)

    def list_dir(self, directory: Union[str, Path]) -> List[str]:
        directory = self._absolute(directory)
        names = {f.relative_to(directory).parts[0] for f in self.mock_files if directory in f.parents}
        return list(names)


@pytest.fixture
def mock_fs_factory(temp_dir):
    """Build a MockFileSystem rooted at the temporary directory."""
    def factory(files: Dict[str, str], unreadable: List[str] = ()) -> MockFileSystem:
        return MockFileSystem(temp_dir, files, unreadable)
    return factory
