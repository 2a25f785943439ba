"""Default implementation of file system operations."""
import logging
import os
from pathlib import Path
from typing import List

from .file_system_interface import FileSystemInterface

logger = logging.getLogger('imports_analyzer.fs')

ENCODINGS = ('utf-8', 'latin-1', 'cp1252')


class DefaultFileSystem(FileSystemInterface):
    """File system operations backed by the local disk."""
    def read_file(self, path: Path) -> str:
        """Read a file, trying each supported encoding in turn.

        Args:
            path: Path to the file to read

        Returns:
            The file's contents

        Raises:
            FileNotFoundError: If the file cannot be found
            IOError: If the file cannot be read with any supported encoding
        """
        path = Path(str(path))
        for encoding in ENCODINGS:
            try:
                with open(path, 'r', encoding=encoding) as f:
                    return f.read()
            except UnicodeDecodeError:
                logger.debug(f"Could not decode {path} as {encoding}")
                continue

        raise IOError(f"Could not read file {path} with any supported encoding")

    def exists(self, path: Path) -> bool:
        return Path(str(path)).exists()

    def list_dir(self, directory: Path) -> List[str]:
        try:
            return os.listdir(directory)
        except OSError as e:
            logger.debug(f"Cannot list directory {directory}: {e}")
            return []
