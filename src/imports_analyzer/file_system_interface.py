"""File system interface for the imports analyzer."""
from pathlib import Path
from typing import List


class FileSystemInterface:
    """Interface for file system operations."""
    def read_file(self, path: Path) -> str:
        """Read a file's contents.

        Args:
            path: Path to the file to read

        Returns:
            The file's contents as a string

        Raises:
            FileNotFoundError: If the file doesn't exist
            IOError: If there's an error reading the file
        """
        raise NotImplementedError

    def exists(self, path: Path) -> bool:
        """Check if a file or directory exists."""
        raise NotImplementedError

    def list_dir(self, directory: Path) -> List[str]:
        """List entry names in a directory.

        Returns:
            Entry names, empty if the directory cannot be listed
        """
        raise NotImplementedError
