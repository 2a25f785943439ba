"""Source file discovery for the imports analyzer."""
import fnmatch
import logging
import os
from pathlib import Path
from typing import List, Union

from .config import ImportsAnalyzerConfig

logger = logging.getLogger('imports_analyzer.scanner')


class FileScanner:
    """Finds source files, applying extension filters and exclusions."""

    def __init__(self, config: ImportsAnalyzerConfig):
        self.config = config
        self.extensions = {f".{ext.lstrip('.')}" for ext in config.extensions}

    def is_excluded_dir(self, name: str) -> bool:
        """Check a directory name against the excluded directory patterns."""
        return any(fnmatch.fnmatchcase(name, pattern) for pattern in self.config.excluded_dirs)

    def is_excluded_file(self, name: str) -> bool:
        """Check a file name against the excluded file patterns."""
        return any(fnmatch.fnmatchcase(name, pattern) for pattern in self.config.excluded_files)

    def has_supported_extension(self, path: Union[str, Path]) -> bool:
        return Path(path).suffix in self.extensions

    def find_source_files(self, directory: Union[str, Path]) -> List[Path]:
        """Find source files under ``directory``.

        Directories and files are visited in sorted order so the discovery
        order, and therefore the report order, is stable.

        Returns:
            List of file paths in discovery order
        """
        directory = Path(directory)
        if not directory.is_dir():
            logger.debug(f"Not a directory, nothing to scan: {directory}")
            return []

        source_files = []
        for root, dirs, files in os.walk(directory):
            excluded = [d for d in dirs if self.is_excluded_dir(d)]
            for name in excluded:
                logger.debug(f"Skipping excluded directory: {Path(root) / name}")
            dirs[:] = sorted(d for d in dirs if d not in excluded)

            for name in sorted(files):
                if not self.has_supported_extension(name) or self.is_excluded_file(name):
                    continue
                source_files.append(Path(root) / name)

        logger.debug(f"Found {len(source_files)} source files under {directory}")
        return source_files
