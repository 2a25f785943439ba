"""Configuration management for the imports analyzer."""
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import tomli
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger('imports_analyzer.config')

CONFIG_FILE_NAMES = ['sniff.toml', 'sniff-check.toml', '.sniff.toml', '.sniffrc.toml']


class ImportsAnalyzerConfig(BaseSettings):
    """Configuration settings for the imports analyzer."""

    project_root: Path = Field(
        default_factory=Path.cwd,
        description="Project root; package lookups and alias configuration are relative to it"
    )

    # File discovery
    extensions: List[str] = Field(
        default=['ts', 'tsx', 'js', 'jsx'],
        description="Extensions of the files to analyze"
    )
    excluded_dirs: List[str] = Field(
        default=['node_modules', '.next', 'dist', '.git', 'target', 'build'],
        description="Directory names (glob patterns allowed) skipped during discovery"
    )
    excluded_files: List[str] = Field(
        default=['*.min.js', '*.bundle.js'],
        description="File name patterns skipped during discovery"
    )

    # Resolution
    dependency_dir: str = Field(
        default='node_modules',
        description="Directory under the project root holding installed packages"
    )
    install_command: str = Field(
        default='npm install',
        description="Command suggested for packages that are not installed"
    )
    alias_config_files: List[str] = Field(
        default=['tsconfig.json', 'jsconfig.json'],
        description="Candidate alias configuration files, first existing one wins"
    )
    allow_builtin_modules: bool = Field(
        default=True,
        description="Treat runtime built-in modules (fs, path, node:*) as resolvable"
    )

    # Execution
    parallel_threshold: int = Field(
        default=50,
        description="Above this many files, analyze sequentially with progress reporting"
    )
    max_workers: Optional[int] = Field(
        default=None,
        description="Thread pool size for the parallel mode (None lets the executor decide)"
    )

    model_config = SettingsConfigDict(env_prefix='IMPORT_SNIFF_', case_sensitive=False)

    def dependency_root(self) -> Path:
        """Directory holding installed packages."""
        return Path(self.project_root) / self.dependency_dir

    def merge_with(self, overrides: Dict[str, Any]) -> 'ImportsAnalyzerConfig':
        """Return a copy with ``overrides`` applied on top of this config."""
        return ImportsAnalyzerConfig(**{**self.model_dump(), **overrides})


def find_config_file(project_root: Path) -> Optional[Path]:
    """Return the first existing project configuration file."""
    for name in CONFIG_FILE_NAMES:
        candidate = project_root / name
        if candidate.exists():
            return candidate
    return None


def parse_config_file(config_file: Path) -> Dict[str, Any]:
    """Read the ``[large_files]``, ``[files]`` and ``[imports]`` tables of a TOML config file.

    Returns:
        Config overrides; empty when the file cannot be parsed
    """
    try:
        with open(config_file, 'rb') as f:
            data = tomli.load(f)
    except (OSError, tomli.TOMLDecodeError) as e:
        logger.error(f"Error parsing config file {config_file}: {e}")
        return {}

    overrides: Dict[str, Any] = {}
    # [large_files] is the sniff-check layout; [files] wins when both are set
    for table, keys in (('large_files', ('excluded_dirs', 'excluded_files')),
                        ('files', ('extensions', 'excluded_dirs', 'excluded_files'))):
        section = data.get(table, {})
        if isinstance(section, dict):
            for key in keys:
                if key in section:
                    overrides[key] = section[key]

    imports = data.get('imports', {})
    if isinstance(imports, dict):
        for key in ('dependency_dir', 'install_command', 'alias_config_files',
                    'allow_builtin_modules', 'parallel_threshold', 'max_workers'):
            if key in imports:
                overrides[key] = imports[key]

    logger.debug(f"Loaded config overrides from {config_file}: {overrides}")
    return overrides


def load_config(project_root: Union[str, Path, None] = None,
                config_file: Union[str, Path, None] = None) -> ImportsAnalyzerConfig:
    """Build the run configuration.

    Defaults come from the settings class (and ``IMPORT_SNIFF_*`` environment
    variables); a project config file, when present, overrides them.
    """
    root = Path(project_root).absolute() if project_root else Path.cwd()

    if config_file is not None:
        config_path = Path(config_file)
        if not config_path.is_absolute():
            config_path = root / config_path
    else:
        config_path = find_config_file(root)

    overrides: Dict[str, Any] = {'project_root': root}
    if config_path is not None and config_path.exists():
        overrides.update(parse_config_file(config_path))
    elif config_file is not None:
        logger.error(f"Config file not found: {config_path}")

    try:
        return ImportsAnalyzerConfig(**overrides)
    except ValueError as e:
        logger.error(f"Invalid configuration in {config_path}: {e}")
        return ImportsAnalyzerConfig(project_root=root)
