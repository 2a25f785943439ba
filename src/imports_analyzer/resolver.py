"""Path alias resolution from a project's tsconfig.json / jsconfig.json."""
import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .default_file_system import DefaultFileSystem
from .file_system_interface import FileSystemInterface

logger = logging.getLogger('imports_analyzer.resolver')

WILDCARD_SUFFIX = '/*'
DEFAULT_ALIAS_CONFIG_FILES = ('tsconfig.json', 'jsconfig.json')
TRAILING_COMMA = re.compile(r",(\s*[}\]])")


class CompilerOptions(BaseModel):
    """The part of ``compilerOptions`` used for alias resolution."""
    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    base_url: Optional[str] = Field(default=None, alias='baseUrl')
    paths: Optional[Dict[str, List[str]]] = None


class AliasConfigFile(BaseModel):
    """A tsconfig.json / jsconfig.json document."""
    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    compiler_options: Optional[CompilerOptions] = Field(default=None, alias='compilerOptions')


@dataclass(frozen=True)
class AliasMapping:
    """One ``paths`` entry: a pattern and its candidate target directories."""
    pattern: str
    targets: Tuple[Path, ...]

    @property
    def is_wildcard(self) -> bool:
        return self.pattern.endswith(WILDCARD_SUFFIX)


@dataclass(frozen=True)
class AliasMatch:
    """Result of matching an import path against the alias table."""
    pattern: str
    resolved_path: Path


class PathAliasResolver:
    """Maps aliased import paths to physical locations.

    Mappings are tried in declaration order and the first match wins.
    Resolution is purely syntactic; existence is checked by the caller.
    """

    def __init__(self, base_url: Path, mappings: Sequence[AliasMapping]):
        self.base_url = Path(base_url)
        self.mappings: Tuple[AliasMapping, ...] = tuple(mappings)

    @classmethod
    def from_project_root(cls, project_root: Path,
                          config_files: Sequence[str] = DEFAULT_ALIAS_CONFIG_FILES,
                          fs: Optional[FileSystemInterface] = None) -> Optional['PathAliasResolver']:
        """Load the first existing alias configuration under ``project_root``.

        Comments and trailing commas are accepted, as tsc accepts them.

        Returns:
            A resolver, or None when no configuration exists or it cannot be parsed
        """
        fs = fs or DefaultFileSystem()
        project_root = Path(project_root)
        config_path = next((project_root / name for name in config_files
                            if fs.exists(project_root / name)), None)
        if config_path is None:
            logger.debug(f"No alias configuration found under {project_root}")
            return None

        try:
            data = json.loads(strip_json_comments(fs.read_file(config_path)))
            config = AliasConfigFile.model_validate(data)
        except (OSError, ValueError, ValidationError) as e:
            logger.info(f"Path aliasing disabled, cannot use {config_path}: {e}")
            return None

        return cls.from_compiler_options(project_root, config.compiler_options)

    @classmethod
    def from_compiler_options(cls, project_root: Path,
                              options: Optional[CompilerOptions]) -> Optional['PathAliasResolver']:
        """Build a resolver from parsed compiler options."""
        if options is None:
            return None

        base_url = Path(project_root) / options.base_url if options.base_url else Path(project_root)

        mappings = []
        for pattern, targets in (options.paths or {}).items():
            resolved_targets = tuple(base_url / _strip_wildcard(target) for target in targets)
            mappings.append(AliasMapping(pattern=pattern, targets=resolved_targets))

        logger.debug(f"Loaded {len(mappings)} path aliases with base url {base_url}")
        return cls(base_url, mappings)

    def match(self, import_path: str) -> Optional[AliasMatch]:
        """Find the first mapping that applies to ``import_path``."""
        for mapping in self.mappings:
            resolved = _try_mapping(mapping, import_path)
            if resolved is not None:
                return AliasMatch(pattern=mapping.pattern, resolved_path=resolved)
        return None

    def resolve(self, import_path: str) -> Optional[Path]:
        """Resolve ``import_path`` to a candidate location, or None if not an alias."""
        alias_match = self.match(import_path)
        return alias_match.resolved_path if alias_match else None


def _strip_wildcard(target: str) -> str:
    if target.endswith(WILDCARD_SUFFIX):
        return target[:-len(WILDCARD_SUFFIX)]
    if target == '*':
        return ''
    return target


def _try_mapping(mapping: AliasMapping, import_path: str) -> Optional[Path]:
    if not mapping.targets:
        return None

    if mapping.is_wildcard:
        prefix = mapping.pattern[:-len(WILDCARD_SUFFIX)]
        if import_path == prefix or import_path.startswith(prefix + '/'):
            suffix = import_path[len(prefix):].lstrip('/')
            return mapping.targets[0] / suffix if suffix else mapping.targets[0]
        return None

    if mapping.pattern == import_path:
        return mapping.targets[0]
    return None


def strip_json_comments(text: str) -> str:
    """Turn tsconfig-flavoured JSON into strict JSON.

    Drops ``//`` and ``/* */`` comments outside string literals, then
    trailing commas before ``}`` or ``]``.
    """
    result = []
    index = 0
    in_string = False
    length = len(text)

    while index < length:
        char = text[index]
        if in_string:
            result.append(char)
            if char == '\\' and index + 1 < length:
                result.append(text[index + 1])
                index += 1
            elif char == '"':
                in_string = False
            index += 1
        elif char == '"':
            in_string = True
            result.append(char)
            index += 1
        elif text.startswith('//', index):
            newline = text.find('\n', index)
            index = length if newline == -1 else newline
        elif text.startswith('/*', index):
            end = text.find('*/', index + 2)
            index = length if end == -1 else end + 2
        else:
            result.append(char)
            index += 1

    return TRAILING_COMMA.sub(r'\1', ''.join(result))
