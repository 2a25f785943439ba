"""Import statement parsing."""
import logging
from typing import List, Optional, Sequence, Tuple

from .analyzer_types import ImportStatement, ImportType, ParsedImport
from .patterns import ImportPatterns

logger = logging.getLogger('imports_analyzer.parser')

TYPE_QUALIFIER = 'type '


def _strip_type_qualifier(text: str) -> str:
    text = text.strip()
    if text.startswith(TYPE_QUALIFIER):
        return text[len(TYPE_QUALIFIER):].strip()
    return text


def _local_name(entry: str) -> str:
    """Return the name an import specifier binds locally.

    ``a`` binds ``a``; ``a as b`` and ``type a as b`` bind ``b``.
    """
    tokens = _strip_type_qualifier(entry).split()
    if not tokens:
        return ''
    if len(tokens) >= 3 and tokens[1] == 'as':
        return tokens[2]
    return tokens[0]


def _parse_named_list(braced: str) -> List[str]:
    """Parse the inside of ``{ ... }`` into bound names, in source order."""
    inner = braced.strip()[1:-1]
    names = []
    for entry in inner.split(','):
        name = _local_name(entry)
        if name:
            names.append(name)
    return names


def _split_top_level(spec: str) -> Tuple[str, str]:
    """Split ``spec`` on its first comma outside braces."""
    depth = 0
    for index, char in enumerate(spec):
        if char == '{':
            depth += 1
        elif char == '}':
            depth -= 1
        elif char == ',' and depth == 0:
            return spec[:index], spec[index + 1:]
    return spec, ''


def _namespace_name(spec: str) -> str:
    return spec.split(' as ', 1)[1].strip()


def parse_import_statement(import_spec: str, module_path: str) -> ParsedImport:
    """Parse the binding portion of an import statement.

    Args:
        import_spec: Text between ``import`` and ``from '<module_path>'``
        module_path: The quoted module path (not needed for parsing the bindings)

    Returns:
        A ParsedImport describing the bindings
    """
    spec = _strip_type_qualifier(import_spec)

    if not spec:
        return ParsedImport(import_type=ImportType.SIDE_EFFECT)

    if spec.startswith('{') and spec.endswith('}'):
        return ParsedImport(
            import_type=ImportType.NAMED,
            named_imports=tuple(_parse_named_list(spec)),
        )

    if spec.startswith('*') and ' as ' in spec:
        return ParsedImport(
            import_type=ImportType.NAMESPACE,
            namespace_import=_namespace_name(spec),
        )

    head, rest = _split_top_level(spec)
    if rest:
        # Mixed form: default, { a, b }  or  default, * as ns
        named: List[str] = []
        namespace: Optional[str] = None
        remainder = rest.strip()
        while remainder:
            segment, remainder = _split_top_level(remainder)
            segment = segment.strip()
            remainder = remainder.strip()
            if segment.startswith('{') and segment.endswith('}'):
                named.extend(_parse_named_list(segment))
            elif segment.startswith('*') and ' as ' in segment:
                namespace = _namespace_name(segment)
        return ParsedImport(
            import_type=ImportType.DEFAULT,
            default_import=head.strip() or None,
            named_imports=tuple(named),
            namespace_import=namespace,
        )

    return ParsedImport(import_type=ImportType.DEFAULT, default_import=spec)


def parse_import_line(line: str, patterns: ImportPatterns) -> Optional[Tuple[str, ParsedImport]]:
    """Recognise a single trimmed line.

    Returns:
        ``(module_path, parsed_import)`` or None when the line is not an import
    """
    match = patterns.import_statement.match(line)
    if match:
        import_spec, import_path = match.group(1), match.group(2)
        return import_path, parse_import_statement(import_spec, import_path)

    match = patterns.side_effect_import.match(line)
    if match:
        return match.group(1), ParsedImport(import_type=ImportType.SIDE_EFFECT)

    return None


def extract_imports(lines: Sequence[str], patterns: ImportPatterns) -> List[ImportStatement]:
    """Collect every recognised import statement of a file, in line order."""
    statements = []
    for index, line in enumerate(lines):
        text = line.strip()
        recognised = parse_import_line(text, patterns)
        if recognised is None:
            continue
        import_path, parsed = recognised
        statements.append(ImportStatement(
            line_number=index + 1,
            text=text,
            import_path=import_path,
            parsed=parsed,
        ))
    logger.debug(f"Extracted {len(statements)} import statements")
    return statements
