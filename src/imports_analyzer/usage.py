"""Identifier usage collection and unused binding detection."""
from typing import List, Sequence, Set

from .analyzer_types import ParsedImport
from .patterns import ImportPatterns, is_builtin_type, is_keyword_or_builtin


def _add_type_identifiers(type_expr: str, patterns: ImportPatterns, used: Set[str]) -> None:
    for identifier in patterns.capitalized_identifier.findall(type_expr):
        if not is_builtin_type(identifier):
            used.add(identifier)


def collect_used_identifiers(lines: Sequence[str], patterns: ImportPatterns) -> Set[str]:
    """Collect the names referenced outside of import lines.

    Seven independent heuristics feed one set; the result only records
    presence, never counts.

    Args:
        lines: Every line of the file, import lines included
        patterns: The shared pattern table

    Returns:
        Set of identifiers judged to be used
    """
    used: Set[str] = set()

    for raw_line in lines:
        line = raw_line.strip()
        if not line or patterns.is_import_line(line):
            continue

        # 1. General identifier scan
        for identifier in patterns.identifier.findall(line):
            if not is_keyword_or_builtin(identifier):
                used.add(identifier)

        # 2. Hook destructuring: const [value, setValue] = useSomething(...)
        hook = patterns.hook_destructuring.search(line)
        if hook:
            used.add(hook.group(3))

        # 3. Type annotations: name: Type
        for type_expr in patterns.type_annotation.findall(line):
            _add_type_identifiers(type_expr, patterns, used)

        # 4. Generic arguments: Foo<Bar>
        for type_expr in patterns.generic_usage.findall(line):
            _add_type_identifiers(type_expr, patterns, used)

        # 5. Tags: <Component or </Component
        used.update(patterns.tag_usage.findall(line))

        # 6. extends / implements clauses
        for clause in patterns.heritage_clause.findall(line):
            used.update(patterns.capitalized_identifier.findall(clause))

        # 7. Parameter types: (param: Type
        for type_expr in patterns.parameter_type.findall(line):
            _add_type_identifiers(type_expr, patterns, used)

    return used


def find_unused_items(parsed_import: ParsedImport, used_identifiers: Set[str]) -> List[str]:
    """Return the bindings of ``parsed_import`` missing from ``used_identifiers``.

    Order: default, named (source order), namespace.
    """
    return [name for name in parsed_import.bindings() if name not in used_identifiers]
