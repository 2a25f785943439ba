"""Compiled pattern table shared by the parser and the usage collector."""
import re
from dataclasses import dataclass
from typing import Pattern

# Language keywords, common globals and test-framework globals never treated as usage
KEYWORDS_AND_BUILTINS = frozenset({
    # JavaScript keywords
    'abstract', 'as', 'async', 'await', 'break', 'case', 'catch', 'class',
    'const', 'continue', 'debugger', 'default', 'delete', 'do', 'else',
    'enum', 'export', 'extends', 'false', 'finally', 'for', 'from',
    'function', 'get', 'if', 'implements', 'import', 'in', 'instanceof',
    'interface', 'let', 'new', 'null', 'of', 'package', 'private',
    'protected', 'public', 'return', 'set', 'static', 'super', 'switch',
    'this', 'throw', 'true', 'try', 'typeof', 'var', 'void', 'while',
    'with', 'yield',
    # TypeScript keywords
    'any', 'boolean', 'declare', 'infer', 'is', 'keyof', 'module',
    'namespace', 'never', 'number', 'object', 'readonly', 'require',
    'string', 'symbol', 'type', 'undefined', 'unique', 'unknown',
    # Common globals
    'console', 'window', 'document', 'global', 'process', 'Buffer',
    'setTimeout', 'setInterval', 'clearTimeout', 'clearInterval',
    'JSON', 'Math', 'Date', 'Error', 'RegExp', 'Array', 'Object',
    'String', 'Number', 'Boolean', 'Symbol', 'BigInt', 'Promise',
    '__dirname', '__filename', 'exports',
    # Test framework globals
    'describe', 'it', 'test', 'expect', 'beforeEach', 'afterEach',
    'beforeAll', 'afterAll', 'jest', 'jasmine', 'mocha',
})

# Built-in generic and utility type names skipped by the type heuristics
BUILTIN_TYPE_NAMES = frozenset({
    'Array', 'Promise', 'Record', 'Partial', 'Required', 'Pick', 'Omit',
    'Exclude', 'Extract', 'NonNullable', 'Parameters', 'ConstructorParameters',
    'ReturnType', 'InstanceType', 'ThisParameterType', 'OmitThisParameter',
    'ThisType', 'Uppercase', 'Lowercase', 'Capitalize', 'Uncapitalize',
    'String', 'Number', 'Boolean', 'Object', 'Function', 'Date', 'RegExp',
    'Error', 'Map', 'Set', 'WeakMap', 'WeakSet', 'ArrayBuffer', 'DataView',
    'Int8Array', 'Uint8Array', 'Uint8ClampedArray', 'Int16Array', 'Uint16Array',
    'Int32Array', 'Uint32Array', 'Float32Array', 'Float64Array', 'BigInt64Array',
    'BigUint64Array',
})

MIN_IDENTIFIER_LENGTH = 3


@dataclass(frozen=True)
class ImportPatterns:
    """Immutable table of compiled regular expressions.

    Built once by :func:`build_patterns` and passed read-only into every
    per-file call, so worker threads share it without locking.
    """
    import_statement: Pattern
    side_effect_import: Pattern
    identifier: Pattern
    capitalized_identifier: Pattern
    hook_destructuring: Pattern
    type_annotation: Pattern
    generic_usage: Pattern
    tag_usage: Pattern
    heritage_clause: Pattern
    parameter_type: Pattern

    def is_import_line(self, line: str) -> bool:
        """True when a trimmed line is one of the recognised import shapes."""
        return bool(self.import_statement.match(line) or self.side_effect_import.match(line))


def build_patterns() -> ImportPatterns:
    """Compile the pattern table."""
    return ImportPatterns(
        import_statement=re.compile(r"""^import\s+(.+?)\s+from\s+['"](.+?)['"];?\s*$"""),
        side_effect_import=re.compile(r"""^import\s+['"](.+?)['"];?\s*$"""),
        identifier=re.compile(r"\b[A-Za-z_][A-Za-z0-9_]*"),
        capitalized_identifier=re.compile(r"\b([A-Z][a-zA-Z0-9_]*)\b"),
        hook_destructuring=re.compile(r"const\s*\[([^,\]]+),\s*([^\]]+)\]\s*=\s*(use[A-Z]\w*)"),
        type_annotation=re.compile(r":\s*([A-Z][a-zA-Z0-9_<>,\s\[\]]*)"),
        generic_usage=re.compile(r"<([A-Z][a-zA-Z0-9_<>,\s\[\]]*?)>"),
        tag_usage=re.compile(r"</?([A-Z][a-zA-Z0-9_]*)"),
        heritage_clause=re.compile(r"(?:extends|implements)\s+([A-Z][a-zA-Z0-9_<>,\s]*)"),
        parameter_type=re.compile(r"\(\s*[^:)]*:\s*([A-Z][a-zA-Z0-9_<>,\s\[\]]*)"),
    )


def is_keyword_or_builtin(identifier: str) -> bool:
    """True for keywords, well-known globals and identifiers too short to track."""
    return identifier in KEYWORDS_AND_BUILTINS or len(identifier) < MIN_IDENTIFIER_LENGTH


def is_builtin_type(identifier: str) -> bool:
    """True for built-in generic and utility type names."""
    return identifier in BUILTIN_TYPE_NAMES
