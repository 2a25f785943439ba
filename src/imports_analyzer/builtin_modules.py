"""Runtime built-in module names for the imports analyzer."""

# Modules shipped with the Node.js runtime; they never live under node_modules
NODE_BUILTIN_MODULES = frozenset({
    'assert', 'async_hooks', 'buffer', 'child_process', 'cluster', 'console',
    'constants', 'crypto', 'dgram', 'diagnostics_channel', 'dns', 'domain',
    'events', 'fs', 'http', 'http2', 'https', 'inspector', 'module', 'net',
    'os', 'path', 'perf_hooks', 'process', 'punycode', 'querystring',
    'readline', 'repl', 'stream', 'string_decoder', 'sys', 'timers', 'tls',
    'trace_events', 'tty', 'url', 'util', 'v8', 'vm', 'wasi',
    'worker_threads', 'zlib',
})

BUILTIN_PREFIX = 'node:'


def is_builtin_module(package_name: str) -> bool:
    """Check whether a package name refers to a runtime built-in module."""
    if package_name.startswith(BUILTIN_PREFIX):
        return True
    return package_name in NODE_BUILTIN_MODULES
