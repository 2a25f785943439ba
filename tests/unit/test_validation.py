"""Tests for import target resolution and validity checks."""
from pathlib import Path

import pytest

from src.imports_analyzer.analyzer_types import BrokenImportType, ImportStatement, ImportType, ParsedImport
from src.imports_analyzer.builtin_modules import is_builtin_module
from src.imports_analyzer.default_file_system import DefaultFileSystem
from src.imports_analyzer.file_system_interface import FileSystemInterface
from src.imports_analyzer.resolver import CompilerOptions, PathAliasResolver
from src.imports_analyzer.validation import (
    check_import_validity,
    check_package_import,
    find_similar_file,
    import_exists,
    package_name_for,
    resolve_import_path,
)


def statement(import_path: str, line_number: int = 1) -> ImportStatement:
    return ImportStatement(
        line_number=line_number,
        text=f"import thing from '{import_path}';",
        import_path=import_path,
        parsed=ParsedImport(import_type=ImportType.DEFAULT, default_import='thing'),
    )


@pytest.mark.parametrize('files,target', [
    ({'src/b.ts': ''}, 'src/b'),
    ({'src/b.ts': ''}, 'src/b.ts'),
    ({'src/data.json': ''}, 'src/data'),
    ({'src/legacy.cjs': ''}, 'src/legacy'),
    ({'src/widgets/index.tsx': ''}, 'src/widgets'),
    ({'src/b.service.ts': ''}, 'src/b.service'),
])
def test_import_exists(mock_fs_factory, temp_dir, files, target):
    """Test exact, extension and index probing."""
    fs = mock_fs_factory(files)
    assert import_exists(temp_dir / target, fs)


def test_import_exists_missing(mock_fs_factory, temp_dir):
    """Test a path with no candidate is missing."""
    fs = mock_fs_factory({'src/other.ts': ''})
    assert not import_exists(temp_dir / 'src' / 'b', fs)


def test_import_exists_on_disk(temp_dir):
    """Test probing against the real file system."""
    (temp_dir / 'lib').mkdir()
    (temp_dir / 'lib' / 'index.js').write_text('')
    assert import_exists(temp_dir / 'lib', DefaultFileSystem())
    assert import_exists(temp_dir / 'lib' / 'index')
    assert not import_exists(temp_dir / 'nope')


@pytest.mark.parametrize('import_path,expected', [
    ('./b', 'src/b'),
    ('../shared/x', 'shared/x'),
    ('./a/../b', 'src/b'),
    ('.', 'src'),
    ('./nested//deep/', 'src/nested/deep'),
])
def test_resolve_import_path(temp_dir, import_path, expected):
    """Test segment-wise resolution from the importing file's directory."""
    assert resolve_import_path(temp_dir / 'src', import_path) == temp_dir / expected


@pytest.mark.parametrize('import_path,expected', [
    ('react', 'react'),
    ('lodash/get', 'lodash'),
    ('@scope/pkg', '@scope/pkg'),
    ('@scope/pkg/deep/file', '@scope/pkg'),
    ('@scope', '@scope'),
])
def test_package_name_for(import_path, expected):
    """Test package name derivation for plain and scoped packages."""
    assert package_name_for(import_path) == expected


def test_is_builtin_module():
    """Test runtime built-in detection."""
    assert is_builtin_module('fs')
    assert is_builtin_module('node:fs')
    assert is_builtin_module('node:anything')
    assert not is_builtin_module('react')


def test_find_similar_file_in_current_dir(mock_fs_factory, temp_dir):
    """Test a case-insensitive stem match in the current directory."""
    fs = mock_fs_factory({'src/Button.tsx': '', 'src/app.ts': ''})
    assert find_similar_file(temp_dir / 'src', './butt', fs) == './Button.tsx'


def test_find_similar_file_in_parent_dir(mock_fs_factory, temp_dir):
    """Test the parent directory is searched after the current one."""
    fs = mock_fs_factory({'src/components/Card.tsx': '', 'src/helpers.ts': ''})
    assert find_similar_file(temp_dir / 'src' / 'components', './helper', fs) == '../helpers.ts'


def test_find_similar_file_prefers_current_dir(mock_fs_factory, temp_dir):
    """Test a current-directory match beats a parent-directory match."""
    fs = mock_fs_factory({'src/components/format.ts': '', 'src/format.ts': ''})
    assert find_similar_file(temp_dir / 'src' / 'components', './form', fs) == './format.ts'


def test_find_similar_file_is_deterministic(mock_fs_factory, temp_dir):
    """Test the alphabetically first candidate is suggested."""
    fs = mock_fs_factory({'src/userStore.ts': '', 'src/userApi.ts': '', 'src/user.ts': ''})
    assert find_similar_file(temp_dir / 'src', './user', fs) == './user.ts'


def test_find_similar_file_no_candidate(mock_fs_factory, temp_dir):
    """Test None when nothing is similar."""
    fs = mock_fs_factory({'src/app.ts': ''})
    assert find_similar_file(temp_dir / 'src', './zzz', fs) is None
    assert find_similar_file(temp_dir / 'src', '..', fs) is None


def test_relative_import_valid(mock_fs_factory, config, temp_dir):
    """Test an existing relative target is valid."""
    fs = mock_fs_factory({'src/a.ts': '', 'src/b.ts': ''})
    assert check_import_validity(temp_dir / 'src' / 'a.ts', statement('./b'), None, config, fs) is None


def test_relative_import_missing(mock_fs_factory, config, temp_dir):
    """Test a missing relative target is FileNotFound with a suggestion."""
    fs = mock_fs_factory({'src/a.ts': '', 'src/button.tsx': ''})
    broken = check_import_validity(temp_dir / 'src' / 'a.ts', statement('./butto', 4), None, config, fs)

    assert broken.error_type == BrokenImportType.FILE_NOT_FOUND
    assert broken.import_path == './butto'
    assert broken.line == 4
    assert broken.file == str(temp_dir / 'src' / 'a.ts')
    assert broken.suggestion == './button.tsx'


def test_relative_import_missing_without_suggestion(mock_fs_factory, config, temp_dir):
    """Test no suggestion when no similar file exists."""
    fs = mock_fs_factory({'src/a.ts': ''})
    broken = check_import_validity(temp_dir / 'src' / 'a.ts', statement('./qqq'), None, config, fs)
    assert broken.suggestion is None


def test_package_installed(mock_fs_factory, config, temp_dir):
    """Test a package present under node_modules is valid."""
    fs = mock_fs_factory({'node_modules/react/index.js': '', 'node_modules/@scope/pkg/index.js': ''})
    current = temp_dir / 'src' / 'a.ts'
    assert check_import_validity(current, statement('react'), None, config, fs) is None
    assert check_import_validity(current, statement('react/jsx-runtime'), None, config, fs) is None
    assert check_import_validity(current, statement('@scope/pkg/sub'), None, config, fs) is None


def test_package_not_installed(mock_fs_factory, config, temp_dir):
    """Test a missing scoped package suggests installing the package, not the subpath."""
    fs = mock_fs_factory({})
    broken = check_import_validity(temp_dir / 'a.ts', statement('@missing/pkg/deep'), None, config, fs)

    assert broken.error_type == BrokenImportType.MODULE_NOT_INSTALLED
    assert broken.suggestion == 'Run: npm install @missing/pkg'


def test_builtin_modules_valid(mock_fs_factory, config, temp_dir):
    """Test runtime built-ins are valid without a dependency directory."""
    fs = mock_fs_factory({})
    current = temp_dir / 'a.ts'
    assert check_import_validity(current, statement('fs'), None, config, fs) is None
    assert check_import_validity(current, statement('node:path'), None, config, fs) is None
    assert check_import_validity(current, statement('fs/promises'), None, config, fs) is None


def test_builtin_modules_disallowed(mock_fs_factory, config, temp_dir):
    """Test built-ins are looked up like packages when not allowed."""
    config = config.merge_with({'allow_builtin_modules': False, 'install_command': 'yarn add'})
    broken = check_import_validity(temp_dir / 'a.ts', statement('fs'), None, config, mock_fs_factory({}))
    assert broken.error_type == BrokenImportType.MODULE_NOT_INSTALLED
    assert broken.suggestion == 'Run: yarn add fs'


def test_custom_dependency_dir(mock_fs_factory, config, temp_dir):
    """Test the package lookup honours the configured dependency directory."""
    config = config.merge_with({'dependency_dir': 'vendor/modules'})
    fs = mock_fs_factory({'vendor/modules/left-pad/index.js': ''})
    assert check_import_validity(temp_dir / 'a.ts', statement('left-pad'), None, config, fs) is None


def alias_resolver(root: Path) -> PathAliasResolver:
    options = CompilerOptions.model_validate({'baseUrl': '.', 'paths': {'@app/*': ['src/*']}})
    return PathAliasResolver.from_compiler_options(root, options)


def test_alias_import_valid(mock_fs_factory, config, temp_dir):
    """Test an alias resolving to an existing file is valid."""
    fs = mock_fs_factory({'src/utils/foo.ts': ''})
    resolver = alias_resolver(temp_dir)
    assert check_import_validity(temp_dir / 'src' / 'a.ts', statement('@app/utils/foo'), resolver, config, fs) is None


def test_alias_import_missing(mock_fs_factory, config, temp_dir):
    """Test a matched alias with no file is FileNotFound naming the alias."""
    fs = mock_fs_factory({})
    resolver = alias_resolver(temp_dir)
    broken = check_import_validity(temp_dir / 'src' / 'a.ts', statement('@app/utils/gone'), resolver, config, fs)

    assert broken.error_type == BrokenImportType.FILE_NOT_FOUND
    assert broken.suggestion == (
        f"Path alias '@app/*' resolves '@app/utils/gone' to "
        f"'{temp_dir / 'src' / 'utils' / 'gone'}' but file not found"
    )


def test_unmatched_alias_falls_back_to_package(mock_fs_factory, config, temp_dir):
    """Test a non-relative path no alias claims is treated as a package."""
    broken = check_import_validity(temp_dir / 'a.ts', statement('@other/x'), alias_resolver(temp_dir),
                                   config, mock_fs_factory({}))
    assert broken.error_type == BrokenImportType.MODULE_NOT_INSTALLED


def test_absolute_import_missing_is_file_not_found(mock_fs_factory, config, temp_dir):
    """Test an absolute path never falls through to the dependency directory."""
    fs = mock_fs_factory({'node_modules/react/index.js': ''})
    broken = check_import_validity(temp_dir / 'src' / 'a.ts', statement('/lib/x'), None, config, fs)

    assert broken.error_type == BrokenImportType.FILE_NOT_FOUND
    assert broken.suggestion is None


def test_absolute_import_existing_file(mock_fs_factory, config, temp_dir):
    """Test an absolute path to an existing file is valid."""
    fs = mock_fs_factory({'shared/util.ts': ''})
    absolute = (temp_dir / 'shared' / 'util').as_posix()
    assert check_import_validity(temp_dir / 'src' / 'a.ts', statement(absolute), None, config, fs) is None


def test_package_check_without_package_name(mock_fs_factory, config, temp_dir):
    """Test an empty package name is reported without an install suggestion."""
    fs = mock_fs_factory({'node_modules/react/index.js': ''})
    broken = check_package_import(temp_dir / 'a.ts', statement('/lib/x'), config, fs)

    assert broken.error_type == BrokenImportType.FILE_NOT_FOUND
    assert broken.suggestion is None


def test_default_file_system_operations(temp_dir):
    """Test the file system surface the analyzer relies on."""
    (temp_dir / 'pkg').mkdir()
    (temp_dir / 'pkg' / 'index.ts').write_text('export {};', encoding='utf-8')
    fs = DefaultFileSystem()

    assert fs.read_file(temp_dir / 'pkg' / 'index.ts') == 'export {};'
    assert fs.exists(temp_dir / 'pkg')
    assert fs.list_dir(temp_dir / 'pkg') == ['index.ts']
    assert fs.list_dir(temp_dir / 'missing') == []
    assert not hasattr(FileSystemInterface, 'is_dir')
