"""Common test fixtures."""
import textwrap
from pathlib import Path
from typing import Dict

import pytest


def write_files(root: Path, files: Dict[str, str]) -> Dict[str, Path]:
    """Create ``files`` (relative path -> content) under ``root``."""
    created = {}
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content).lstrip(), encoding='utf-8')
        created[relative] = path
    return created


@pytest.fixture
def temp_dir(tmp_path):
    """Create a temporary directory for test files."""
    return tmp_path


@pytest.fixture
def sample_project(temp_dir):
    """A small TypeScript project with unused, broken and aliased imports."""
    files = write_files(temp_dir, {
        'tsconfig.json': '''
            {
              "compilerOptions": {
                "baseUrl": ".",
                "paths": {
                  "@app/*": ["src/*"],
                  "@config": ["src/config/index.ts"]
                }
              }
            }
        ''',
        'src/a.ts': '''
            import { X, Y } from './b';
            import Thing from '@missing/pkg';

            const v: X = 1;
        ''',
        'src/b.ts': '''
            export type X = number;
            export const Y = 2;
        ''',
        'src/utils/foo.ts': '''
            export const foo = 1;
        ''',
        'src/components/Button.tsx': '''
            import React, { useState } from 'react';
            import { foo } from '@app/utils/foo';
            import { Missing } from '@app/utils/missing';

            export function Button(props: ButtonProps) {
                const [count, setCount] = useState(foo);
                return <Missing count={count} />;
            }
        ''',
        'src/config/index.ts': '''
            export default {};
        ''',
        'node_modules/react/index.js': '''
            module.exports = {};
        ''',
    })
    return {'root': temp_dir, 'files': files}


@pytest.fixture
def make_files(temp_dir):
    """Write a mapping of relative paths to contents under the temporary directory."""
    def factory(files: Dict[str, str]) -> Dict[str, Path]:
        return write_files(temp_dir, files)
    return factory
