from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

import os
from typing import Dict, FrozenSet, Tuple

# Comment prefixes written into the bundle.
AUTHOR_PREFIX: str = '// Author: '
SOURCE_PREFIX: str = '// Source: '

# Line separator used when assembling bundle text and rejoining cleaned lines.
LINE_SEP: str = os.linesep

# Build-output directory names pruned from discovery (case-sensitive).
EXCLUDED_DIR_NAMES: FrozenSet[str] = frozenset({'bin', 'debug'})

# Language token -> extensions. Tokens are matched lower-cased.
LANGUAGE_EXTENSIONS: Dict[str, Tuple[str, ...]] = {
    'all': ('.cs', '.java', '.py', '.js', '.cpp', '.h'),
    'csharp': ('.cs',),
    'java': ('.java',),
    'python': ('.py',),
    'javascript': ('.js',),
    'cpp': ('.cpp', '.h'),
}

# Response file written by `create-rsp`.
RSP_FILENAME: str = 'bundle-command.rsp'
RSP_COMMAND: str = 'bundle'

PROG_NAME: str = 'codebundle'
