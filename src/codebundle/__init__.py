from __future__ import annotations

from codebundle.constants import AUTHOR_PREFIX, RSP_FILENAME, SOURCE_PREFIX
from codebundle.cli import CodeBundle, main
from codebundle.core.errors import BundleError, ErrorKind, StageResult
from codebundle.core.models import BundleRequest, Language, SortOrder
from codebundle.runtime.pipeline import BundlePipeline
from codebundle.parsing.parser import _build_parser

__version__ = '1.0.0'

__all__ = [
    'AUTHOR_PREFIX',
    'SOURCE_PREFIX',
    'RSP_FILENAME',
    'CodeBundle',
    'main',
    'BundleError',
    'ErrorKind',
    'StageResult',
    'BundleRequest',
    'Language',
    'SortOrder',
    'BundlePipeline',
    '_build_parser',
]
