from __future__ import annotations

"""Public surface for codebundle.core: data model, error values and protocols."""

from codebundle.core.errors import BundleError, ErrorKind, StageResult, UsageError
from codebundle.core.models import (
    Bundle,
    BundleBlock,
    BundleOutcome,
    BundleRequest,
    Language,
    ResponseDraft,
    SortOrder,
    SourceFile,
)

__all__ = [
    'Bundle',
    'BundleBlock',
    'BundleError',
    'BundleOutcome',
    'BundleRequest',
    'ErrorKind',
    'Language',
    'ResponseDraft',
    'SortOrder',
    'SourceFile',
    'StageResult',
    'UsageError',
]
