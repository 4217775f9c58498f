from __future__ import annotations

"""Language token → extension set resolution."""

import logging
from typing import FrozenSet, Optional

from codebundle.core.errors import ErrorKind, StageResult
from codebundle.core.models import Language
from codebundle.logging.helpers import get_logger
from codebundle.utils.suffixes import normalize_extensions


class ExtensionResolver:
    """Map a language token (`python`, `c#`, `all`, ...) to its extensions."""

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('discovery.languages')

    def resolve(self, token: str) -> StageResult[FrozenSet[str]]:
        lang = Language.lookup(token)
        if lang is None:
            return StageResult.failure(ErrorKind.UNSUPPORTED_LANGUAGE, f'Unsupported language: {token}')
        exts = normalize_extensions(lang.extensions)
        self._log.debug('language %r → %s', token, ', '.join(sorted(exts)))
        return StageResult.success(exts)


def resolve_extensions(token: str) -> StageResult[FrozenSet[str]]:
    """Module-level shortcut around `ExtensionResolver().resolve`."""
    return ExtensionResolver().resolve(token)
