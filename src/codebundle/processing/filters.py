from __future__ import annotations

from typing import AbstractSet, Iterable, List

from codebundle.core.models import SourceFile
from codebundle.utils.suffixes import is_extension_allowed


def filter_by_extension(files: Iterable[SourceFile], extensions: AbstractSet[str]) -> List[SourceFile]:
    """Keep files whose (lower-cased) extension is in *extensions*, in input order."""
    allowed = frozenset(extensions)
    return [f for f in files if is_extension_allowed(f.name, allowed)]
