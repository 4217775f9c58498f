from __future__ import annotations

import argparse
import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple

from codebundle.constants import LANGUAGE_EXTENSIONS
from codebundle.utils.suffixes import extension_of


class Language(enum.Enum):
    ALL = 'all'
    CSHARP = 'csharp'
    JAVA = 'java'
    PYTHON = 'python'
    JAVASCRIPT = 'javascript'
    CPP = 'cpp'

    @property
    def extensions(self) -> Tuple[str, ...]:
        return LANGUAGE_EXTENSIONS[self.value]

    @classmethod
    def lookup(cls, token: str) -> Optional['Language']:
        """Return the language for *token* (case-insensitive) or None."""
        return _LANGUAGE_TOKENS.get((token or '').strip().lower())


_LANGUAGE_TOKENS: Dict[str, Language] = {lang.value: lang for lang in Language}
_LANGUAGE_TOKENS.update({'c#': Language.CSHARP, 'c++': Language.CPP})


class SortOrder(enum.Enum):
    NAME = 'name'
    TYPE = 'type'
    # Unknown tokens keep the filter order.
    DISCOVERY = 'discovery'

    @classmethod
    def parse(cls, token: Optional[str]) -> 'SortOrder':
        t = (token or '').strip().lower()
        if t == cls.NAME.value:
            return cls.NAME
        if t == cls.TYPE.value:
            return cls.TYPE
        return cls.DISCOVERY


@dataclass(frozen=True)
class BundleRequest:
    """Parameters of one `bundle` invocation."""

    language: str
    output_path: Optional[Path] = None
    include_source_note: bool = False
    sort_order: str = SortOrder.NAME.value
    remove_empty_lines: bool = False
    author: Optional[str] = None

    @classmethod
    def from_namespace(cls, ns: argparse.Namespace) -> 'BundleRequest':
        output = getattr(ns, 'output', None)
        return cls(
            language=ns.language,
            output_path=Path(output) if output else None,
            include_source_note=bool(getattr(ns, 'note', False)),
            sort_order=getattr(ns, 'sort', None) or SortOrder.NAME.value,
            remove_empty_lines=bool(getattr(ns, 'remove_empty_lines', False)),
            author=getattr(ns, 'author', None),
        )


@dataclass(frozen=True)
class SourceFile:
    path: Path
    relpath: str

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def extension(self) -> str:
        return extension_of(self.path.name)


@dataclass(frozen=True)
class BundleBlock:
    source: SourceFile
    content: str


@dataclass(frozen=True)
class Bundle:
    blocks: Tuple[BundleBlock, ...] = ()
    author: Optional[str] = None


@dataclass(frozen=True)
class BundleOutcome:
    output_path: Path
    files: Tuple[SourceFile, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ResponseDraft:
    """Answers collected by the interactive responder, one field per prompt."""

    language: Optional[str] = None
    output: Optional[str] = None
    note: Optional[bool] = None
    sort: Optional[str] = None
    remove_empty_lines: Optional[bool] = None
    author: Optional[str] = None
