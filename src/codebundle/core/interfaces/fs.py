from __future__ import annotations

from pathlib import Path
from typing import List, Protocol, runtime_checkable

from codebundle.core.errors import StageResult
from codebundle.core.models import SourceFile


@runtime_checkable
class FileDiscoveryProtocol(Protocol):
    def discover(self, root: Path) -> StageResult[List[SourceFile]]:
        """List every candidate file below *root*."""
        ...


@runtime_checkable
class FileReaderProtocol(Protocol):
    def read_text(self, path: Path) -> StageResult[str]:
        ...


@runtime_checkable
class BundleWriterProtocol(Protocol):
    def write(self, path: Path, text: str) -> StageResult[Path]:
        """Write *text* to *path* and return the absolute path written."""
        ...
