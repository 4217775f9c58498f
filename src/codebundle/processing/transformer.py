from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from codebundle.constants import LINE_SEP, SOURCE_PREFIX
from codebundle.core.errors import StageResult
from codebundle.core.interfaces.fs import FileReaderProtocol
from codebundle.core.models import BundleBlock, SourceFile
from codebundle.io.readers import DefaultTextReader
from codebundle.logging.helpers import get_logger
from codebundle.processing.line_ops import remove_empty_lines


@dataclass(frozen=True)
class TransformOptions:
    include_source_note: bool = False
    remove_empty_lines: bool = False
    newline: str = LINE_SEP


class ContentTransformer:
    """Turn sorted source files into bundle blocks.

    Each file is read in full, optionally stripped of blank lines, and tagged
    with its `// Source:` note. The first unreadable file aborts the whole
    transformation.
    """

    def __init__(
        self,
        *,
        reader: Optional[FileReaderProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._log = logger or get_logger('processing.transformer')
        self._reader = reader or DefaultTextReader(logger=self._log)

    @staticmethod
    def source_note(source: SourceFile) -> str:
        return f'{SOURCE_PREFIX}{source.relpath}'

    def transform_one(self, source: SourceFile, opts: TransformOptions) -> StageResult[BundleBlock]:
        read = self._reader.read_text(source.path)
        if not read.ok:
            return StageResult.propagate(read)
        content = read.value or ''
        if opts.remove_empty_lines:
            content = remove_empty_lines(content, newline=opts.newline)
        if opts.include_source_note:
            content = self.source_note(source) + opts.newline + content
        return StageResult.success(BundleBlock(source=source, content=content))

    def transform(self, files: Iterable[SourceFile], opts: TransformOptions) -> StageResult[List[BundleBlock]]:
        blocks: List[BundleBlock] = []
        for source in files:
            res = self.transform_one(source, opts)
            if not res.ok:
                self._log.error('✘ %s: %s', source.relpath, res.error)
                return StageResult.propagate(res)
            blocks.append(res.value)
        self._log.debug('transformed %d file(s)', len(blocks))
        return StageResult.success(blocks)
