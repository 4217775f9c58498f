from __future__ import annotations

"""
Bundling pipeline: discover → filter → sort → transform → render → write.

Every stage returns a `StageResult`; `BundlePipeline.run` checks each one and
returns the first failure unchanged. Nothing is written unless every earlier
stage succeeded, and the output path is validated before any file I/O.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from codebundle.core.errors import ErrorKind, StageResult
from codebundle.core.interfaces.fs import BundleWriterProtocol, FileDiscoveryProtocol
from codebundle.core.interfaces.logging import LoggerLikeProtocol
from codebundle.core.interfaces.render import RendererProtocol
from codebundle.core.models import Bundle, BundleOutcome, BundleRequest
from codebundle.discovery.file_discovery import FileDiscovery
from codebundle.discovery.languages import ExtensionResolver
from codebundle.io.writer import BundleWriter
from codebundle.logging.helpers import get_logger
from codebundle.processing.filters import filter_by_extension
from codebundle.processing.sorter import sort_files
from codebundle.processing.transformer import ContentTransformer, TransformOptions
from codebundle.rendering.renderer import Renderer


@dataclass
class BundlePipeline:
    resolver: ExtensionResolver = field(default_factory=ExtensionResolver)
    discovery: FileDiscoveryProtocol = field(default_factory=FileDiscovery)
    transformer: ContentTransformer = field(default_factory=ContentTransformer)
    renderer: RendererProtocol = field(default_factory=Renderer)
    writer: BundleWriterProtocol = field(default_factory=BundleWriter)
    logger: Optional[LoggerLikeProtocol] = None

    def run(self, request: BundleRequest, *, root: Optional[Path] = None) -> StageResult[BundleOutcome]:
        log = self.logger or get_logger('pipeline')

        if request.output_path is None or not str(request.output_path).strip():
            return StageResult.failure(ErrorKind.MISSING_OUTPUT_PATH, 'Output file path is required.')

        exts = self.resolver.resolve(request.language)
        if not exts.ok:
            return StageResult.propagate(exts)

        base = root if root is not None else Path.cwd()
        found = self.discovery.discover(base)
        if not found.ok:
            return StageResult.propagate(found)

        files = filter_by_extension(found.value or [], exts.value or frozenset())
        files = sort_files(files, request.sort_order, log=log)
        log.info('bundling %d file(s) from %s', len(files), base)
        if log.isEnabledFor(logging.DEBUG):
            log.debug('bundle order: %s', ', '.join(f.relpath for f in files))

        opts = TransformOptions(
            include_source_note=request.include_source_note,
            remove_empty_lines=request.remove_empty_lines,
        )
        blocks = self.transformer.transform(files, opts)
        if not blocks.ok:
            return StageResult.propagate(blocks)

        text = self.renderer.render(Bundle(blocks=tuple(blocks.value or ()), author=request.author))
        written = self.writer.write(request.output_path, text)
        if not written.ok:
            return StageResult.propagate(written)

        log.info('✔ bundle written to %s', written.value)
        return StageResult.success(BundleOutcome(output_path=written.value, files=tuple(files)))
