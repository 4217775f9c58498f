from __future__ import annotations

import logging
from typing import List, Optional

from codebundle.constants import AUTHOR_PREFIX, LINE_SEP
from codebundle.core.interfaces.render import RendererProtocol
from codebundle.core.models import Bundle
from codebundle.logging.helpers import get_logger


class Renderer(RendererProtocol):
    """Assemble bundle text.

    Layout::

        [// Author: <name>
        ]
        [// Source: <relative path>
        ]<content>

        ...

    Every block is terminated by a line break and followed by one blank line.
    """

    def __init__(self, *, newline: str = LINE_SEP, logger: Optional[logging.Logger] = None) -> None:
        self._nl = newline
        self._log = logger or get_logger('render')

    def header(self, author: Optional[str]) -> str:
        if not author:
            return ''
        return f'{AUTHOR_PREFIX}{author}{self._nl}{self._nl}'

    def render(self, bundle: Bundle) -> str:
        parts: List[str] = [self.header(bundle.author)]
        for block in bundle.blocks:
            parts.append(block.content)
            parts.append(self._nl)
            parts.append(self._nl)
        text = ''.join(parts)
        self._log.debug('rendered %d block(s), %d chars', len(bundle.blocks), len(text))
        return text
