from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Union

from codebundle.core.models import SortOrder, SourceFile
from codebundle.logging.helpers import get_logger

logger = get_logger('processing.sorter')


def _by_name(f: SourceFile):
    return f.name


def _by_type(f: SourceFile):
    return (f.extension, f.name)


_SORT_KEYS = {
    SortOrder.NAME: _by_name,
    SortOrder.TYPE: _by_type,
}


def sort_files(
    files: Iterable[SourceFile],
    order: Union[SortOrder, str, None],
    *,
    log: Optional[logging.Logger] = None,
) -> List[SourceFile]:
    """Return *files* ordered by *order*.

    `name` sorts on the bare filename, `type` on (extension, filename). Both
    are stable. Any other token keeps the incoming order.
    """
    items = list(files)
    mode = order if isinstance(order, SortOrder) else SortOrder.parse(order)
    key = _SORT_KEYS.get(mode)
    if key is None:
        if not isinstance(order, SortOrder):
            (log or logger).warning('⚠  unknown sort order %r – keeping discovery order', order)
        return items
    return sorted(items, key=key)
