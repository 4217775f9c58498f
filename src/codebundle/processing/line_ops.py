# src/codebundle/processing/line_ops.py
import re
from typing import List

from codebundle.constants import LINE_SEP

_RE_LINE_BREAK = re.compile(r'\r\n|\r|\n')


def split_lines(text: str) -> List[str]:
    """Split on CRLF, CR or LF without keeping the terminators."""
    return _RE_LINE_BREAK.split(text)


def remove_empty_lines(text: str, *, newline: str = LINE_SEP) -> str:
    """Drop blank and whitespace-only lines, rejoining the rest with *newline*.

    A trailing line break is dropped along with the empty tail it produces, so
    `"x\\n\\ny\\n"` becomes `"x\\ny"`. Applying the function twice yields the
    same text as applying it once.
    """
    return newline.join(ln for ln in split_lines(text) if ln.strip())
