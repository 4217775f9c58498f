from __future__ import annotations

"""
Interactive response-file builder (`create-rsp`).

Prompts for each `bundle` parameter in a fixed order, re-asking until the
answer validates, then writes a one-line argument file such as::

    bundle --language python --output out/all.txt --note true --sort name --remove-empty-lines false

The file is meant to be replayed with `codebundle @bundle-command.rsp`.
"""

import enum
import logging
import shlex
import sys
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Callable, List, Optional, TextIO, Tuple

from codebundle.constants import PROG_NAME, RSP_COMMAND, RSP_FILENAME
from codebundle.core.errors import ErrorKind, StageResult
from codebundle.core.models import ResponseDraft, SortOrder
from codebundle.logging.helpers import get_logger, trace_io
from codebundle.parsing.values import format_bool, try_parse_bool

INVALID_INPUT = 'Invalid input. Please try again.'


class Step(enum.Enum):
    LANGUAGE = 'language'
    OUTPUT = 'output'
    NOTE = 'note'
    SORT = 'sort'
    REMOVE_EMPTY_LINES = 'remove-empty-lines'
    AUTHOR = 'author'


@dataclass(frozen=True)
class Field:
    step: Step
    attr: str
    prompt: str
    # Returns the converted value, or None when the answer is invalid.
    convert: Callable[[str], Any]
    # End of input counts as a blank answer.
    optional: bool = False


def _non_blank(raw: str) -> Optional[str]:
    return raw if raw.strip() else None


def _sort_token(raw: str) -> Optional[str]:
    return raw if raw in (SortOrder.NAME.value, SortOrder.TYPE.value) else None


def _any_text(raw: str) -> str:
    return raw


FIELDS: Tuple[Field, ...] = (
    Field(Step.LANGUAGE, 'language', "Enter programming languages (or 'all'):", _non_blank),
    Field(Step.OUTPUT, 'output', 'Enter output file path:', _non_blank),
    Field(Step.NOTE, 'note', 'Include source code location as comments? (true/false):', try_parse_bool),
    Field(Step.SORT, 'sort', 'Enter sort order (name/type):', _sort_token),
    Field(Step.REMOVE_EMPTY_LINES, 'remove_empty_lines', 'Remove empty lines? (true/false):', try_parse_bool),
    Field(Step.AUTHOR, 'author', 'Enter author name (optional):', _any_text, optional=True),
)


def build_command_line(draft: ResponseDraft) -> str:
    """Serialize *draft* as `bundle --<key> <value> ...`, skipping blank answers."""
    tokens: List[str] = [RSP_COMMAND]
    for f in FIELDS:
        value = getattr(draft, f.attr)
        if value is None:
            continue
        text = format_bool(value) if isinstance(value, bool) else str(value)
        if not text:
            continue
        tokens.append(f'--{f.step.value}')
        tokens.append(shlex.quote(text))
    return ' '.join(tokens)


class ResponseFileBuilder:
    """Prompt/validate loop over `FIELDS`, one state per parameter."""

    def __init__(
        self,
        *,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._in = stdin or sys.stdin
        self._out = stdout or sys.stdout
        self._log = logger or get_logger('interactive')

    def _say(self, text: str) -> None:
        print(text, file=self._out)
        self._out.flush()

    def _ask(self, f: Field) -> StageResult[Any]:
        while True:
            self._say(f.prompt)
            line = self._in.readline()
            if not line:
                if f.optional:
                    return StageResult.success(f.convert(''))
                return StageResult.failure(
                    ErrorKind.INPUT_ABORTED,
                    f'Input ended before {f.step.value} was provided.',
                )
            value = f.convert(line.strip())
            if value is not None:
                return StageResult.success(value)
            self._log.debug('rejected answer for %s: %r', f.step.value, line.strip())
            self._say(INVALID_INPUT)

    def collect(self) -> StageResult[ResponseDraft]:
        """Walk every step in order and return the completed draft."""
        self._say('Creating response file for bundle command.')
        self._say('Please provide the following information:')
        draft = ResponseDraft()
        for f in FIELDS:
            answer = self._ask(f)
            if not answer.ok:
                return StageResult.propagate(answer)
            draft = replace(draft, **{f.attr: answer.value})
        return StageResult.success(draft)

    def write(self, draft: ResponseDraft, path: Path) -> StageResult[Path]:
        line = build_command_line(draft)
        try:
            path.write_text(line, encoding='utf-8')
        except OSError as exc:
            self._log.error('⚠  could not write %s (%s)', path, exc.strerror or exc)
            return StageResult.failure(
                ErrorKind.FILE_WRITE_FAILURE,
                f'Unable to write response file: {path}',
                path=path,
            )
        trace_io(self._log, 'wrote response file', path=str(path), line=line)
        return StageResult.success(path)

    def run(self, path: Optional[Path] = None) -> StageResult[Path]:
        target = path or Path(RSP_FILENAME)
        draft = self.collect()
        if not draft.ok:
            return StageResult.propagate(draft)
        written = self.write(draft.value, target)
        if not written.ok:
            return written
        self._say(f'Response file created: {target}')
        self._say(f'Run with: {PROG_NAME} @{target}')
        return written
