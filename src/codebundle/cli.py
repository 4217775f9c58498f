from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence, TextIO

from codebundle.constants import RSP_FILENAME
from codebundle.core.errors import BundleError, UsageError
from codebundle.core.models import BundleRequest
from codebundle.interactive.responder import ResponseFileBuilder
from codebundle.logging.factory import DefaultLoggerFactory
from codebundle.logging.helpers import get_logger
from codebundle.parsing.parser import _build_parser
from codebundle.runtime.pipeline import BundlePipeline
from codebundle.runtime.settings import RuntimeSettings


logger = get_logger('codebundle')


def _configure_logging(settings: RuntimeSettings, *, json_logs: bool, verbose: bool) -> None:
    """Configure process-wide logging, either JSON or plain text."""
    level = settings.log_level
    if verbose or settings.trace_io:
        level = logging.DEBUG
    factory = DefaultLoggerFactory(json_logs=json_logs or settings.json_logs, level=level)
    global logger
    logger = factory.get_logger('codebundle')


def _report_error(err: object, out: TextIO) -> int:
    """Render a handled failure as a single `Error: <message>` line."""
    print(f'Error: {err}', file=out)
    return 0


class CodeBundle:
    """Top-level façade for command-style execution."""

    def __init__(
        self,
        *,
        settings: Optional[RuntimeSettings] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        root: Optional[Path] = None,
    ) -> None:
        self._settings = settings or RuntimeSettings.from_env()
        self._in = stdin
        self._out = stdout
        self._root = root

    @property
    def out(self) -> TextIO:
        return self._out or sys.stdout

    def run(self, argv: Sequence[str]) -> int:
        """Parse *argv*, dispatch the subcommand and return the exit status.

        Handled failures (bad arguments, unsupported language, unreadable
        files, ...) are printed as `Error: <message>` and still return 0.
        """
        parser = _build_parser()
        try:
            ns = parser.parse_args(list(argv))
        except UsageError as exc:
            return _report_error(exc, self.out)

        _configure_logging(self._settings, json_logs=ns.json_logs, verbose=ns.verbose)

        if ns.show_version:
            from codebundle import __version__

            print(__version__, file=self.out)
            return 0
        if ns.command == 'bundle':
            return self._bundle(ns)
        if ns.command == 'create-rsp':
            return self._create_rsp()

        parser.print_help(file=self.out)
        return 0

    def _bundle(self, ns: argparse.Namespace) -> int:
        request = BundleRequest.from_namespace(ns)
        logger.debug('bundle request: %r', request)
        result = BundlePipeline(logger=get_logger('pipeline')).run(request, root=self._root)
        if not result.ok:
            return self._fail(result.error)
        print(f'Bundle created successfully at: {result.value.output_path}', file=self.out)
        return 0

    def _create_rsp(self) -> int:
        builder = ResponseFileBuilder(stdin=self._in, stdout=self._out)
        target = (self._root / RSP_FILENAME) if self._root else None
        result = builder.run(target)
        if not result.ok:
            return self._fail(result.error)
        return 0

    def _fail(self, err: Optional[BundleError]) -> int:
        logger.debug('command failed: %s', err.kind.value if err else 'unknown')
        return _report_error(err, self.out)


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `codebundle` console script and `python -m codebundle`."""
    settings = RuntimeSettings.from_env()
    try:
        code = CodeBundle(settings=settings).run(sys.argv[1:] if argv is None else argv)
        raise SystemExit(code)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if settings.debug:
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
