from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

from codebundle.core.errors import ErrorKind
from codebundle.core.models import BundleRequest
from codebundle.runtime.pipeline import BundlePipeline
from tools.build_fixtures import build_tree

NL = os.linesep


def _nl(text: str) -> str:
    return text.replace("\n", NL)


class PipelineBaseTest(unittest.TestCase):
    def setUp(self) -> None:
        self._td = tempfile.TemporaryDirectory()
        self.root = Path(self._td.name) / "project"
        self.root.mkdir()
        self.out = Path(self._td.name) / "out" / "bundle.txt"

    def tearDown(self) -> None:
        self._td.cleanup()

    def _run(self, **kwargs):
        kwargs.setdefault("output_path", self.out)
        return BundlePipeline().run(BundleRequest(**kwargs), root=self.root)

    def _read_out(self) -> str:
        with open(self.out, encoding="utf-8", newline="") as fh:
            return fh.read()


class ReferenceScenarioTests(PipelineBaseTest):
    def setUp(self) -> None:
        super().setUp()
        (self.root / "a.py").write_text("x\n\ny\n", encoding="utf-8")
        (self.root / "b.py").write_text("z\n", encoding="utf-8")

    def test_remove_empty_lines_and_block_separators(self) -> None:
        res = self._run(language="python", sort_order="name", remove_empty_lines=True)
        self.assertTrue(res.ok, res.error)
        self.assertIn(_nl("x\ny\n\nz\n\n"), self._read_out())

    def test_without_removal_content_is_verbatim(self) -> None:
        self._run(language="python")
        self.assertEqual(self._read_out(), "x\n\ny\n" + NL + NL + "z\n" + NL + NL)

    def test_author_and_notes(self) -> None:
        self._run(language="python", include_source_note=True, remove_empty_lines=True, author="Ada")
        self.assertEqual(
            self._read_out(),
            _nl("// Author: Ada\n\n// Source: a.py\nx\ny\n\n// Source: b.py\nz\n\n"),
        )

    def test_outcome_lists_bundled_files(self) -> None:
        res = self._run(language="python")
        self.assertEqual([f.name for f in res.value.files], ["a.py", "b.py"])
        self.assertTrue(res.value.output_path.is_absolute())


class FixtureTreeTests(PipelineBaseTest):
    def setUp(self) -> None:
        super().setUp()
        build_tree(self.root)

    def test_python_bundle_sorted_by_name(self) -> None:
        res = self._run(language="python", sort_order="name")
        names = [f.name for f in res.value.files]
        self.assertEqual(names, ["Upper.PY", "alpha.py", "beta.py", "gamma.py", "kept.py"])

    def test_build_output_files_never_bundled(self) -> None:
        self._run(language="all")
        dump = self._read_out()
        self.assertNotIn("SKIPPED", dump)
        self.assertNotIn("SkippedDebug", dump)
        self.assertIn("KEPT = True", dump)

    def test_all_sorted_by_type(self) -> None:
        res = self._run(language="all", sort_order="type")
        self.assertEqual(
            [f.name for f in res.value.files],
            [
                "util.cpp",
                "Main.cs",
                "util.h",
                "Service.java",
                "charlie.js",
                "Upper.PY",
                "alpha.py",
                "beta.py",
                "gamma.py",
                "kept.py",
            ],
        )

    def test_notes_use_host_separator(self) -> None:
        self._run(language="javascript", include_source_note=True)
        note = "// Source: " + os.path.join("src", "module", "charlie.js")
        self.assertTrue(self._read_out().startswith(note + NL))

    def test_cpp_alias(self) -> None:
        res = self._run(language="C++")
        self.assertEqual({f.name for f in res.value.files}, {"util.cpp", "util.h"})

    def test_unknown_sort_keeps_discovery_order(self) -> None:
        res = self._run(language="python", sort_order="size")
        self.assertTrue(res.ok)
        self.assertEqual(len(res.value.files), 5)

    def test_existing_output_overwritten(self) -> None:
        self.out.parent.mkdir(parents=True)
        self.out.write_text("stale", encoding="utf-8")
        self._run(language="csharp")
        self.assertNotIn("stale", self._read_out())


class FailureTests(PipelineBaseTest):
    def test_missing_output_fails_before_io(self) -> None:
        discovery = MagicMock()
        writer = MagicMock()
        res = BundlePipeline(discovery=discovery, writer=writer).run(
            BundleRequest(language="python", output_path=None), root=self.root
        )
        self.assertFalse(res.ok)
        self.assertIs(res.error.kind, ErrorKind.MISSING_OUTPUT_PATH)
        self.assertEqual(str(res.error), "Output file path is required.")
        discovery.discover.assert_not_called()
        writer.write.assert_not_called()

    def test_unsupported_language_reports_token(self) -> None:
        res = self._run(language="Klingon")
        self.assertFalse(res.ok)
        self.assertEqual(str(res.error), "Unsupported language: Klingon")
        self.assertFalse(self.out.exists())
        self.assertFalse(self.out.parent.exists())

    def test_read_failure_leaves_no_output(self) -> None:
        (self.root / "a.py").write_text("a\n", encoding="utf-8")
        (self.root / "b.py").write_text("b\n", encoding="utf-8")
        with patch("codebundle.io.readers.open", create=True, side_effect=PermissionError(13, "Permission denied")):
            res = self._run(language="python")
        self.assertFalse(res.ok)
        self.assertIs(res.error.kind, ErrorKind.FILE_READ_FAILURE)
        self.assertFalse(self.out.exists())

    def test_directory_creation_failure(self) -> None:
        (self.root / "a.py").write_text("a\n", encoding="utf-8")
        blocker = Path(self._td.name) / "blocker"
        blocker.write_text("file", encoding="utf-8")
        res = self._run(language="python", output_path=blocker / "bundle.txt")
        self.assertIs(res.error.kind, ErrorKind.DIRECTORY_CREATION_FAILURE)


if __name__ == "__main__":
    unittest.main()
