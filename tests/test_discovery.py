from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from codebundle.core.errors import ErrorKind
from codebundle.core.models import Language
from codebundle.discovery.file_discovery import FileDiscovery
from codebundle.discovery.languages import ExtensionResolver, resolve_extensions
from codebundle.utils.paths import has_excluded_segment
from tools.build_fixtures import build_tree


class ExtensionResolverTests(unittest.TestCase):
    EXPECTED = {
        "all": {".cs", ".java", ".py", ".js", ".cpp", ".h"},
        "csharp": {".cs"},
        "c#": {".cs"},
        "java": {".java"},
        "python": {".py"},
        "javascript": {".js"},
        "cpp": {".cpp", ".h"},
        "c++": {".cpp", ".h"},
    }

    def test_every_token_resolves_to_its_set(self) -> None:
        resolver = ExtensionResolver()
        for token, exts in self.EXPECTED.items():
            with self.subTest(token=token):
                res = resolver.resolve(token)
                self.assertTrue(res.ok)
                self.assertEqual(set(res.value), exts)

    def test_tokens_are_case_insensitive(self) -> None:
        for token in ("PYTHON", "Python", "C#", "CPP", "All", "JavaScript"):
            with self.subTest(token=token):
                res = resolve_extensions(token)
                self.assertEqual(set(res.value), self.EXPECTED[token.lower()])

    def test_unsupported_language_names_the_token(self) -> None:
        res = resolve_extensions("Cobol")
        self.assertFalse(res.ok)
        self.assertIs(res.error.kind, ErrorKind.UNSUPPORTED_LANGUAGE)
        self.assertEqual(str(res.error), "Unsupported language: Cobol")

    def test_language_lookup_table(self) -> None:
        self.assertIs(Language.lookup("c++"), Language.CPP)
        self.assertIs(Language.lookup(" java "), Language.JAVA)
        self.assertIsNone(Language.lookup("rust"))
        self.assertIsNone(Language.lookup(""))


class FileDiscoveryTests(unittest.TestCase):
    def setUp(self) -> None:
        self._td = tempfile.TemporaryDirectory()
        self.root = build_tree(Path(self._td.name))

    def tearDown(self) -> None:
        self._td.cleanup()

    def _relpaths(self) -> set:
        res = FileDiscovery().discover(self.root)
        self.assertTrue(res.ok, res.error)
        return {f.relpath for f in res.value}

    def test_lists_every_file_recursively(self) -> None:
        rels = self._relpaths()
        self.assertIn(os.path.join("src", "module", "alpha.py"), rels)
        self.assertIn(os.path.join("src", "app", "Main.cs"), rels)
        self.assertIn("notes.txt", rels)
        self.assertIn("README.md", rels)

    def test_build_output_directories_are_excluded(self) -> None:
        rels = self._relpaths()
        self.assertNotIn(os.path.join("bin", "skipped.py"), rels)
        self.assertNotIn(os.path.join("build", "debug", "skipped.cs"), rels)

    def test_exclusion_is_case_sensitive(self) -> None:
        self.assertIn(os.path.join("Debug", "kept.py"), self._relpaths())

    def test_paths_are_absolute(self) -> None:
        res = FileDiscovery().discover(self.root)
        self.assertTrue(all(f.path.is_absolute() for f in res.value))

    def test_missing_root_fails(self) -> None:
        res = FileDiscovery().discover(self.root / "nope")
        self.assertFalse(res.ok)
        self.assertIs(res.error.kind, ErrorKind.DIRECTORY_SCAN_FAILURE)

    def test_walk_error_is_reported(self) -> None:
        def _walk(top, onerror=None, **kwargs):
            onerror(PermissionError(13, "Permission denied", str(top)))
            return iter(())

        with patch("codebundle.discovery.file_discovery.os.walk", side_effect=_walk):
            res = FileDiscovery().discover(self.root)
        self.assertFalse(res.ok)
        self.assertIs(res.error.kind, ErrorKind.DIRECTORY_SCAN_FAILURE)

    def test_root_below_bin_yields_nothing(self) -> None:
        proj = Path(self._td.name) / "bin" / "proj"
        (proj / "pkg").mkdir(parents=True)
        (proj / "a.py").write_text("a = 1\n", encoding="utf-8")
        (proj / "pkg" / "b.py").write_text("b = 2\n", encoding="utf-8")
        res = FileDiscovery().discover(proj)
        self.assertTrue(res.ok, res.error)
        self.assertEqual(res.value, [])


class ExcludedSegmentTests(unittest.TestCase):
    def test_only_directory_segments_count(self) -> None:
        from pathlib import PurePath

        names = {"bin", "debug"}
        self.assertTrue(has_excluded_segment(PurePath("a/bin/x.py"), names))
        self.assertTrue(has_excluded_segment(PurePath("debug/x.py"), names))
        self.assertFalse(has_excluded_segment(PurePath("a/bin"), names))
        self.assertFalse(has_excluded_segment(PurePath("binary/x.py"), names))
        self.assertFalse(has_excluded_segment(PurePath("Bin/x.py"), names))
        self.assertTrue(has_excluded_segment(PurePath("/srv/bin/proj/x.py"), names))


if __name__ == "__main__":
    unittest.main()
