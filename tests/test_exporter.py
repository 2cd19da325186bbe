"""Tests for file export helpers."""

import json
import os
import tempfile
import unittest

from deltahtml.exceptions import DeltaLoadError
from deltahtml.rendering.exporter import export_delta, load_delta, write_html
from deltahtml.rendering.renderer import render_delta_fragment

FIXTURE = os.path.join(os.path.dirname(__file__), "fixtures", "delta_fixture.json")


class ExporterTest(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def _write(self, name, content):
        path = os.path.join(self.tmp.name, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    def test_render_fixture_output(self):
        html = render_delta_fragment(load_delta(FIXTURE))
        self.assertTrue(html.startswith("<h1>Release notes</h1>"))
        self.assertIn(
            "<p>This release brings <b>faster</b> rendering and "
            "<u><em>fewer</em></u> surprises.</p>",
            html,
        )
        self.assertIn("<h2>Highlights</h2>", html)
        self.assertIn(
            "<ul><li>Lists group across ops</li><li>Headers clamp to h6</li></ul>",
            html,
        )
        self.assertIn("https://example.com/logo.png", html)
        self.assertTrue(html.endswith("<p><s>old text</s></p>"))

    def test_load_bare_list(self):
        path = self._write("list.json", json.dumps([{"insert": "x\n"}]))
        self.assertEqual(len(load_delta(path)), 1)

    def test_load_invalid_json(self):
        path = self._write("bad.json", "{not json")
        with self.assertRaises(DeltaLoadError):
            load_delta(path)

    def test_load_invalid_utf8(self):
        path = os.path.join(self.tmp.name, "latin1.json")
        with open(path, "wb") as f:
            f.write(b'[{"insert": "\xff"}]')
        with self.assertRaises(DeltaLoadError) as cm:
            load_delta(path)
        self.assertEqual(cm.exception.source, path)
        self.assertIsInstance(cm.exception.__cause__, UnicodeDecodeError)

    def test_load_invalid_delta(self):
        path = self._write("bad.json", json.dumps([{"retain": 0}]))
        with self.assertRaises(DeltaLoadError) as cm:
            load_delta(path)
        self.assertEqual(cm.exception.source, path)

    def test_write_html_fragment(self):
        path = write_html("My: note", "<p>x</p>", self.tmp.name)
        self.assertEqual(os.path.basename(path), "My- note.html")
        with open(path, encoding="utf-8") as f:
            self.assertEqual(f.read(), "<p>x</p>")

    def test_write_html_full_page(self):
        path = write_html("T", "<p>x</p>", self.tmp.name, full_page=True)
        with open(path, encoding="utf-8") as f:
            page = f.read()
        self.assertTrue(page.startswith("<!doctype html>"))
        self.assertIn("<title>T</title>", page)
        self.assertIn('<div class="delta-content"><p>x</p></div>', page)

    def test_export_delta(self):
        out_dir = os.path.join(self.tmp.name, "out")
        path = export_delta(FIXTURE, out_dir)
        self.assertEqual(os.path.basename(path), "delta_fixture.html")
        with open(path, encoding="utf-8") as f:
            self.assertIn("<h1>Release notes</h1>", f.read())


if __name__ == "__main__":
    unittest.main()
