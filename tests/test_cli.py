"""Tests for the command line interface."""

import json
import os
import tempfile
import unittest

from typer.testing import CliRunner

from deltahtml.cli.main import app

FIXTURE = os.path.join(os.path.dirname(__file__), "fixtures", "delta_fixture.json")


class CliTest(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def test_render_prints_fragment(self):
        result = self.runner.invoke(app, ["render", FIXTURE])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("<h1>Release notes</h1>", result.output)

    def test_render_full_page_with_title(self):
        result = self.runner.invoke(
            app, ["render", FIXTURE, "--full-page", "--title", "Notes"]
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("<title>Notes</title>", result.output)

    def test_render_without_embeds(self):
        result = self.runner.invoke(app, ["render", FIXTURE, "--no-embeds"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertNotIn("logo.png", result.output)

    def test_render_to_directory(self):
        result = self.runner.invoke(
            app, ["render", FIXTURE, "--out-dir", self.tmp.name]
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertTrue(
            os.path.exists(os.path.join(self.tmp.name, "delta_fixture.html"))
        )

    def test_render_invalid_file_exits_1(self):
        path = os.path.join(self.tmp.name, "bad.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump([{"delete": 0}], f)
        result = self.runner.invoke(app, ["render", path])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Error:", result.output)

    def test_segments_table(self):
        result = self.runner.invoke(app, ["segments", FIXTURE])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("inline", result.output)
        self.assertIn("h1", result.output)

    def test_verbose_flag(self):
        result = self.runner.invoke(app, ["--verbose", "render", FIXTURE])
        self.assertEqual(result.exit_code, 0, result.output)


if __name__ == "__main__":
    unittest.main()
