#!/usr/bin/env python3
"""Tests for the workflows and the command-line interface."""

import io
import logging
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock

import requests

from cube_draftmancer.cli import main
from cube_draftmancer.config import INTO_THE_STORY_CUBE_ID, WorkflowConfig
from cube_draftmancer.cubecobra import (
    csv_download_url,
    download_card_list,
    plaintext_download_url,
)
from cube_draftmancer.errors import MissingArgumentError, TransportError
from cube_draftmancer.logging_utils import setup_cli_logging
from cube_draftmancer.workflows import into_the_story, remastering_magic

CSV_DATA = (
    "name,CMC,Type,Color,Set,Collector Number,Rarity,Color Category\n"
    '"Icatian Moneychanger",1,"Creature - Human",W,"fem","10c",common,w\n'
    '"Humility",4,"Enchantment",W,"tpr","16",mythic,w\n'
)
PLAINTEXT_DATA = "# mainboard\nForest\nForest\nIsland\n# maybeboard\nMountain\n"


def fake_response(text, status_error=None):
    """Build a stand-in for requests.Response."""
    response = mock.Mock()
    response.text = text
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    return response


class TestDownloadCardList(unittest.TestCase):
    """Test the CubeCobra download helper."""

    def test_urls_contain_cube_id(self):
        """Test the cube ID is interpolated into both export URLs."""
        self.assertTrue(
            csv_download_url("abc").startswith("https://cubecobra.com/cube/download/csv/abc?")
        )
        self.assertTrue(
            plaintext_download_url("abc").startswith(
                "https://cubecobra.com/cube/download/plaintext/abc?"
            )
        )

    @mock.patch("cube_draftmancer.cubecobra.requests.get")
    def test_returns_body(self, mock_get):
        """Test the response body is returned as text."""
        mock_get.return_value = fake_response("hello")

        self.assertEqual(download_card_list("https://example.com", timeout=5), "hello")
        mock_get.assert_called_once_with("https://example.com", timeout=5)

    @mock.patch("cube_draftmancer.cubecobra.requests.get")
    def test_http_error(self, mock_get):
        """Test a non-success status becomes a TransportError."""
        mock_get.return_value = fake_response(
            "missing", status_error=requests.HTTPError("404 Client Error")
        )

        with self.assertRaises(TransportError) as ctx:
            download_card_list("https://example.com")

        self.assertEqual(ctx.exception.url, "https://example.com")
        self.assertIn("404", str(ctx.exception))

    @mock.patch("cube_draftmancer.cubecobra.requests.get")
    def test_connection_error(self, mock_get):
        """Test transport failures become a TransportError."""
        mock_get.side_effect = requests.ConnectionError("connection refused")

        with self.assertRaises(TransportError):
            download_card_list("https://example.com")


class TestWorkflows(unittest.TestCase):
    """Test the two conversions end to end with a mocked network."""

    def setUp(self):
        """Set up an output directory."""
        self.temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.temp_dir.cleanup)
        self.config = WorkflowConfig(output_dir=Path(self.temp_dir.name))

    @mock.patch("cube_draftmancer.cubecobra.requests.get")
    def test_remastering_magic_writes_file(self, mock_get):
        """Test the CSV workflow writes <cube_id>.txt and returns its content."""
        mock_get.return_value = fake_response(CSV_DATA)

        result = remastering_magic("mycube", self.config)

        output_file = Path(self.temp_dir.name) / "mycube.txt"
        self.assertTrue(output_file.exists())
        self.assertEqual(output_file.read_text(encoding="utf-8"), result)
        self.assertTrue(result.startswith("[Settings]\n"))
        self.assertIn("[Common]\nIcatian Moneychanger\n", result)
        self.assertIn("[Mythic]\nHumility\n", result)
        self.assertEqual(mock_get.call_args[0][0], csv_download_url("mycube"))

    @mock.patch("cube_draftmancer.cubecobra.requests.get")
    def test_remastering_magic_overwrites(self, mock_get):
        """Test an existing output file is replaced."""
        mock_get.return_value = fake_response(CSV_DATA)
        output_file = Path(self.temp_dir.name) / "mycube.txt"
        output_file.write_text("old", encoding="utf-8")

        remastering_magic("mycube", self.config)

        self.assertNotIn("old", output_file.read_text(encoding="utf-8"))

    def test_remastering_magic_needs_cube_id(self):
        """Test the CSV workflow refuses to run without a cube ID."""
        with self.assertRaises(MissingArgumentError):
            remastering_magic(None, self.config)

    @mock.patch("cube_draftmancer.cubecobra.requests.get")
    def test_failed_download_writes_nothing(self, mock_get):
        """Test no partial output is left behind on a transport error."""
        mock_get.side_effect = requests.Timeout("timed out")

        with self.assertRaises(TransportError):
            remastering_magic("mycube", self.config)

        self.assertFalse((Path(self.temp_dir.name) / "mycube.txt").exists())

    @mock.patch("cube_draftmancer.cubecobra.requests.get")
    def test_into_the_story(self, mock_get):
        """Test the plaintext workflow renders the Archive list."""
        mock_get.return_value = fake_response(PLAINTEXT_DATA)

        result = into_the_story(self.config)

        self.assertIn("[Cubed]\nForest\nIsland\n[Archived]\nForest\n", result)
        self.assertEqual(
            mock_get.call_args[0][0], plaintext_download_url(INTO_THE_STORY_CUBE_ID)
        )
        self.assertEqual(list(Path(self.temp_dir.name).iterdir()), [])


@mock.patch("cube_draftmancer.cli.setup_cli_logging")
class TestMain(unittest.TestCase):
    """Test command-line dispatch."""

    def setUp(self):
        """Set up an output directory."""
        self.temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.temp_dir.cleanup)

    def run_main(self, *argv):
        """Run main and return what it printed."""
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            main([*argv, "--output-dir", self.temp_dir.name])
        return stdout.getvalue()

    def test_no_workflow(self, _):
        """Test no argument does nothing."""
        self.assertEqual(self.run_main(), "")

    def test_unknown_workflow(self, _):
        """Test an unknown workflow does nothing."""
        self.assertEqual(self.run_main("somethingelse"), "")

    def test_unknown_option_ignored(self, _):
        """Test an unrecognised option does nothing instead of failing."""
        self.assertEqual(self.run_main("--foo"), "")

    @mock.patch("cube_draftmancer.cubecobra.requests.get")
    def test_rema_ignores_extra_arguments(self, mock_get, _):
        """Test arguments after the cube ID do not stop the workflow."""
        mock_get.return_value = fake_response(CSV_DATA)

        output = self.run_main("rema", "mycube", "extra")

        self.assertTrue(output.startswith("[Settings]\n"))
        self.assertTrue((Path(self.temp_dir.name) / "mycube.txt").exists())

    def test_rema_without_cube_id(self, _):
        """Test a missing cube ID is reported without failing."""
        with self.assertLogs("cube_draftmancer.cli", level="ERROR") as logs:
            output = self.run_main("rema")

        self.assertEqual(output, "")
        self.assertIn("cube ID", logs.output[0])
        self.assertEqual(list(Path(self.temp_dir.name).iterdir()), [])

    @mock.patch("cube_draftmancer.cubecobra.requests.get")
    def test_rema_prints_and_writes(self, mock_get, _):
        """Test the long workflow name writes and prints the list."""
        mock_get.return_value = fake_response(CSV_DATA)

        output = self.run_main("RemasteringMagic", "garbagemasters")

        written = (Path(self.temp_dir.name) / "garbagemasters.txt").read_text(
            encoding="utf-8"
        )
        self.assertEqual(output, written + "\n")

    @mock.patch("cube_draftmancer.cubecobra.requests.get")
    def test_its_prints(self, mock_get, _):
        """Test the Into the Story workflow prints the Archive list."""
        mock_get.return_value = fake_response(PLAINTEXT_DATA)

        output = self.run_main("its")

        self.assertTrue(output.startswith("[Layouts]\n- Archive (1)\n"))

    @mock.patch("cube_draftmancer.cubecobra.requests.get")
    def test_transport_error_exits_nonzero(self, mock_get, _):
        """Test a failed download ends the process with status 1."""
        mock_get.side_effect = requests.ConnectionError("connection refused")

        with self.assertRaises(SystemExit) as ctx:
            self.run_main("IntoTheStory")

        self.assertEqual(ctx.exception.code, 1)

    @mock.patch("cube_draftmancer.cubecobra.requests.get")
    def test_unknown_rarity_exits_nonzero(self, mock_get, _):
        """Test a bad rarity aborts without writing a file."""
        mock_get.return_value = fake_response(
            'header\n"Nicol Bolas",7,"Creature",B,"leg","1",legendary,m\n'
        )

        with self.assertRaises(SystemExit) as ctx:
            self.run_main("rema", "mycube")

        self.assertEqual(ctx.exception.code, 1)
        self.assertFalse((Path(self.temp_dir.name) / "mycube.txt").exists())


class TestSetupCliLogging(unittest.TestCase):
    """Test console logging setup."""

    def setUp(self):
        """Remember the root logger state."""
        root = logging.getLogger()
        self.addCleanup(setattr, root, "handlers", list(root.handlers))
        self.addCleanup(root.setLevel, root.level)

    def test_logs_to_stderr(self):
        """Test log records go to stderr so stdout only carries the card list."""
        setup_cli_logging()

        handler = logging.getLogger().handlers[-1]
        self.assertIs(handler.stream, sys.stderr)
        self.assertEqual(handler.level, logging.INFO)

    def test_verbose_shows_debug(self):
        """Test verbose mode lets DEBUG records through."""
        setup_cli_logging(verbose=True)

        self.assertEqual(logging.getLogger().handlers[-1].level, logging.DEBUG)


if __name__ == "__main__":
    unittest.main()
