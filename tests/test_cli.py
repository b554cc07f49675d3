"""
Tests for the command-line entry point.
"""

import sys

from PIL import Image

from py_heightfield.__main__ import main


class TestCommandLine:
    """Test ``python -m py_heightfield``."""

    def test_prints_table_and_writes_png(self, tmp_path, capsys, monkeypatch):
        monkeypatch.setattr(sys, "excepthook", sys.excepthook)
        output = tmp_path / "map.png"

        exit_code = main([
            "--width", "4", "--height", "3",
            "--max-height", "10", "--octaves", "0",
            "--seed", "42", "--png", str(output),
        ])

        assert exit_code == 0
        rows = capsys.readouterr().out.rstrip("\n").split("\r\n")
        assert len(rows) == 3
        assert all(len(row.split()) == 4 for row in rows)
        assert Image.open(output).size == (4, 3)

    def test_html_output(self, capsys, monkeypatch):
        monkeypatch.setattr(sys, "excepthook", sys.excepthook)

        main(["--width", "2", "--height", "2", "--seed", "1", "--html"])

        assert capsys.readouterr().out.startswith("<table>")
