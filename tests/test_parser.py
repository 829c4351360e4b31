"""Tests for the pyvenv.cfg parser."""

from __future__ import annotations

from pathlib import Path

from unvenv.parser import parse_marker, read_marker


class TestParseMarker:
    def test_all_fields(self):
        content = "home = /usr/bin\nversion = 3.11.4\ninclude-system-site-packages = false\n"
        assert parse_marker(content) == {
            "home": "/usr/bin",
            "version": "3.11.4",
            "include-system-site-packages": "false",
        }

    def test_empty_content(self):
        assert parse_marker("") == {}

    def test_whitespace_around_equals_is_insignificant(self):
        assert parse_marker("version=3.12.0\nhome   =   /opt/py/bin  \n") == {
            "home": "/opt/py/bin",
            "version": "3.12.0",
        }

    def test_unknown_keys_ignored(self):
        content = "executable = /usr/bin/python3.12\ncommand = python -m venv x\nversion = 3.12.0\n"
        assert parse_marker(content) == {"version": "3.12.0"}

    def test_keys_are_case_sensitive(self):
        assert parse_marker("Version = 3.12.0\nHOME = /usr\n") == {}

    def test_last_occurrence_wins(self):
        assert parse_marker("version = 3.9.0\nversion = 3.10.1\n") == {"version": "3.10.1"}

    def test_malformed_lines_skipped(self):
        content = "garbage line\n\n   \n# version = 1.0\n[section]\nversion = 3.8.10\n"
        assert parse_marker(content) == {"version": "3.8.10"}

    def test_value_may_contain_equals(self):
        assert parse_marker("home = /weird=path/bin\n") == {"home": "/weird=path/bin"}

    def test_empty_value_is_present(self):
        assert parse_marker("home =\n") == {"home": ""}

    def test_canonical_field_order(self):
        content = "include-system-site-packages = true\nversion = 3.11.0\nhome = /usr/bin\n"
        assert list(parse_marker(content)) == [
            "home",
            "version",
            "include-system-site-packages",
        ]

    def test_crlf_line_endings(self):
        assert parse_marker("home = C:\\Python311\r\nversion = 3.11.4\r\n") == {
            "home": "C:\\Python311",
            "version": "3.11.4",
        }


class TestReadMarker:
    def test_reads_file(self, tmp_path: Path):
        cfg = tmp_path / "pyvenv.cfg"
        cfg.write_text("version = 3.12.0\n")
        content = read_marker(cfg)
        assert content.fields == {"version": "3.12.0"}
        assert content.error is None

    def test_utf8_bom(self, tmp_path: Path):
        cfg = tmp_path / "pyvenv.cfg"
        cfg.write_bytes(b"\xef\xbb\xbfhome = /usr/bin\n")
        assert read_marker(cfg).fields == {"home": "/usr/bin"}

    def test_missing_file_degrades(self, tmp_path: Path):
        content = read_marker(tmp_path / "gone" / "pyvenv.cfg")
        assert content.fields == {}
        assert content.error is not None
        assert content.error.startswith("unreadable")

    def test_binary_content_degrades(self, tmp_path: Path):
        cfg = tmp_path / "pyvenv.cfg"
        cfg.write_bytes(b"version = 3.12.0\x00\x01\x02")
        content = read_marker(cfg)
        assert content.fields == {}
        assert content.error == "not a text file"

    def test_invalid_utf8_degrades(self, tmp_path: Path):
        cfg = tmp_path / "pyvenv.cfg"
        cfg.write_bytes(b"home = /usr/\xff\xfe/bin\n")
        content = read_marker(cfg)
        assert content.fields == {}
        assert content.error == "not valid UTF-8"
