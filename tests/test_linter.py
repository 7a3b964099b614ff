"""Tests for i18nlint.linter: file resolution and per-file driving."""

import pytest

from i18nlint import linter
from i18nlint.parser import LocaleFileError

CLEAN = """\
en:
  title: "Hello"
  items:
    one: "%{count} item"
    other: "%{count} items"
"""

BROKEN = """\
en:
  faq: '<a href="/faq">FAQ</a>'
"""


class TestResolveFilenames:
    def test_sorted_and_deduplicated(self, write_locale, tmp_path):
        b = write_locale("b.en.yml", CLEAN)
        a = write_locale("a.en.yml", CLEAN)

        patterns = [str(tmp_path / "*.yml"), a]
        assert linter.resolve_filenames(patterns) == [a, b]

    def test_recursive_pattern(self, write_locale, tmp_path):
        nested = write_locale("plugins/poll/config/locales/client.en.yml", CLEAN)
        assert linter.resolve_filenames([str(tmp_path / "**" / "*.en.yml")]) == [nested]

    def test_unmatched_pattern_is_skipped(self, tmp_path, caplog):
        with caplog.at_level("WARNING"):
            assert linter.resolve_filenames([str(tmp_path / "*.yml")]) == []
        assert "No files match" in caplog.text


class TestLintFile:
    def test_clean_file(self, write_locale, capsys):
        report = linter.lint_file(write_locale("en.yml", CLEAN))

        assert report.has_errors is False
        assert capsys.readouterr().out == ""

    def test_file_with_errors(self, write_locale, capsys):
        path = write_locale("en.yml", BROKEN)
        report = linter.lint_file(path)

        assert report.violations == {"invalid_relative_links": ("faq",)}
        out = capsys.readouterr().out
        assert f"Errors in {path}" in out
        assert "    * faq" in out


class TestRun:
    def test_no_errors_exits_zero(self, write_locale, tmp_path, capsys):
        write_locale("a.en.yml", CLEAN)
        write_locale("b.en.yml", CLEAN)

        assert linter.run(patterns=[str(tmp_path / "*.yml")]) == 0
        assert capsys.readouterr().out == ""

    def test_any_error_exits_one(self, write_locale, tmp_path, capsys):
        write_locale("a.en.yml", CLEAN)
        broken = write_locale("b.en.yml", BROKEN)

        assert linter.run(patterns=[str(tmp_path / "*.yml")]) == 1
        assert f"Errors in {broken}" in capsys.readouterr().out

    def test_no_files_exits_zero(self, tmp_path):
        assert linter.run(patterns=[str(tmp_path / "*.yml")]) == 0

    def test_load_error_propagates(self, write_locale, tmp_path):
        write_locale("bad.en.yml", "en:\n  title: [unclosed\n")

        with pytest.raises(LocaleFileError, match="bad.en.yml"):
            linter.run(patterns=[str(tmp_path / "*.yml")])
