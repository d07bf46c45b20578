"""Tests for pyfd.core.scanner module."""

from __future__ import annotations

import io
from pathlib import Path, PurePath

from pyfd.core.config import FinderConfig
from pyfd.core.scanner import is_hidden, iter_candidates, scan, search
from pyfd.core.types import DirEntry, EntryKind
from pyfd.search.matchers import compile_pattern
from pyfd.utils.formatter import EntryPrinter
from pyfd.utils.logging_config import LogLevel, configure_logging


def _p(rel: str) -> str:
    return str(PurePath(rel))


def _texts(root: Path, pattern: str, **flags) -> list[str]:
    cfg = FinderConfig.from_flags(pattern, no_color=True, **flags)
    return [m.text for m in search(root, compile_pattern(pattern, cfg.case_sensitive), cfg)]


class TestIsHidden:
    def test_dot_prefix(self, tmp_path: Path):
        assert is_hidden(DirEntry(path=tmp_path / ".git", depth=1))
        assert not is_hidden(DirEntry(path=tmp_path / "src", depth=1))

    def test_checks_bare_name_only(self, tmp_path: Path):
        assert not is_hidden(DirEntry(path=tmp_path / ".cache" / "file", depth=2))


class TestIterCandidates:
    def test_excludes_root_and_hidden(self, sample_tree: Path):
        rels = [str(rel) for _, rel in iter_candidates(sample_tree, FinderConfig())]
        assert rels == [_p("LICENSE"), _p("a"), _p("a/b"), _p("a/b/README.md")]

    def test_hidden_included_on_request(self, sample_tree: Path):
        rels = [str(rel) for _, rel in iter_candidates(sample_tree, FinderConfig(search_hidden=True))]
        assert _p("a/.hidden") in rels
        assert _p("a/.hidden/secret.md") in rels

    def test_hidden_files_excluded(self, tmp_path: Path):
        (tmp_path / ".env").write_text("x", encoding="utf-8")
        (tmp_path / "visible").write_text("x", encoding="utf-8")
        rels = [str(rel) for _, rel in iter_candidates(tmp_path, FinderConfig())]
        assert rels == ["visible"]

    def test_hidden_root_is_still_searched(self, tmp_path: Path):
        root = tmp_path / ".dotfiles"
        root.mkdir()
        (root / "vimrc").write_text("x", encoding="utf-8")
        rels = [str(rel) for _, rel in iter_candidates(root, FinderConfig())]
        assert rels == ["vimrc"]


class TestSearch:
    def test_readme_scenario(self, sample_tree: Path):
        assert _texts(sample_tree, "readme") == [_p("a/b/README.md")]

    def test_smart_case(self, tmp_path: Path):
        (tmp_path / "README.md").write_text("x", encoding="utf-8")
        (tmp_path / "readme.txt").write_text("x", encoding="utf-8")
        (tmp_path / "Readme.rst").write_text("x", encoding="utf-8")

        assert sorted(_texts(tmp_path, "readme")) == ["README.md", "Readme.rst", "readme.txt"]
        assert _texts(tmp_path, "Readme") == ["Readme.rst"]

    def test_empty_pattern_lists_every_visible_entry_once(self, sample_tree: Path):
        texts = _texts(sample_tree, "")
        assert texts == [_p("LICENSE"), _p("a"), _p("a/b"), _p("a/b/README.md")]
        assert len(texts) == len(set(texts))

    def test_root_never_matches(self, tmp_path: Path):
        root = tmp_path / "needle"
        root.mkdir()
        (root / "hay").write_text("x", encoding="utf-8")
        assert _texts(root, "needle") == []

    def test_filename_mode_excludes_directories(self, tmp_path: Path):
        (tmp_path / "docs" / "docs").mkdir(parents=True)
        (tmp_path / "docs" / "docs" / "docs.md").write_text("x", encoding="utf-8")

        full = _texts(tmp_path, "docs")
        names = _texts(tmp_path, "docs", filename=True)
        assert full == [_p("docs"), _p("docs/docs"), _p("docs/docs/docs.md")]
        assert names == [_p("docs/docs/docs.md")]
        assert set(names) <= set(full)

    def test_transitive_hidden_exclusion(self, tmp_path: Path):
        (tmp_path / ".venv" / "lib" / "match").mkdir(parents=True)
        (tmp_path / ".venv" / "lib" / "match" / "match.py").write_text("x", encoding="utf-8")
        assert _texts(tmp_path, "match") == []
        assert _p(".venv/lib/match/match.py") in _texts(tmp_path, "match", hidden=True)

    def test_idempotent(self, sample_tree: Path):
        assert _texts(sample_tree, "") == _texts(sample_tree, "")

    def test_symlink_policy(self, tmp_path: Path, make_symlink):
        (tmp_path / "target").mkdir()
        (tmp_path / "target" / "inner.txt").write_text("x", encoding="utf-8")
        make_symlink(tmp_path / "link", tmp_path / "target")

        cfg = FinderConfig()
        pattern = compile_pattern("", False)
        plain = {m.text: m for m in search(tmp_path, pattern, cfg)}
        assert plain["link"].entry.kind == EntryKind.SYMLINK
        assert _p("link/inner.txt") not in plain

        followed = [m.text for m in search(tmp_path, pattern, FinderConfig(follow_links=True))]
        assert "link" in followed
        assert _p("link/inner.txt") in followed


class TestScan:
    def test_returns_count_and_prints_in_order(self, sample_tree: Path):
        printed = []
        cfg = FinderConfig.from_flags("", no_color=True)
        count = scan(sample_tree, compile_pattern("", False), cfg, printer=printed.append)
        assert count == 4
        assert [m.text for m in printed] == [_p("LICENSE"), _p("a"), _p("a/b"), _p("a/b/README.md")]

    def test_zero_matches(self, sample_tree: Path):
        printed = []
        cfg = FinderConfig.from_flags("nothing-here", no_color=True)
        count = scan(sample_tree, compile_pattern("nothing-here", False), cfg, printer=printed.append)
        assert count == 0
        assert printed == []

    def test_entry_printer(self, sample_tree: Path):
        buf = io.StringIO()
        cfg = FinderConfig.from_flags("readme", no_color=True)
        scan(sample_tree, compile_pattern("readme", False), cfg, printer=EntryPrinter(False, buf))
        assert buf.getvalue() == _p("a/b/README.md") + "\n"

    def test_undecodable_name_skipped(self, tmp_path: Path, make_undecodable):
        (tmp_path / "ok.txt").write_text("x", encoding="utf-8")
        (tmp_path / "zz.txt").write_text("x", encoding="utf-8")
        make_undecodable(tmp_path, b"bad\xff.txt")

        assert _texts(tmp_path, "") == ["ok.txt", "zz.txt"]

    def test_entries_below_undecodable_directory_skipped(self, tmp_path: Path, make_undecodable):
        bad_dir = make_undecodable(tmp_path, b"dir\xfe")
        bad_dir.unlink()
        bad_dir.mkdir()
        (bad_dir / "inner.txt").write_text("x", encoding="utf-8")
        (tmp_path / "after.txt").write_text("x", encoding="utf-8")

        # Everything below shares the undecodable prefix, so nothing is listed.
        assert _texts(tmp_path, "") == ["after.txt"]

    def test_undecodable_name_logged(self, tmp_path: Path, make_undecodable):
        root = tmp_path / "root"
        root.mkdir()
        make_undecodable(root, b"bad\xff.txt")
        log_file = tmp_path / "pyfd.log"
        logger = configure_logging(
            level=LogLevel.DEBUG, log_file=log_file, enable_file=True, enable_console=False
        )

        printed = []
        cfg = FinderConfig.from_flags("", no_color=True)
        assert scan(root, compile_pattern("", False), cfg, printer=printed.append) == 0
        for handler in logger.logger.handlers:
            handler.flush()

        text = log_file.read_text(encoding="utf-8")
        assert "Skipping" in text
        assert "bad" in text
