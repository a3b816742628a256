"""Tests for history parsing — bash and zsh dialects, window filtering."""

from __future__ import annotations

from conftest import bash_history, zsh_history

from historian.models import Entry, HistoryDialect
from historian.parser import (
    normalize_lines,
    parse,
    parse_bash_history,
    parse_zsh_history,
)


def _fields(entries: list[Entry]) -> list[tuple[str, int, str]]:
    return [(e.host, int(e.time.timestamp()), e.cmd) for e in entries]


class TestNormalizeLines:
    def test_strips_each_line(self):
        assert normalize_lines("  ls  \n\tpwd\r\n") == ["ls", "pwd"]

    def test_replaces_invalid_bytes(self):
        lines = normalize_lines(b"echo \xff\xfe ok\n")
        assert lines == ["echo �� ok"]

    def test_empty(self):
        assert normalize_lines("") == []

    def test_splits_on_newline_only(self):
        text = "printf 'x\x0cy'\necho 'a\u2028b'\x1c\n"
        assert normalize_lines(text) == ["printf 'x\x0cy'", "echo 'a\u2028b'"]

    def test_blank_final_line_kept(self):
        assert normalize_lines("#1\n\n") == ["#1", ""]


class TestBashHistory:
    def test_recovers_pairs_in_order(self, day, base_epoch):
        items = [(base_epoch, "git status"), (base_epoch + 60, "make test"), (base_epoch - 5, "cd")]
        entries = parse_bash_history(bash_history(*items), day, host="web-1")
        assert _fields(entries) == [("web-1", epoch, cmd) for epoch, cmd in items]

    def test_default_host_is_localhost(self, day, base_epoch):
        entries = parse_bash_history(bash_history((base_epoch, "ls")), day)
        assert entries[0].host == "localhost"

    def test_skips_lines_without_marker(self, day, base_epoch):
        text = f"old command without time\n#{base_epoch}\nls -la\ncontinued line\n"
        entries = parse_bash_history(text, day)
        assert [e.cmd for e in entries] == ["ls -la"]

    def test_marker_must_be_digits_only(self, day, base_epoch):
        text = f"# {base_epoch}\nnot a command\n#{base_epoch}x\nnope\n#{base_epoch}\nok\n"
        entries = parse_bash_history(text, day)
        assert [e.cmd for e in entries] == ["ok"]

    def test_command_is_trimmed(self, day, base_epoch):
        entries = parse_bash_history(f"#{base_epoch}\n   docker ps   \n", day)
        assert entries[0].cmd == "docker ps"

    def test_dangling_marker_yields_nothing(self, day, base_epoch):
        text = bash_history((base_epoch, "ls")) + f"#{base_epoch + 10}\n"
        entries = parse_bash_history(text, day)
        assert [e.cmd for e in entries] == ["ls"]

    def test_only_dangling_marker(self, day, base_epoch):
        assert parse_bash_history(f"#{base_epoch}", day) == []

    def test_filters_by_window(self, day):
        text = bash_history(
            (day.start_epoch - 1, "before"),
            (day.start_epoch, "at start"),
            (day.finish_epoch, "at finish"),
            (day.finish_epoch + 1, "after"),
        )
        entries = parse_bash_history(text, day)
        assert [e.cmd for e in entries] == ["at start", "at finish"]

    def test_garbage_input(self, day):
        assert parse_bash_history("\x00\x01 random\n###\n#\n", day) == []
        assert parse_bash_history("", day) == []

    def test_command_keeps_embedded_line_breaks(self, day, base_epoch):
        text = bash_history((base_epoch, "printf 'x\x0cy'"), (base_epoch + 1, "echo 'a\u2028b'"))
        entries = parse_bash_history(text, day)
        assert [e.cmd for e in entries] == ["printf 'x\x0cy'", "echo 'a\u2028b'"]


class TestZshHistory:
    def test_recovers_pairs(self, day, base_epoch):
        items = [(base_epoch, "git log"), (base_epoch + 30, "vim README.md")]
        entries = parse_zsh_history(zsh_history(*items), day, host="laptop")
        assert _fields(entries) == [("laptop", epoch, cmd) for epoch, cmd in items]

    def test_command_may_contain_semicolons(self, day, base_epoch):
        entries = parse_zsh_history(f": {base_epoch}:0;cd /tmp; ls\n", day)
        assert entries[0].cmd == "cd /tmp; ls"

    def test_skips_non_matching_lines(self, day, base_epoch):
        text = f"plain line\n: {base_epoch}:0;echo hi\nanother\\\n"
        entries = parse_zsh_history(text, day)
        assert [e.cmd for e in entries] == ["echo hi"]

    def test_filters_by_window(self, day):
        text = zsh_history(
            (day.start_epoch - 1, "before"),
            (day.start_epoch, "at start"),
            (day.finish_epoch, "at finish"),
            (day.finish_epoch + 1, "after"),
        )
        entries = parse_zsh_history(text, day)
        assert [e.cmd for e in entries] == ["at start", "at finish"]

    def test_empty(self, day):
        assert parse_zsh_history("", day) == []

    def test_command_keeps_embedded_line_breaks(self, day, base_epoch):
        text = zsh_history((base_epoch, "echo 'a\x1cb'"), (base_epoch + 1, "echo 'c\u2029d'"))
        entries = parse_zsh_history(text, day)
        assert [e.cmd for e in entries] == ["echo 'a\x1cb'", "echo 'c\u2029d'"]

    def test_timestamp_found_past_leading_garbage(self, day, base_epoch):
        entries = parse_zsh_history(f"a1;b{base_epoch}x;ls -la\n", day)
        assert _fields(entries) == [("localhost", base_epoch, "ls -la")]


class TestParseDispatch:
    def test_bash(self, day, base_epoch):
        entries = parse(HistoryDialect.BASH, bash_history((base_epoch, "ls")), day, host="h")
        assert _fields(entries) == [("h", base_epoch, "ls")]

    def test_zsh(self, day, base_epoch):
        entries = parse(HistoryDialect.ZSH, zsh_history((base_epoch, "ls")), day, host="h")
        assert _fields(entries) == [("h", base_epoch, "ls")]

    def test_accepts_dialect_name(self, day, base_epoch):
        entries = parse("zsh", zsh_history((base_epoch, "ls")), day)
        assert len(entries) == 1

    def test_dialect_is_not_detected(self, day, base_epoch):
        # zsh text read as bash has no markers
        assert parse(HistoryDialect.BASH, zsh_history((base_epoch, "ls")), day) == []
