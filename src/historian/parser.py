"""History text parsers — bash and zsh dialects into Entry records."""

from __future__ import annotations

import re

from historian.models import Entry, HistoryDialect, TimeRange

LOCALHOST = "localhost"

# bash with HISTTIMEFORMAT set: "#<epoch>" on its own line, command on the next
BASH_TIMESTAMP_RE = re.compile(r"#(\d+)")

# zsh EXTENDED_HISTORY: ": <epoch>:<duration>;<command>"
ZSH_LINE_RE = re.compile(r"\D*(?P<time>\d+)[^;]+;(?P<cmd>.*)")


def normalize_lines(history: str | bytes) -> list[str]:
    """Decode raw history text and return its lines, each stripped.

    Only newline ends a line; other line-break characters stay inside the command.
    """
    if isinstance(history, bytes):
        history = history.decode("utf-8", errors="replace")
    lines = history.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.strip() for line in lines]


def parse_bash_history(
    history: str | bytes, time_range: TimeRange, host: str = LOCALHOST
) -> list[Entry]:
    lines = normalize_lines(history)
    entries: list[Entry] = []

    i = 0
    while i < len(lines):
        marker = BASH_TIMESTAMP_RE.fullmatch(lines[i])
        i += 1
        if marker is None:
            continue

        epoch = int(marker.group(1))
        if not time_range.contains_epoch(epoch):
            continue

        # Dangling marker at end of file
        if i >= len(lines):
            break

        entries.append(Entry.from_epoch(host, epoch, lines[i]))
        i += 1

    return entries


def parse_zsh_history(
    history: str | bytes, time_range: TimeRange, host: str = LOCALHOST
) -> list[Entry]:
    entries: list[Entry] = []

    for line in normalize_lines(history):
        matched = ZSH_LINE_RE.search(line)
        if matched is None:
            continue

        epoch = int(matched.group("time"))
        if not time_range.contains_epoch(epoch):
            continue

        entries.append(Entry.from_epoch(host, epoch, matched.group("cmd")))

    return entries


_PARSERS = {
    HistoryDialect.BASH: parse_bash_history,
    HistoryDialect.ZSH: parse_zsh_history,
}


def parse(
    dialect: HistoryDialect,
    history: str | bytes,
    time_range: TimeRange,
    host: str = LOCALHOST,
) -> list[Entry]:
    """Parse ``history`` written in ``dialect``.

    Lines that do not fit the dialect are skipped, so malformed input yields
    fewer entries rather than an error. Entries outside ``time_range`` are
    dropped here.
    """
    return _PARSERS[HistoryDialect(dialect)](history, time_range, host)
