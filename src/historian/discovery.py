"""Host discovery — find ssh targets in the local shell history."""

from __future__ import annotations

from collections.abc import Iterable

from historian.collector import Collector
from historian.models import Entry, TimeRange


def ssh_host(cmd: str) -> str | None:
    """Return the destination host of an ``ssh`` command line, if any.

    Tokens after ``ssh`` are walked left to right:
      - first token not starting with '-' is the host
      - ``--key=value`` long options, ``-v`` style flags and short options with an
        attached value (``-oKey=value``, ``-p2222``) take one token
      - any other option takes the following token as its value
    """
    tokens = cmd.split()
    if not tokens or tokens[0] != "ssh":
        return None

    args = iter(tokens[1:])
    for arg in args:
        if not arg.startswith("-"):
            return arg
        if arg.startswith("--") and "=" in arg:
            continue
        if arg.startswith("-v"):
            continue
        if not arg.startswith("--") and len(arg) > 2:
            continue
        next(args, None)

    return None


def hosts_from_entries(entries: Iterable[Entry]) -> list[str]:
    """Unique ssh hosts in first-seen order."""
    hosts = (ssh_host(entry.cmd) for entry in entries)
    return list(dict.fromkeys(host for host in hosts if host is not None))


def discover_hosts(time_range: TimeRange, collector: Collector | None = None) -> list[str]:
    """Discover hosts from local history within ``time_range``.

    ``collector`` must be set up without hosts so the local history path runs.

    Raises:
        LocalReadError: If the local history files cannot be read.
    """
    collector = collector or Collector(verbose=False)
    return hosts_from_entries(sorted(collector.collect(time_range)))
