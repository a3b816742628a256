"""History collector — fans out fetches across hosts and merges parsed entries."""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed

from historian.errors import FetchError
from historian.fetchers.base import Fetcher
from historian.fetchers.local import LocalFetcher
from historian.fetchers.ssh import SshFetcher
from historian.models import Entry, HistoryDialect, TimeRange
from historian.parser import LOCALHOST, parse
from historian.reporting import ReportChannel, Reporter, TerminalReporter

MAX_CONCURRENT_FETCHES = 5


class Collector:
    """Collects history entries from remote hosts, or from local files when no hosts are given.

    The result of ``collect`` is unordered; sort it with ``sorted()``.
    """

    def __init__(
        self,
        hosts: Sequence[str] = (),
        *,
        verbose: bool = True,
        reporter: Reporter | None = None,
        fetcher: Fetcher | None = None,
        local_fetcher: LocalFetcher | None = None,
    ) -> None:
        self._hosts = list(hosts)
        self._verbose = verbose
        self._reporter = reporter or TerminalReporter()
        self._fetcher = fetcher or SshFetcher()
        self._local_fetcher = local_fetcher or LocalFetcher()

    @property
    def hosts(self) -> list[str]:
        return list(self._hosts)

    def collect(self, time_range: TimeRange | None = None) -> list[Entry]:
        """Collect entries within ``time_range`` (default: today).

        Raises:
            LocalReadError: In the no-hosts case, if a local history file is unreadable.
        """
        time_range = time_range or TimeRange.today()

        with ReportChannel(self._reporter, verbose=self._verbose) as channel:
            if self._hosts:
                channel.banner("\n".join(["target hosts:", *(f" - {h}" for h in self._hosts)]))
            channel.debug(f"collect histories between {time_range.describe()}")

            if not self._hosts:
                return self._collect_local(time_range)

            return self._collect_remote(time_range, channel)

    def _collect_local(self, time_range: TimeRange) -> list[Entry]:
        bash_history, zsh_history = self._local_fetcher.fetch_local()
        return [
            *parse(HistoryDialect.BASH, bash_history, time_range, host=LOCALHOST),
            *parse(HistoryDialect.ZSH, zsh_history, time_range, host=LOCALHOST),
        ]

    def _collect_remote(self, time_range: TimeRange, channel: ReportChannel) -> list[Entry]:
        histories: list[Entry] = []

        with ThreadPoolExecutor(max_workers=MAX_CONCURRENT_FETCHES) as pool:
            futures = [
                pool.submit(self._collect_host, host, time_range, channel) for host in self._hosts
            ]
            # Only this thread touches the merged list
            for future in as_completed(futures):
                histories.extend(future.result())

        return histories

    def _collect_host(
        self, host: str, time_range: TimeRange, channel: ReportChannel
    ) -> list[Entry]:
        channel.debug(f"start collect from {host}")
        try:
            history = self._fetcher.fetch(host)
        except FetchError as e:
            channel.error(str(e))
            entries: list[Entry] = []
        else:
            entries = parse(HistoryDialect.BASH, history, time_range, host=host)
        channel.debug(f"finish collect from {host}")
        return entries
