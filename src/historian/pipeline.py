"""Pipeline orchestrator — resolve hosts → collect → sort → render."""

from __future__ import annotations

from collections.abc import Sequence

import click

from historian.collector import Collector
from historian.config import HistorianConfig
from historian.discovery import discover_hosts
from historian.errors import NoHostsResolvedError
from historian.fetchers.local import LocalFetcher
from historian.fetchers.ssh import SshFetcher
from historian.formatter import Formatter
from historian.models import Entry, TimeRange
from historian.reporting import Reporter, TerminalReporter


class Pipeline:
    def __init__(
        self,
        config: HistorianConfig,
        *,
        verbose: bool | None = None,
        colorize: bool | None = None,
        template: str | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self._config = config
        self._verbose = config.verbose if verbose is None else verbose
        self._colorize = config.output.color if colorize is None else colorize
        self._template = template or config.output.template
        self._reporter = reporter or TerminalReporter(colorize=self._colorize)
        self._fetcher = SshFetcher(config.ssh.command, config.ssh.remote_command)
        self._local_fetcher = LocalFetcher(
            config.local.bash_history_path, config.local.zsh_history_path
        )

    def _build_collector(self, hosts: Sequence[str], verbose: bool) -> Collector:
        return Collector(
            hosts,
            verbose=verbose,
            reporter=self._reporter,
            fetcher=self._fetcher,
            local_fetcher=self._local_fetcher,
        )

    def resolve_hosts(self, hosts: Sequence[str]) -> list[str]:
        """Return ``hosts``, or hosts discovered from local history when empty.

        Raises:
            NoHostsResolvedError: If none were given and none were discovered.
            LocalReadError: If discovery cannot read the local history files.
        """
        if hosts:
            return list(hosts)

        time_range = TimeRange.last_n_days(self._config.discovery.days)
        discovered = discover_hosts(time_range, self._build_collector([], verbose=False))
        if not discovered:
            msg = (
                f"no hosts found in local ssh history of the last "
                f"{self._config.discovery.days} days; pass host names as arguments"
            )
            raise NoHostsResolvedError(msg)
        return discovered

    def collect(self, hosts: Sequence[str], time_range: TimeRange) -> list[Entry]:
        """Collect entries from ``hosts`` and return them in total order."""
        collector = self._build_collector(hosts, verbose=self._verbose)
        return sorted(collector.collect(time_range))

    def run(self, hosts: Sequence[str], time_range: TimeRange) -> None:
        """Full pipeline: resolve hosts, collect, and print the merged history."""
        targets = self.resolve_hosts(hosts)
        entries = self.collect(targets, time_range)

        formatter = Formatter(targets, template=self._template, colorize=self._colorize)
        for entry in entries:
            click.echo(formatter.format(entry), color=self._colorize)
