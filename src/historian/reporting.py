"""Progress reporting — terminal sink and the ordered per-collection channel."""

from __future__ import annotations

import queue
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from types import TracebackType

import click

from historian.models import TIME_FORMAT

BANNER_PREFIX = "=====> "
REPORT_QUEUE_SIZE = 1024


class Reporter(ABC):
    """Line-oriented sink for progress and error messages."""

    @abstractmethod
    def line(self, message: str, level: str, color: str = "green") -> None: ...

    @abstractmethod
    def banner(self, message: str, color: str = "cyan") -> None: ...


class TerminalReporter(Reporter):
    """Writes report lines to stderr so stdout carries only history output."""

    def __init__(self, colorize: bool = True) -> None:
        self._colorize = colorize

    def line(self, message: str, level: str, color: str = "green") -> None:
        stamp = datetime.now().strftime(TIME_FORMAT)
        text = f"{BANNER_PREFIX}[{level.upper():<6}] {{{stamp}}} {message}"
        self._echo(text, color)

    def banner(self, message: str, color: str = "cyan") -> None:
        lines = [f"{BANNER_PREFIX}{line}".strip() for line in message.splitlines()]
        deco = "=" * max((len(line) for line in lines), default=0)

        self._echo(deco, color)
        self._echo("\n".join(lines), color)
        self._echo(deco, color)

    def _echo(self, text: str, color: str) -> None:
        if self._colorize:
            text = click.style(text, fg=color)
        click.echo(text, err=True, color=self._colorize)


@dataclass(frozen=True)
class _Message:
    kind: str  # 'debug', 'error' or 'banner'
    text: str


_CLOSE = None


class ReportChannel:
    """Serializes messages from concurrent workers onto one Reporter.

    Any thread may enqueue; a single consumer thread drains the queue, so lines
    reach the sink whole and in enqueue order. Use as a context manager: leaving
    the block drains every pending message and stops the consumer.
    """

    def __init__(self, reporter: Reporter, verbose: bool = True) -> None:
        self._reporter = reporter
        self._verbose = verbose
        self._queue: queue.Queue[_Message | None] = queue.Queue(maxsize=REPORT_QUEUE_SIZE)
        self._consumer = threading.Thread(target=self._drain, name="historian-report", daemon=True)
        self._started = False
        self._failure: Exception | None = None

    def __enter__(self) -> ReportChannel:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def start(self) -> None:
        if not self._started:
            self._consumer.start()
            self._started = True

    def close(self) -> None:
        """Drain pending messages and stop the consumer.

        Raises:
            Exception: The first error the reporter raised while draining.
        """
        if self._started:
            self._queue.put(_CLOSE)
            self._consumer.join()
            self._started = False

        if self._failure is not None:
            failure, self._failure = self._failure, None
            raise failure

    def debug(self, message: str) -> None:
        if self._verbose:
            self._queue.put(_Message("debug", message))

    def banner(self, message: str) -> None:
        if self._verbose:
            self._queue.put(_Message("banner", message))

    def error(self, message: str) -> None:
        # Errors are reported regardless of verbosity
        self._queue.put(_Message("error", message))

    def _drain(self) -> None:
        while (message := self._queue.get()) is not _CLOSE:
            try:
                self._emit(message)
            except Exception as e:
                # Keep draining so producers never block; close() re-raises
                if self._failure is None:
                    self._failure = e

    def _emit(self, message: _Message) -> None:
        if message.kind == "error":
            self._reporter.line(message.text, level="error", color="red")
        elif message.kind == "banner":
            self._reporter.banner(message.text)
        else:
            self._reporter.line(message.text, level="debug", color="green")
