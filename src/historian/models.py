"""Core data models: history entries and collection windows."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Any, Self

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class HistoryDialect(str, Enum):
    BASH = "bash"
    ZSH = "zsh"


def _local_midnight(d: date) -> datetime:
    return datetime.combine(d, datetime.min.time()).astimezone()


@dataclass(frozen=True)
class TimeRange:
    """Collection window, by convention [start, finish) with finish at the next midnight.

    Filtering compares whole epoch seconds and includes both bounds.
    """

    start: datetime
    finish: datetime

    def __post_init__(self) -> None:
        if self.start > self.finish:
            msg = f"start ({self.start}) must be <= finish ({self.finish})"
            raise ValueError(msg)

    @classmethod
    def for_date(cls, d: date) -> Self:
        return cls(start=_local_midnight(d), finish=_local_midnight(d + timedelta(days=1)))

    @classmethod
    def today(cls) -> Self:
        return cls.for_date(date.today())

    @classmethod
    def yesterday(cls) -> Self:
        return cls.for_date(date.today() - timedelta(days=1))

    @classmethod
    def last_n_days(cls, n: int) -> Self:
        """Window of the last ``n`` days, today included."""
        tomorrow = date.today() + timedelta(days=1)
        return cls(
            start=_local_midnight(tomorrow - timedelta(days=n)),
            finish=_local_midnight(tomorrow),
        )

    @property
    def start_epoch(self) -> int:
        return int(self.start.timestamp())

    @property
    def finish_epoch(self) -> int:
        return int(self.finish.timestamp())

    def contains_epoch(self, epoch: int) -> bool:
        return self.start_epoch <= epoch <= self.finish_epoch

    def describe(self) -> str:
        return f"({self.start.strftime(TIME_FORMAT)}, {self.finish.strftime(TIME_FORMAT)})"


@dataclass(frozen=True, order=True)
class Entry:
    """One executed command.

    Field order defines the total ordering: time, then host, then cmd.
    """

    time: datetime
    host: str = ""
    cmd: str = ""

    @classmethod
    def from_epoch(cls, host: str, epoch: int | None, cmd: Any) -> Self:
        """Build an entry from raw parsed values.

        A missing or non-positive epoch falls back to the current time, and a
        non-string command becomes the empty string. Both are accepted policy
        for damaged history files, not errors.
        """
        if isinstance(epoch, int) and epoch > 0:
            when = datetime.fromtimestamp(epoch).astimezone()
        else:
            when = datetime.now().astimezone()
        text = cmd.strip() if isinstance(cmd, str) else ""
        return cls(time=when, host=host, cmd=text)

    def __str__(self) -> str:
        return f"[{self.host}] ({self.time.strftime(TIME_FORMAT)}) {self.cmd}"
