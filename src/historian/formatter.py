"""Render history entries as host-colored output lines."""

from __future__ import annotations

from collections.abc import Sequence

import click

from historian.models import TIME_FORMAT, Entry

COLORS = [
    "magenta",
    "cyan",
    "yellow",
    "green",
    "blue",
    "bright_magenta",
    "bright_cyan",
    "bright_yellow",
    "bright_green",
    "bright_blue",
]

DEFAULT_COLOR = "green"
DEFAULT_TEMPLATE = "[{chost}] ({ctime}) {cmd}"
TEMPLATE_SLOTS = ("host", "chost", "time", "ctime", "cmd", "ccmd")


def check_template(template: str) -> str | None:
    """Return an error message if ``template`` is not renderable, else None."""
    try:
        template.format_map({slot: "" for slot in TEMPLATE_SLOTS})
    except KeyError as e:
        return f"Unknown slot {e}. Available: {', '.join(TEMPLATE_SLOTS)}"
    except (ValueError, IndexError, AttributeError, TypeError) as e:
        return f"Invalid template: {e}"
    return None


class Formatter:
    """Formats entries with one color per host, assigned in host-list order."""

    def __init__(
        self,
        hosts: Sequence[str] = (),
        template: str | None = None,
        colorize: bool = True,
    ) -> None:
        self.host_colors: dict[str, str] = {}
        for host in hosts:
            self.host_colors.setdefault(host, COLORS[len(self.host_colors) % len(COLORS)])
        self.host_width = max((len(host) for host in hosts), default=0)
        self.template = template or DEFAULT_TEMPLATE
        self.colorize = colorize

    def format(self, entry: Entry) -> str:
        color = self.host_colors.get(entry.host, DEFAULT_COLOR)
        time_str = entry.time.strftime(TIME_FORMAT)

        return self.template.format(
            host=entry.host,
            chost=self._style(entry.host.ljust(self.host_width), color),
            time=time_str,
            ctime=self._style(time_str, color),
            cmd=entry.cmd,
            ccmd=self._style(entry.cmd, color),
        )

    def _style(self, text: str, color: str) -> str:
        return click.style(text, fg=color) if self.colorize else text
