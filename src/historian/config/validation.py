"""Configuration validation for historian."""

from __future__ import annotations

from dataclasses import dataclass

from historian.config.models import HistorianConfig
from historian.formatter import check_template


@dataclass(frozen=True)
class ValidationError:
    """A configuration validation error."""

    path: str
    message: str


class ConfigValidator:
    """Validate HistorianConfig dataclass against schema."""

    def validate(self, config: HistorianConfig) -> list[ValidationError]:
        """Validate config, return list of errors (empty if valid)."""
        errors: list[ValidationError] = []

        if not isinstance(config.verbose, bool):
            errors.append(ValidationError("general.verbose", "Must be true or false"))

        # Output
        if not isinstance(config.output.template, str):
            errors.append(
                ValidationError(
                    "output.template",
                    f"Template {config.output.template!r} is not a string",
                )
            )
        else:
            problem = check_template(config.output.template)
            if problem:
                errors.append(ValidationError("output.template", problem))

        if not isinstance(config.output.color, bool):
            errors.append(ValidationError("output.color", "Must be true or false"))

        # ssh
        if not config.ssh.command:
            errors.append(ValidationError("ssh.command", "Command must not be empty"))
        for i, part in enumerate(config.ssh.command):
            if not isinstance(part, str):
                errors.append(
                    ValidationError(f"ssh.command[{i}]", f"Argument {part!r} is not a string")
                )

        if not isinstance(config.ssh.remote_command, str) or not config.ssh.remote_command:
            errors.append(ValidationError("ssh.remote_command", "Remote command is required"))

        # Local history paths
        for path, field_name in [
            (config.local.bash_history_path, "bash_history_path"),
            (config.local.zsh_history_path, "zsh_history_path"),
        ]:
            if not isinstance(path, str) or not path:
                errors.append(ValidationError(f"local.{field_name}", "Path is required"))

        # Discovery window
        days = config.discovery.days
        if isinstance(days, bool) or not isinstance(days, int) or days <= 0:
            errors.append(
                ValidationError("discovery.days", f"Invalid day count: {days!r} (expected > 0)")
            )

        return errors
