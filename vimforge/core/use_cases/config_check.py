"""
Config check use case — validate vimforge.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from vimforge.core.config.loader import ConfigError, find_settings_file, load_settings
from vimforge.core.models.settings import Settings


@dataclass
class ConfigCheckResult:
    """Result of settings validation."""

    valid: bool = False
    settings: Settings | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "settings": self.settings.model_dump(mode="json") if self.settings else None,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate settings and report issues.

    A missing file is not an error: defaults apply and a warning says so.

    Args:
        config_path: Optional explicit path to vimforge.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_settings_file()
        if config_path is None:
            result.warnings.append("No vimforge.yml found, built-in defaults apply.")

    result.config_path = config_path

    try:
        result.settings = load_settings(config_path)
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    if result.settings.web.host not in ("127.0.0.1", "localhost", "::1"):
        result.warnings.append(
            f"Dashboard binds to {result.settings.web.host}; it will be reachable from the network."
        )

    result.valid = True
    return result
