"""Configuration loader for pg-conf-appender."""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from pgconfappender.constants import VERSION_PLACEHOLDER
from pgconfappender.errors import ConfAppenderError
from pgconfappender.errors_catalog import actionable_error


def validate_path_template(value: Any) -> str:
    """Return ``value`` if it is a usable target path template."""
    if not isinstance(value, str) or not value.strip():
        raise ValueError("path_template must be a non-empty string")
    if VERSION_PLACEHOLDER not in value:
        raise ValueError(f"path_template must contain the {VERSION_PLACEHOLDER} placeholder")
    return value


class ConfigLoader:
    """Loads YAML configuration files for CLI defaults."""

    SUPPORTED_KEYS = {
        "version",
        "path_template",
        "dry_run",
        "verbose",
        "log_file",
        "manifest_file",
    }
    BOOLEAN_KEYS = ("dry_run", "verbose")
    PATH_KEYS = ("log_file", "manifest_file")

    def load(self, config_path: Optional[str]) -> Dict[str, Any]:
        if not config_path:
            return {}

        path = Path(config_path)
        if not path.exists():
            raise ConfAppenderError(actionable_error("config_not_found", path=config_path))

        try:
            parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (yaml.YAMLError, OSError) as exc:
            raise ConfAppenderError(
                actionable_error("invalid_config", path=config_path, reason=str(exc))
            ) from exc

        if parsed is None:
            return {}
        if not isinstance(parsed, dict):
            raise ConfAppenderError(
                actionable_error(
                    "invalid_config",
                    path=config_path,
                    reason="the root must be a YAML mapping",
                )
            )

        unknown = sorted(str(key) for key in set(parsed.keys()) - self.SUPPORTED_KEYS)
        if unknown:
            unknown_list = ", ".join(unknown)
            raise ConfAppenderError(
                actionable_error(
                    "invalid_config",
                    path=config_path,
                    reason=f"Unknown configuration keys: {unknown_list}",
                )
            )

        try:
            return self._normalize(parsed)
        except ValueError as exc:
            raise ConfAppenderError(
                actionable_error("invalid_config", path=config_path, reason=str(exc))
            ) from exc

    def _normalize(self, parsed: Dict[str, Any]) -> Dict[str, Any]:
        # Empty YAML values mean "not set" so CLI defaults still apply.
        values = {key: value for key, value in parsed.items() if value is not None}

        if "version" in values:
            version = values["version"]
            if isinstance(version, bool) or not isinstance(version, (str, int, float)):
                raise ValueError("version must be a string or number")
            values["version"] = str(version)

        if "path_template" in values:
            values["path_template"] = validate_path_template(values["path_template"])

        for key in self.BOOLEAN_KEYS:
            if key in values and not isinstance(values[key], bool):
                raise ValueError(f"{key} must be true or false")

        for key in self.PATH_KEYS:
            if key in values and (not isinstance(values[key], str) or not values[key].strip()):
                raise ValueError(f"{key} must be a non-empty path")

        return values
