"""Actionable error catalog for pg-conf-appender."""

from typing import Dict

_ERROR_MESSAGES: Dict[str, Dict[str, str]] = {
    "append_failed": {
        "what": "Could not append settings to {path}: {reason}",
        "next": "Check that the PostgreSQL cluster directory exists and that you can write to it.",
    },
    "config_not_found": {
        "what": "Config file not found: {path}",
        "next": "Check the `--config` path or remove the option to use defaults.",
    },
    "invalid_config": {
        "what": "Invalid config file '{path}': {reason}",
        "next": "Use a YAML mapping of supported keys with values of the expected type.",
    },
}


def actionable_error(code: str, **kwargs: str) -> str:
    if code not in _ERROR_MESSAGES:
        raise KeyError(f"Unknown error catalog key: {code}")

    template = _ERROR_MESSAGES[code]
    what = template["what"].format(**kwargs)
    next_step = template["next"].format(**kwargs)
    return f"{what} Suggested action: {next_step}"
