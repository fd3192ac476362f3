"""Filesystem helpers for pg-conf-appender."""

import logging
from typing import Sequence

from pgconfappender.errors import ConfAppenderError
from pgconfappender.errors_catalog import actionable_error


class FileSystemService:
    """Encapsulates file side effects."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def append_lines(self, path: str, lines: Sequence[str]) -> int:
        """Append each line plus a newline to ``path``.

        The file is created when missing, but its directory never is. Existing
        content is left untouched.
        """
        self.logger.debug("Opening %s in append mode", path)
        try:
            with open(path, "a", encoding="utf-8", newline="\n") as file_obj:
                for line in lines:
                    file_obj.write(f"{line}\n")
        except OSError as exc:
            reason = exc.strerror or str(exc)
            raise ConfAppenderError(
                actionable_error("append_failed", path=path, reason=reason)
            ) from exc

        self.logger.debug("Appended %s lines to %s", len(lines), path)
        return len(lines)
