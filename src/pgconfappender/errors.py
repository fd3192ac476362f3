"""Domain errors for pg-conf-appender."""


class ConfAppenderError(RuntimeError):
    """Raised when the settings block cannot be appended."""
