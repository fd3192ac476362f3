"""
pg-conf-appender - Append test-server tuning settings to postgresql.conf
"""

__version__ = "0.1.0"

from .core import ConfigAppender
from .errors import ConfAppenderError

__all__ = ["ConfigAppender", "ConfAppenderError"]
