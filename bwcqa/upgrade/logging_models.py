"""
Logging models for the rolling upgrade orchestrator.

Each model identifies the tracked version and the task being run so
failures of concurrently running chains can be told apart.
"""

from bwcqa.logging.models import Entry, LogLevel


class UpgradeTrace(Entry, kw_only=True):
    """Trace-level logging for upgrade steps."""
    version: str
    task_name: str
    level: LogLevel = LogLevel.TRACE


class UpgradeDebug(Entry, kw_only=True):
    """Debug-level logging for upgrade steps."""
    version: str
    task_name: str
    level: LogLevel = LogLevel.DEBUG


class UpgradeInfo(Entry, kw_only=True):
    """Info-level logging for upgrade steps."""
    version: str
    task_name: str
    level: LogLevel = LogLevel.INFO


class UpgradeWarning(Entry, kw_only=True):
    """Warning-level logging for upgrade steps."""
    version: str
    task_name: str
    level: LogLevel = LogLevel.WARN


class UpgradeError(Entry, kw_only=True):
    """Error-level logging for upgrade steps."""
    version: str
    task_name: str
    level: LogLevel = LogLevel.ERROR
