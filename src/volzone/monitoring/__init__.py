"""Monitoring exports."""

from volzone.monitoring.audit import AuditLog
from volzone.monitoring.monitor import Monitor
from volzone.monitoring.notifier import LogNotifier, MemoryNotifier, Notifier

__all__ = [
    "AuditLog",
    "LogNotifier",
    "MemoryNotifier",
    "Monitor",
    "Notifier",
]
