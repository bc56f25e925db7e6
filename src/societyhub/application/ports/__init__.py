"""Application ports - interfaces for external adapters."""

from societyhub.application.ports.activity_recorder import ActivityRecorder
from societyhub.application.ports.notification_dispatcher import NotificationDispatcher
from societyhub.application.ports.task_scheduler import TaskScheduler
from societyhub.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "ActivityRecorder",
    "NotificationDispatcher",
    "TaskScheduler",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
