"""
PORTS - Interfaces the infrastructure layer implements.
"""

from chattask.domain.ports.unit_of_work import UnitOfWork
from chattask.domain.ports.notification_publisher import NotificationPublisher

__all__ = ["UnitOfWork", "NotificationPublisher"]
