"""
Demo task sets served when a request does not supply its own tasks.
"""

from datetime import datetime, timedelta
from typing import List

from .task import Task


def sample_backlog(now: datetime) -> List[Task]:
    """Independent tasks spread across the Eisenhower Matrix."""
    return [
        Task("1", "Study Java", 4, 9, now + timedelta(days=1)),
        Task("2", "Refactor project", 3, 6, now + timedelta(days=3)),
        Task("3", "Review code", 2, 8, now - timedelta(days=1)),
        Task("4", "Documentation", 5, 4, now + timedelta(days=7)),
    ]


def sample_project(now: datetime) -> List[Task]:
    """A linear delivery chain: Design -> Implementation -> Testing -> Deployment."""
    return [
        Task("1", "Design", 5, 8, now + timedelta(days=1), ()),
        Task("2", "Implementation", 3, 9, now + timedelta(days=2), ("1",)),
        Task("3", "Testing", 2, 7, now + timedelta(days=3), ("2",)),
        Task("4", "Deployment", 1, 8, now + timedelta(days=4), ("3",)),
    ]
