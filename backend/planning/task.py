"""
Task value object shared by the priority classifier and the critical path engine.

Tasks are immutable. Urgency depends on the evaluation instant, so it is
always computed against an explicit ``now`` supplied by the caller instead
of being read from the clock inside the task.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Dict, Iterable, Tuple


# Priority strictly above this counts as important
IMPORTANCE_THRESHOLD = 7


@dataclass(frozen=True)
class Task:
    """
    A unit of work consumed by both planning engines.

    Attributes:
        id: Unique identifier (uniqueness is assumed, not enforced)
        title: Display title
        estimated_time: Expected duration in hours
        priority: Priority rank, conventionally 0-10
        due_date: When the task is due
        dependencies: Ids of the tasks this one waits on, in order
    """
    id: str
    title: str
    estimated_time: int
    priority: int
    due_date: datetime
    dependencies: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable but store a tuple so the task stays immutable
        object.__setattr__(self, 'dependencies', tuple(self.dependencies))

    @classmethod
    def quick(cls, task_id: str, title: str, now: datetime) -> 'Task':
        """Zero-effort, medium-priority task due one day after ``now``."""
        return cls(
            id=task_id,
            title=title,
            estimated_time=0,
            priority=5,
            due_date=now + timedelta(days=1),
            dependencies=()
        )

    def is_overdue(self, now: datetime) -> bool:
        return self.due_date < now

    def urgency(self, now: datetime) -> int:
        """1 if the task is overdue at ``now``, otherwise 0."""
        return 1 if self.is_overdue(now) else 0

    @property
    def importance(self) -> int:
        """1 if the priority is above the importance threshold, otherwise 0."""
        return 1 if self.priority > IMPORTANCE_THRESHOLD else 0

    def __str__(self):
        return f"{self.title} (id={self.id}, priority={self.priority})"


def make_tasks(rows: Iterable[Dict]) -> list:
    """Build tasks from validated dictionaries (e.g. serializer output)."""
    return [
        Task(
            id=str(row['id']),
            title=row['title'],
            estimated_time=row['estimated_time'],
            priority=row['priority'],
            due_date=row['due_date'],
            dependencies=row.get('dependencies') or ()
        )
        for row in rows
    ]


def task_to_dict(task: Task) -> Dict:
    """Convert a Task to a dictionary for JSON serialization."""
    return {
        'id': task.id,
        'title': task.title,
        'estimated_time': task.estimated_time,
        'priority': task.priority,
        'due_date': task.due_date.isoformat(),
        'dependencies': list(task.dependencies)
    }
