"""
Eisenhower Matrix classification for tasks.

Each task is placed in a 2x2 matrix by two binary axes:

- urgency: 1 when the task is overdue at the evaluation instant
- importance: 1 when the task priority is above 7

Matrix positions (``matrix[urgency][importance]``):

- [0][0] DELEGATE  - Not Urgent, Not Important
- [0][1] PLAN      - Not Urgent, Important
- [1][0] INTERRUPT - Urgent, Not Important
- [1][1] DO_FIRST  - Urgent, Important

Ranking Formula:
---------------
priority_score = (importance * 10) + (urgency * 5) + priority

All functions are pure. The evaluation instant ``now`` is passed in by the
caller so a single request classifies and scores against the same clock.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Dict, List, Sequence

from .errors import InvalidQuadrantError
from .task import Task, task_to_dict


IMPORTANCE_WEIGHT = 10
URGENCY_WEIGHT = 5


class Quadrant(Enum):
    """Eisenhower Matrix quadrant keyed by (urgency, importance)."""
    DELEGATE = (0, 0)
    PLAN = (0, 1)
    INTERRUPT = (1, 0)
    DO_FIRST = (1, 1)

    @property
    def urgency(self) -> int:
        return self.value[0]

    @property
    def importance(self) -> int:
        return self.value[1]

    @property
    def label(self) -> str:
        return QUADRANT_LABELS[self]

    @classmethod
    def of(cls, urgency: int, importance: int) -> 'Quadrant':
        """Look up a quadrant, rejecting anything outside {0, 1} x {0, 1}."""
        if urgency not in (0, 1) or importance not in (0, 1):
            raise InvalidQuadrantError(urgency, importance)
        return cls((int(urgency), int(importance)))


QUADRANT_LABELS = {
    Quadrant.DELEGATE: "DELEGATE (Not Urgent, Not Important)",
    Quadrant.PLAN: "PLAN (Not Urgent, Important)",
    Quadrant.INTERRUPT: "INTERRUPT (Urgent, Not Important)",
    Quadrant.DO_FIRST: "DO_FIRST (Urgent, Important)",
}


@dataclass(frozen=True)
class ScoredTask:
    """A task with the classification and score it had at one instant."""
    task: Task
    urgency: int
    importance: int
    priority_score: int

    @property
    def quadrant(self) -> Quadrant:
        return Quadrant.of(self.urgency, self.importance)


def classify(tasks: Sequence[Task], now: datetime) -> List[List[List[Task]]]:
    """
    Classify tasks into the Eisenhower Matrix.

    Tasks keep their input order inside each quadrant. Every task lands in
    exactly one quadrant.

    Args:
        tasks: Tasks to classify
        now: Evaluation instant used for urgency

    Returns:
        2x2 nested list indexed as ``matrix[urgency][importance]``
    """
    matrix = [[[], []], [[], []]]

    for task in tasks:
        matrix[task.urgency(now)][task.importance].append(task)

    return matrix


def quadrant_label(urgency: int, importance: int) -> str:
    """
    Return the display label for an (urgency, importance) pair.

    Raises:
        InvalidQuadrantError: If either value is not 0 or 1
    """
    return Quadrant.of(urgency, importance).label


def priority_score(task: Task, now: datetime) -> int:
    """Score = (importance * 10) + (urgency * 5) + priority."""
    return (
        task.importance * IMPORTANCE_WEIGHT
        + task.urgency(now) * URGENCY_WEIGHT
        + task.priority
    )


def score_tasks(tasks: Sequence[Task], now: datetime) -> List[ScoredTask]:
    """Classify and score every task against the same instant, in input order."""
    return [
        ScoredTask(
            task=task,
            urgency=task.urgency(now),
            importance=task.importance,
            priority_score=priority_score(task, now)
        )
        for task in tasks
    ]


def rank_tasks(tasks: Sequence[Task], now: datetime) -> List[ScoredTask]:
    """Scored tasks, highest score first. Ties keep their input order."""
    return sorted(
        score_tasks(tasks, now),
        key=lambda s: s.priority_score,
        reverse=True
    )


def scored_task_to_dict(scored: ScoredTask) -> Dict:
    """Convert a ScoredTask to a dictionary for JSON serialization."""
    result = task_to_dict(scored.task)
    result.update({
        'urgency': scored.urgency,
        'importance': scored.importance,
        'priority_score': scored.priority_score,
        'quadrant': scored.quadrant.name,
        'quadrant_label': scored.quadrant.label
    })
    return result


def matrix_to_dict(matrix: List[List[List[Task]]]) -> Dict:
    """Map each quadrant label to its task count and tasks."""
    result = {}
    for urgency in (0, 1):
        for importance in (0, 1):
            quadrant_tasks = matrix[urgency][importance]
            result[quadrant_label(urgency, importance)] = {
                'count': len(quadrant_tasks),
                'tasks': [
                    {'id': t.id, 'title': t.title, 'priority': t.priority}
                    for t in quadrant_tasks
                ]
            }
    return result
