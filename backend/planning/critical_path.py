"""
Critical Path Engine for project scheduling.

Computes the longest dependency chain through a set of tasks. A task cannot
finish before all of its prerequisites have finished, plus its own duration:

    end(task) = max(end(dep) for dep in task.dependencies) + task.estimated_time

End times are resolved by fixed-point iteration rather than a separate
topological sort:

1. Tasks without dependencies resolve immediately (end = own duration).
2. At most ``len(tasks)`` rounds scan the unresolved tasks in input order.
   A task resolves as soon as every dependency id it lists is resolved, and
   its end time is visible to the tasks scanned after it in the same round.
3. Iteration stops once a round resolves nothing new or the round cap is hit.

Tasks caught in a cycle or waiting on an unknown id never resolve. They are
left out of the duration and reported back as ``unresolved`` so callers can
decide whether a partial answer is acceptable.

Also provides the PERT (Program Evaluation Review Technique) three-point
estimate, which is independent of the graph.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from .task import Task


@dataclass
class Resolution:
    """End times reached by fixed-point resolution."""
    end_times: Dict[str, int] = field(default_factory=dict)
    unresolved: List[str] = field(default_factory=list)
    rounds: int = 0
    # The task whose dependencies and duration produced each end time
    resolved_by: Dict[str, Task] = field(default_factory=dict)

    @property
    def duration(self) -> int:
        if not self.end_times:
            return 0
        return max(self.end_times.values())


@dataclass
class CriticalPathResult:
    """Everything the engine knows about one task list."""
    duration: int
    critical_tasks: List[str]
    critical_chain: List[str]
    end_times: Dict[str, int]
    unresolved: List[str]

    @property
    def unresolved_count(self) -> int:
        return len(self.unresolved)

    @property
    def is_complete(self) -> bool:
        """True when every task's end time could be resolved."""
        return not self.unresolved

    def to_dict(self) -> Dict:
        return {
            'critical_path_time': self.duration,
            'critical_tasks': list(self.critical_tasks),
            'critical_chain': list(self.critical_chain),
            'end_times': dict(self.end_times),
            'unresolved_tasks': list(self.unresolved),
            'unresolved_count': self.unresolved_count
        }


def resolve_end_times(tasks: Sequence[Task]) -> Resolution:
    """
    Resolve every task's earliest end time.

    Args:
        tasks: Input task list

    Returns:
        Resolution with end times keyed by task id, plus the ids that
        never resolved (in input order)
    """
    resolution = Resolution()
    end_times = resolution.end_times

    # First pass: tasks with no dependencies, first occurrence of an id wins
    for task in tasks:
        if not task.dependencies and task.id not in end_times:
            end_times[task.id] = task.estimated_time
            resolution.resolved_by[task.id] = task

    changed = True
    max_rounds = len(tasks)

    while changed and resolution.rounds < max_rounds:
        changed = False
        resolution.rounds += 1

        for task in tasks:
            if task.id in end_times or not task.dependencies:
                continue

            if not all(dep in end_times for dep in task.dependencies):
                continue

            # Work never starts before the project does
            start = max([0] + [end_times[dep] for dep in task.dependencies])
            end_times[task.id] = start + task.estimated_time
            resolution.resolved_by[task.id] = task
            changed = True

    seen = set()
    for task in tasks:
        if task.id not in end_times and task.id not in seen:
            seen.add(task.id)
            resolution.unresolved.append(task.id)

    return resolution


def calculate(tasks: Sequence[Task]) -> int:
    """
    Calculate the critical path duration (longest dependency chain).

    Returns:
        Total duration in hours, 0 for an empty list
    """
    return resolve_end_times(tasks).duration


def critical_path(tasks: Sequence[Task]) -> List[str]:
    """
    Ids of tasks whose own estimated time equals the critical path duration.

    This is the historical membership rule and is kept for compatibility.
    It does not follow dependency edges, so a long standalone task can be
    reported even when it sits on no chain. See ``critical_chain``.
    """
    duration = calculate(tasks)
    return [task.id for task in tasks if task.estimated_time == duration]


def _trace_chain(tasks: Sequence[Task], resolution: Resolution) -> List[str]:
    end_times = resolution.end_times
    if not end_times:
        return []

    duration = resolution.duration
    stack = [task_id for task_id, end in end_times.items() if end == duration]
    on_chain = set()

    while stack:
        task_id = stack.pop()
        if task_id in on_chain:
            continue
        on_chain.add(task_id)

        task = resolution.resolved_by[task_id]
        start = end_times[task_id] - task.estimated_time
        for dep in task.dependencies:
            if end_times[dep] == start:
                stack.append(dep)

    position = {}
    for index, task in enumerate(tasks):
        position.setdefault(task.id, index)

    def start_time(task_id):
        return end_times[task_id] - resolution.resolved_by[task_id].estimated_time

    return sorted(on_chain, key=lambda t: (start_time(t), position[t]))


def critical_chain(tasks: Sequence[Task]) -> List[str]:
    """
    Ids of tasks that actually lie on a longest dependency chain.

    Walks backwards from every task with the maximal end time, following
    only the dependency edges whose end time determined the dependent's
    start. Ids are ordered by start time, then input order.
    """
    return _trace_chain(tasks, resolve_end_times(tasks))


def analyze(tasks: Sequence[Task]) -> CriticalPathResult:
    """Run resolution once and derive every critical path view from it."""
    resolution = resolve_end_times(tasks)
    duration = resolution.duration

    return CriticalPathResult(
        duration=duration,
        critical_tasks=[t.id for t in tasks if t.estimated_time == duration],
        critical_chain=_trace_chain(tasks, resolution),
        end_times=dict(resolution.end_times),
        unresolved=list(resolution.unresolved)
    )


def pert_estimate(optimistic: float, most_likely: float, pessimistic: float) -> float:
    """
    PERT (Program Evaluation Review Technique) estimate.

    Formula: (optimistic + 4*most_likely + pessimistic) / 6
    """
    return (optimistic + (4.0 * most_likely) + pessimistic) / 6.0
