"""
Dependency graph diagnostics.

The critical path engine tolerates bad graphs and simply leaves the
affected tasks unresolved. This module explains why: duplicate ids,
tasks depending on themselves, references to unknown ids and dependency
cycles are each reported as a ``DependencyIssue``. Nothing here raises.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Set, Tuple

from .errors import ErrorCode
from .task import Task


@dataclass
class DependencyIssue:
    """Structured dependency problem with code and details."""
    code: ErrorCode
    message: str
    task_id: Optional[str] = None
    dependency_id: Optional[str] = None

    def to_dict(self) -> Dict:
        result = {
            'error_code': self.code.value,
            'message': self.message
        }
        if self.task_id is not None:
            result['task_id'] = self.task_id
        if self.dependency_id is not None:
            result['dependency_id'] = self.dependency_id
        return result


def build_dependency_graph(tasks: Sequence[Task]) -> Dict[str, Set[str]]:
    """Adjacency sets from each task id to the ids it depends on."""
    graph: Dict[str, Set[str]] = {}
    for task in tasks:
        graph.setdefault(task.id, set()).update(task.dependencies)
    return graph


def detect_circular_dependencies(
    tasks: Sequence[Task]
) -> Tuple[Dict[str, Set[str]], Set[str]]:
    """
    Build dependency graph and detect circular dependencies.

    Uses DFS-based cycle detection to identify tasks involved in
    circular dependency chains. Edges to unknown ids are ignored.

    Returns:
        Tuple of (dependency_graph, set of task IDs in cycles)
    """
    graph = build_dependency_graph(tasks)

    circular_tasks: Set[str] = set()
    visited: Set[str] = set()
    rec_stack: Set[str] = set()
    path: List[str] = []

    def enter(node: str, stack: list) -> None:
        visited.add(node)
        rec_stack.add(node)
        path.append(node)
        stack.append((node, iter(sorted(graph[node]))))

    # Explicit stack so long chains do not hit the recursion limit
    for task in tasks:
        if task.id in visited:
            continue

        stack: List[Tuple[str, Iterator[str]]] = []
        enter(task.id, stack)

        while stack:
            node, neighbors = stack[-1]
            neighbor = next(neighbors, None)

            if neighbor is None:
                stack.pop()
                path.pop()
                rec_stack.remove(node)
            elif neighbor not in graph:
                continue
            elif neighbor in rec_stack:
                # Found cycle - mark all nodes on it
                circular_tasks.update(path[path.index(neighbor):])
            elif neighbor not in visited:
                enter(neighbor, stack)

    return graph, circular_tasks


def dependency_issues(tasks: Sequence[Task]) -> List[DependencyIssue]:
    """
    Inspect a task list and return every dependency problem found.

    Issues are listed per task in input order: duplicate id, self
    dependency, unknown dependencies, then cycle membership.
    """
    issues = []
    known_ids = {task.id for task in tasks}
    _, circular = detect_circular_dependencies(tasks)

    seen_ids = set()
    reported_cycles = set()

    for task in tasks:
        if task.id in seen_ids:
            issues.append(DependencyIssue(
                code=ErrorCode.ERR_DUPLICATE_ID,
                message=f"Duplicate task ID: {task.id}",
                task_id=task.id
            ))
        seen_ids.add(task.id)

        if task.id in task.dependencies:
            issues.append(DependencyIssue(
                code=ErrorCode.ERR_SELF_DEPENDENCY,
                message="A task cannot depend on itself",
                task_id=task.id,
                dependency_id=task.id
            ))

        for dep in dict.fromkeys(task.dependencies):
            if dep not in known_ids:
                issues.append(DependencyIssue(
                    code=ErrorCode.ERR_UNKNOWN_DEPENDENCY,
                    message=f"Unknown dependency: {dep}",
                    task_id=task.id,
                    dependency_id=dep
                ))

        if task.id in circular and task.id not in reported_cycles:
            reported_cycles.add(task.id)
            issues.append(DependencyIssue(
                code=ErrorCode.ERR_CIRCULAR_DEPENDENCY,
                message="Part of a dependency cycle",
                task_id=task.id
            ))

    return issues
