"""
Unit Tests for the Task Planner.

This module covers the Eisenhower Matrix classifier, the critical path
engine, dependency diagnostics and the REST endpoints built on them.
"""

from dataclasses import FrozenInstanceError
from datetime import timedelta
import json

from django.core.cache import cache
from django.test import TestCase
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from . import critical_path
from .errors import ErrorCode, InvalidQuadrantError
from .graph import dependency_issues, detect_circular_dependencies
from .priority import (
    Quadrant,
    classify,
    matrix_to_dict,
    priority_score,
    quadrant_label,
    rank_tasks,
    score_tasks
)
from .sample_data import sample_backlog, sample_project
from .task import Task, make_tasks


def make_task(task_id, estimated_time=1, priority=5, due_date=None, dependencies=(), now=None):
    now = now or timezone.now()
    return Task(
        id=task_id,
        title=f"Task {task_id}",
        estimated_time=estimated_time,
        priority=priority,
        due_date=due_date or now + timedelta(days=1),
        dependencies=dependencies
    )


class TaskTests(TestCase):
    """Tests for the Task value object."""

    def setUp(self):
        self.now = timezone.now()

    def test_overdue_task_is_urgent(self):
        """A task due before now should be urgent."""
        task = make_task('1', due_date=self.now - timedelta(days=5), now=self.now)

        self.assertTrue(task.is_overdue(self.now))
        self.assertEqual(task.urgency(self.now), 1)

    def test_future_task_is_not_urgent(self):
        task = make_task('1', due_date=self.now + timedelta(days=5), now=self.now)

        self.assertFalse(task.is_overdue(self.now))
        self.assertEqual(task.urgency(self.now), 0)

    def test_task_due_exactly_now_is_not_overdue(self):
        """Overdue means strictly before now."""
        task = make_task('1', due_date=self.now, now=self.now)
        self.assertEqual(task.urgency(self.now), 0)

    def test_urgency_follows_the_evaluation_instant(self):
        """The same task flips urgency once its due date is crossed."""
        task = make_task('1', due_date=self.now + timedelta(hours=1), now=self.now)

        self.assertEqual(task.urgency(self.now), 0)
        self.assertEqual(task.urgency(self.now + timedelta(hours=2)), 1)

    def test_importance_threshold(self):
        """Only priority strictly above 7 counts as important."""
        self.assertEqual(make_task('1', priority=7).importance, 0)
        self.assertEqual(make_task('2', priority=8).importance, 1)
        self.assertEqual(make_task('3', priority=0).importance, 0)

    def test_task_is_immutable(self):
        task = make_task('1')
        with self.assertRaises(FrozenInstanceError):
            task.priority = 10

    def test_dependencies_stored_as_tuple(self):
        task = make_task('2', dependencies=['1', '1'])
        self.assertEqual(task.dependencies, ('1', '1'))

    def test_quick_task_defaults(self):
        task = Task.quick('1', 'Quick', self.now)

        self.assertEqual(task.estimated_time, 0)
        self.assertEqual(task.priority, 5)
        self.assertEqual(task.due_date, self.now + timedelta(days=1))
        self.assertEqual(task.dependencies, ())

    def test_make_tasks_from_rows(self):
        rows = [
            {'id': 1, 'title': 'A', 'estimated_time': 2, 'priority': 3,
             'due_date': self.now, 'dependencies': ['x']},
            {'id': '2', 'title': 'B', 'estimated_time': 1, 'priority': 9,
             'due_date': self.now},
        ]
        tasks = make_tasks(rows)

        self.assertEqual(tasks[0].id, '1')
        self.assertEqual(tasks[0].dependencies, ('x',))
        self.assertEqual(tasks[1].dependencies, ())


class ClassifierTests(TestCase):
    """Tests for Eisenhower Matrix classification and scoring."""

    def setUp(self):
        self.now = timezone.now()
        self.urgent_important = Task(
            "1", "Critical Bug", 2, 9, self.now - timedelta(days=1)
        )
        self.not_urgent_important = Task(
            "2", "Feature Enhancement", 5, 8, self.now + timedelta(days=10)
        )
        self.urgent_not_important = Task(
            "3", "Email Response", 1, 3, self.now - timedelta(days=1)
        )
        self.not_urgent_not_important = Task(
            "4", "Office Cleaning", 3, 2, self.now + timedelta(days=30)
        )
        self.tasks = [
            self.urgent_important,
            self.not_urgent_important,
            self.urgent_not_important,
            self.not_urgent_not_important,
        ]

    def test_classify_into_matrix(self):
        matrix = classify(self.tasks, self.now)

        self.assertEqual(len(matrix), 2)
        self.assertEqual(len(matrix[0]), 2)
        self.assertEqual(matrix[1][1], [self.urgent_important])
        self.assertEqual(matrix[0][1], [self.not_urgent_important])
        self.assertEqual(matrix[1][0], [self.urgent_not_important])
        self.assertEqual(matrix[0][0], [self.not_urgent_not_important])

    def test_empty_task_list(self):
        matrix = classify([], self.now)

        for urgency in (0, 1):
            for importance in (0, 1):
                self.assertEqual(matrix[urgency][importance], [])

    def test_classify_keeps_every_task_once(self):
        tasks = self.tasks * 3
        matrix = classify(tasks, self.now)

        total = sum(len(matrix[u][i]) for u in (0, 1) for i in (0, 1))
        self.assertEqual(total, len(tasks))

    def test_classify_is_stable(self):
        """Tasks keep their input order inside a quadrant."""
        past = self.now - timedelta(days=1)
        tasks = [Task(str(n), f"Bug {n}", 1, 9, past) for n in (5, 3, 9, 1)]

        matrix = classify(tasks, self.now)
        self.assertEqual([t.id for t in matrix[1][1]], ['5', '3', '9', '1'])

    def test_quadrant_labels(self):
        self.assertEqual(quadrant_label(0, 0), "DELEGATE (Not Urgent, Not Important)")
        self.assertEqual(quadrant_label(0, 1), "PLAN (Not Urgent, Important)")
        self.assertEqual(quadrant_label(1, 0), "INTERRUPT (Urgent, Not Important)")
        self.assertEqual(quadrant_label(1, 1), "DO_FIRST (Urgent, Important)")

    def test_invalid_quadrant_rejected(self):
        """Non-binary inputs are a precondition failure, not an UNKNOWN label."""
        for urgency, importance in [(2, 0), (0, -1), (1, 5), ('1', 0)]:
            with self.assertRaises(InvalidQuadrantError) as ctx:
                quadrant_label(urgency, importance)
            self.assertEqual(ctx.exception.code, ErrorCode.ERR_INVALID_QUADRANT)

    def test_invalid_quadrant_is_value_error(self):
        with self.assertRaises(ValueError):
            Quadrant.of(3, 3)

    def test_quadrant_lookup(self):
        quadrant = Quadrant.of(1, 0)

        self.assertEqual(quadrant, Quadrant.INTERRUPT)
        self.assertEqual(quadrant.urgency, 1)
        self.assertEqual(quadrant.importance, 0)

    def test_priority_score(self):
        """Score = (1 * 10) + (1 * 5) + 8 = 23."""
        task = Task("1", "Test", 5, 8, self.now - timedelta(days=1))
        self.assertEqual(priority_score(task, self.now), 23)

    def test_priority_score_formula_for_all_quadrants(self):
        for task in self.tasks:
            expected = (
                task.importance * 10
                + task.urgency(self.now) * 5
                + task.priority
            )
            self.assertEqual(priority_score(task, self.now), expected)

    def test_priority_score_is_repeatable_at_same_instant(self):
        task = self.urgent_important
        self.assertEqual(priority_score(task, self.now), priority_score(task, self.now))

    def test_priority_score_changes_across_due_date(self):
        task = Task("1", "Soon", 1, 4, self.now + timedelta(minutes=30))

        self.assertEqual(priority_score(task, self.now), 4)
        self.assertEqual(priority_score(task, self.now + timedelta(hours=1)), 9)

    def test_negative_priority_propagates(self):
        task = Task("1", "Odd", 1, -3, self.now + timedelta(days=1))
        self.assertEqual(priority_score(task, self.now), -3)

    def test_score_tasks_keeps_input_order(self):
        scored = score_tasks(self.tasks, self.now)

        self.assertEqual([s.task.id for s in scored], ['1', '2', '3', '4'])
        self.assertEqual(scored[0].quadrant, Quadrant.DO_FIRST)
        self.assertEqual(scored[3].quadrant, Quadrant.DELEGATE)

    def test_rank_tasks_highest_score_first(self):
        ranked = rank_tasks(self.tasks, self.now)
        # 24, 18, 8, 2
        self.assertEqual([s.task.id for s in ranked], ['1', '2', '3', '4'])
        self.assertEqual([s.priority_score for s in ranked], [24, 18, 8, 2])

    def test_rank_tasks_ties_keep_input_order(self):
        future = self.now + timedelta(days=1)
        tasks = [Task(task_id, task_id, 1, 5, future) for task_id in ('b', 'a', 'c')]

        ranked = rank_tasks(tasks, self.now)
        self.assertEqual([s.task.id for s in ranked], ['b', 'a', 'c'])

    def test_matrix_to_dict(self):
        result = matrix_to_dict(classify(self.tasks, self.now))

        self.assertEqual(list(result.keys()), [
            "DELEGATE (Not Urgent, Not Important)",
            "PLAN (Not Urgent, Important)",
            "INTERRUPT (Urgent, Not Important)",
            "DO_FIRST (Urgent, Important)",
        ])
        do_first = result["DO_FIRST (Urgent, Important)"]
        self.assertEqual(do_first['count'], 1)
        self.assertEqual(do_first['tasks'][0]['title'], "Critical Bug")


class CriticalPathTests(TestCase):
    """Tests for the critical path engine."""

    def test_chain_with_dependencies(self):
        tasks = [
            make_task('1', 5),
            make_task('2', 3, dependencies=['1']),
            make_task('3', 2, dependencies=['2']),
        ]
        # A(5) + B(3) + C(2) = 10 hours
        self.assertEqual(critical_path.calculate(tasks), 10)

    def test_empty_task_list(self):
        self.assertEqual(critical_path.calculate([]), 0)
        self.assertEqual(critical_path.critical_path([]), [])
        self.assertEqual(critical_path.critical_chain([]), [])

    def test_tasks_with_no_dependencies(self):
        tasks = [make_task('1', 5), make_task('2', 3), make_task('3', 2)]
        # No dependencies, max time is the longest single task
        self.assertEqual(critical_path.calculate(tasks), 5)

    def test_parallel_roots_feeding_one_task(self):
        tasks = [
            make_task('1', 5),
            make_task('2', 7),
            make_task('3', 3, dependencies=['1', '2']),
        ]
        # max(5, 7) + 3 = 10
        self.assertEqual(critical_path.calculate(tasks), 10)

    def test_chain_listed_in_reverse_order(self):
        tasks = [
            make_task('3', 2, dependencies=['2']),
            make_task('2', 3, dependencies=['1']),
            make_task('1', 5),
        ]
        self.assertEqual(critical_path.calculate(tasks), 10)

    def test_resolution_sees_same_round_results(self):
        tasks = [
            make_task('1', 5),
            make_task('2', 3, dependencies=['1']),
            make_task('3', 2, dependencies=['2']),
        ]
        resolution = critical_path.resolve_end_times(tasks)

        self.assertEqual(resolution.end_times, {'1': 5, '2': 8, '3': 10})
        self.assertEqual(resolution.rounds, 2)

    def test_pert_estimate(self):
        # (2 + 4*4 + 8) / 6 = 26 / 6 ~ 4.33
        self.assertAlmostEqual(critical_path.pert_estimate(2, 4, 8), 4.33, delta=0.01)

    def test_pert_estimate_does_not_validate_order(self):
        self.assertAlmostEqual(critical_path.pert_estimate(8, 4, 2), 26 / 6)
        self.assertIsInstance(critical_path.pert_estimate(1, 1, 1), float)

    def test_single_task_is_critical(self):
        tasks = [make_task('1', 10)]

        self.assertEqual(critical_path.calculate(tasks), 10)
        self.assertEqual(critical_path.critical_path(tasks), ['1'])

    def test_unknown_dependency_excluded(self):
        tasks = [
            make_task('1', 5),
            make_task('2', 20, dependencies=['ghost']),
        ]
        result = critical_path.analyze(tasks)

        self.assertEqual(result.duration, 5)
        self.assertEqual(result.unresolved, ['2'])
        self.assertEqual(result.unresolved_count, 1)
        self.assertFalse(result.is_complete)

    def test_cycle_excluded(self):
        tasks = [
            make_task('a', 3, dependencies=['b']),
            make_task('b', 4, dependencies=['a']),
            make_task('c', 2),
        ]
        result = critical_path.analyze(tasks)

        self.assertEqual(result.duration, 2)
        self.assertEqual(result.unresolved, ['a', 'b'])

    def test_nothing_resolvable(self):
        tasks = [make_task('a', 3, dependencies=['a'])]
        result = critical_path.analyze(tasks)

        self.assertEqual(result.duration, 0)
        self.assertEqual(result.end_times, {})
        self.assertEqual(result.critical_chain, [])

    def test_complete_result(self):
        result = critical_path.analyze([make_task('1', 4)])

        self.assertTrue(result.is_complete)
        self.assertEqual(result.unresolved_count, 0)

    def test_legacy_membership_matches_own_duration_only(self):
        """A chained path has no member whose own duration equals the total."""
        tasks = [
            make_task('a', 2),
            make_task('b', 8, dependencies=['a']),
        ]
        self.assertEqual(critical_path.critical_path(tasks), [])
        self.assertEqual(critical_path.critical_chain(tasks), ['a', 'b'])

    def test_legacy_membership_includes_unresolved_task(self):
        tasks = [
            make_task('u', 10, dependencies=['missing']),
            make_task('a', 10),
        ]
        result = critical_path.analyze(tasks)

        self.assertEqual(result.critical_tasks, ['u', 'a'])
        self.assertEqual(result.critical_chain, ['a'])

    def test_critical_chain_follows_longest_branch(self):
        tasks = [
            make_task('1', 5),
            make_task('2', 7),
            make_task('3', 3, dependencies=['1', '2']),
        ]
        self.assertEqual(critical_path.critical_chain(tasks), ['2', '3'])

    def test_critical_chain_includes_tied_branches(self):
        tasks = [
            make_task('d', 1, dependencies=['b', 'c']),
            make_task('b', 3, dependencies=['a']),
            make_task('c', 3, dependencies=['a']),
            make_task('a', 2),
        ]
        self.assertEqual(critical_path.critical_chain(tasks), ['a', 'b', 'c', 'd'])

    def test_negative_duration_propagates(self):
        self.assertEqual(critical_path.calculate([make_task('1', -3)]), -3)

    def test_duplicate_ids_first_resolution_wins(self):
        tasks = [
            make_task('1', 4),
            make_task('1', 9, dependencies=['2']),
            make_task('2', 1),
        ]
        resolution = critical_path.resolve_end_times(tasks)

        self.assertEqual(resolution.end_times['1'], 4)
        self.assertEqual(resolution.unresolved, [])

    def test_duplicate_root_ids_first_occurrence_wins(self):
        """Two dependency-free tasks sharing an id keep the first one's time."""
        tasks = [make_task('1', 4), make_task('1', 9)]
        resolution = critical_path.resolve_end_times(tasks)

        self.assertEqual(resolution.end_times['1'], 4)
        self.assertEqual(resolution.resolved_by['1'], tasks[0])
        self.assertEqual(critical_path.calculate(tasks), 4)

    def test_analyze_to_dict(self):
        tasks = sample_project(timezone.now())
        data = critical_path.analyze(tasks).to_dict()

        self.assertEqual(data['critical_path_time'], 11)
        self.assertEqual(data['critical_chain'], ['1', '2', '3', '4'])
        self.assertEqual(data['end_times'], {'1': 5, '2': 8, '3': 10, '4': 11})
        self.assertEqual(data['unresolved_tasks'], [])


class DependencyDiagnosticsTests(TestCase):
    """Tests for circular dependency detection and issue reporting."""

    def test_no_circular_dependencies(self):
        tasks = [
            make_task('1'),
            make_task('2', dependencies=['1']),
            make_task('3', dependencies=['2']),
        ]
        graph, circular = detect_circular_dependencies(tasks)

        self.assertEqual(graph['3'], {'2'})
        self.assertEqual(circular, set())

    def test_simple_circular_dependency(self):
        tasks = [
            make_task('1', dependencies=['2']),
            make_task('2', dependencies=['1']),
        ]
        _, circular = detect_circular_dependencies(tasks)
        self.assertEqual(circular, {'1', '2'})

    def test_partial_circular_with_safe_tasks(self):
        tasks = [
            make_task('1', dependencies=['3']),
            make_task('2', dependencies=['1']),
            make_task('3', dependencies=['2']),
            make_task('4', dependencies=['1']),
        ]
        _, circular = detect_circular_dependencies(tasks)
        self.assertEqual(circular, {'1', '2', '3'})

    def test_self_referencing_task(self):
        _, circular = detect_circular_dependencies([make_task('1', dependencies=['1'])])
        self.assertEqual(circular, {'1'})

    def test_long_chain_listed_dependents_first(self):
        """Deep chains are walked without hitting the recursion limit."""
        count = 1500
        tasks = [
            make_task(str(n), dependencies=[str(n - 1)] if n else [])
            for n in reversed(range(count))
        ]
        graph, circular = detect_circular_dependencies(tasks)

        self.assertEqual(len(graph), count)
        self.assertEqual(circular, set())
        self.assertEqual(dependency_issues(tasks), [])

    def test_long_cycle_detected(self):
        count = 1500
        tasks = [
            make_task(str(n), dependencies=[str((n + 1) % count)])
            for n in range(count)
        ]
        _, circular = detect_circular_dependencies(tasks)

        self.assertEqual(len(circular), count)

    def test_clean_graph_has_no_issues(self):
        tasks = sample_project(timezone.now())
        self.assertEqual(dependency_issues(tasks), [])

    def test_issue_codes(self):
        tasks = [
            make_task('1', dependencies=['1']),
            make_task('2', dependencies=['ghost', 'ghost']),
            make_task('2'),
        ]
        codes = [(issue.code, issue.task_id) for issue in dependency_issues(tasks)]

        self.assertEqual(codes, [
            (ErrorCode.ERR_SELF_DEPENDENCY, '1'),
            (ErrorCode.ERR_CIRCULAR_DEPENDENCY, '1'),
            (ErrorCode.ERR_UNKNOWN_DEPENDENCY, '2'),
            (ErrorCode.ERR_DUPLICATE_ID, '2'),
        ])

    def test_issue_to_dict(self):
        issue = dependency_issues([make_task('2', dependencies=['ghost'])])[0]

        self.assertEqual(issue.to_dict(), {
            'error_code': 'ERR_UNKNOWN_DEPENDENCY',
            'message': 'Unknown dependency: ghost',
            'task_id': '2',
            'dependency_id': 'ghost'
        })


class APIEndpointTests(APITestCase):
    """Tests for the API endpoints."""

    def setUp(self):
        cache.clear()
        self.now = timezone.now()

    def post_json(self, url, data):
        return self.client.post(
            url,
            data=json.dumps(data),
            content_type='application/json'
        )

    def task_payload(self, task_id, estimated_time=1, priority=5, days=1, dependencies=None):
        return {
            'id': task_id,
            'title': f'Task {task_id}',
            'estimated_time': estimated_time,
            'priority': priority,
            'due_date': (self.now + timedelta(days=days)).isoformat(),
            'dependencies': dependencies or []
        }

    def test_list_endpoint_classifies_sample_backlog(self):
        response = self.client.get('/api/tasks/list/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['total'], len(sample_backlog(self.now)))
        matrix = response.data['matrix']
        self.assertEqual(matrix["DELEGATE (Not Urgent, Not Important)"]['count'], 2)
        self.assertEqual(matrix["PLAN (Not Urgent, Important)"]['count'], 1)
        self.assertEqual(matrix["INTERRUPT (Urgent, Not Important)"]['count'], 0)
        self.assertEqual(matrix["DO_FIRST (Urgent, Important)"]['count'], 1)

    def test_classify_endpoint_success(self):
        data = {
            'tasks': [
                self.task_payload('1', priority=4, days=3),
                self.task_payload('2', priority=9, days=-1),
            ]
        }
        response = self.post_json('/api/tasks/classify/', data)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['success'])
        self.assertEqual(response.data['total'], 2)
        ranked = response.data['ranked']
        self.assertEqual(ranked[0]['id'], '2')
        self.assertEqual(ranked[0]['priority_score'], 24)
        self.assertEqual(ranked[0]['quadrant'], 'DO_FIRST')
        self.assertEqual(ranked[1]['quadrant_label'], "DELEGATE (Not Urgent, Not Important)")

    def test_classify_endpoint_empty_tasks(self):
        response = self.post_json('/api/tasks/classify/', {'tasks': []})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(response.data['success'])
        self.assertEqual(response.data['error_code'], ErrorCode.ERR_EMPTY_TASKS.value)

    def test_classify_endpoint_invalid_task(self):
        data = {'tasks': [{'id': '1', 'title': '   ', 'priority': 'high'}]}
        response = self.post_json('/api/tasks/classify/', data)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_classify_endpoint_rejects_non_object_body(self):
        response = self.post_json('/api/tasks/classify/', [1, 2])

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(response.data['success'])
        self.assertEqual(response.data['error_code'], ErrorCode.ERR_MISSING_FIELD.value)

    def test_classify_endpoint_missing_tasks(self):
        response = self.post_json('/api/tasks/classify/', {})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error_code'], ErrorCode.ERR_EMPTY_TASKS.value)

    def test_create_endpoint_defaults(self):
        response = self.post_json('/api/tasks/create/', {})

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['status'], 'created')
        self.assertEqual(response.data['title'], 'New Task')
        self.assertEqual(response.data['priority'], 5)
        self.assertEqual(response.data['priority_score'], 5)
        self.assertEqual(response.data['quadrant'], "DELEGATE (Not Urgent, Not Important)")
        self.assertEqual(len(response.data['id']), 36)

    def test_create_endpoint_overdue_important(self):
        data = {
            'title': 'Hotfix',
            'priority': 9,
            'due_date': (self.now - timedelta(hours=1)).isoformat()
        }
        response = self.post_json('/api/tasks/create/', data)

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['priority_score'], 24)
        self.assertEqual(response.data['quadrant'], "DO_FIRST (Urgent, Important)")

    def test_create_endpoint_ids_are_unique(self):
        first = self.post_json('/api/tasks/create/', {'title': 'A'})
        second = self.post_json('/api/tasks/create/', {'title': 'A'})

        self.assertNotEqual(first.data['id'], second.data['id'])

    def test_schedule_endpoint_sample_project(self):
        response = self.post_json('/api/tasks/schedule/', {})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['source'], 'sample')
        self.assertEqual(response.data['total_tasks'], 4)
        self.assertEqual(response.data['critical_path_time'], 11)
        self.assertEqual(response.data['critical_chain'], ['1', '2', '3', '4'])
        self.assertAlmostEqual(response.data['pert_estimate'], 4.33, delta=0.01)

    def test_schedule_endpoint_custom_tasks_and_pert(self):
        data = {
            'tasks': [
                self.task_payload('a', 5),
                self.task_payload('b', 7),
                self.task_payload('c', 3, dependencies=['a', 'b']),
            ],
            'pert': {'optimistic': 1, 'most_likely': 2, 'pessimistic': 3}
        }
        response = self.post_json('/api/tasks/schedule/', data)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['source'], 'request')
        self.assertEqual(response.data['critical_path_time'], 10)
        self.assertEqual(response.data['critical_chain'], ['b', 'c'])
        self.assertEqual(response.data['pert_estimate'], 2.0)
        self.assertEqual(response.data['unresolved_tasks'], [])

    def test_schedule_endpoint_reports_unresolved(self):
        data = {
            'tasks': [
                self.task_payload('a', 5),
                self.task_payload('b', 20, dependencies=['ghost']),
            ]
        }
        response = self.post_json('/api/tasks/schedule/', data)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['success'])
        self.assertEqual(response.data['critical_path_time'], 5)
        self.assertEqual(response.data['unresolved_tasks'], ['b'])
        self.assertEqual(
            response.data['dependency_issues'][0]['error_code'],
            ErrorCode.ERR_UNKNOWN_DEPENDENCY.value
        )

    def test_schedule_endpoint_strict_rejects_unresolved(self):
        data = {
            'tasks': [
                self.task_payload('a', 5, dependencies=['b']),
                self.task_payload('b', 5, dependencies=['a']),
            ],
            'strict': True
        }
        response = self.post_json('/api/tasks/schedule/', data)

        self.assertEqual(response.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)
        self.assertFalse(response.data['success'])
        self.assertEqual(response.data['error_code'], ErrorCode.ERR_UNRESOLVED_DEPENDENCY.value)
        self.assertEqual(response.data['unresolved_count'], 2)

    def test_schedule_endpoint_long_reversed_chain(self):
        count = 1500
        data = {
            'tasks': [
                self.task_payload(str(n), 1, dependencies=[str(n - 1)] if n else None)
                for n in reversed(range(count))
            ]
        }
        response = self.post_json('/api/tasks/schedule/', data)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['critical_path_time'], count)
        self.assertEqual(response.data['unresolved_tasks'], [])
        self.assertEqual(response.data['dependency_issues'], [])

    def test_api_info_endpoint(self):
        response = self.client.get('/api/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('name', response.data)
        self.assertIn('endpoints', response.data)
        self.assertEqual(
            response.data['quadrants']['DO_FIRST'],
            "DO_FIRST (Urgent, Important)"
        )
        self.assertIn('ERR_INVALID_QUADRANT', response.data['error_codes'])
