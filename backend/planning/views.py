"""
API Views for the Task Planner.

Thin REST glue around the two planning engines. Each request reads the
clock once and passes that instant to the engines, so every task in a
response is classified and scored against the same moment.
"""

import logging

from django.conf import settings
from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view, throttle_classes
from rest_framework.response import Response
from rest_framework.request import Request
from rest_framework.throttling import AnonRateThrottle
from drf_spectacular.utils import extend_schema
from drf_spectacular.types import OpenApiTypes

from . import critical_path
from .errors import ErrorCode
from .graph import dependency_issues
from .priority import (
    classify,
    matrix_to_dict,
    priority_score,
    rank_tasks,
    scored_task_to_dict,
    Quadrant
)
from .sample_data import sample_backlog, sample_project
from .serializers import (
    TaskBulkInputSerializer,
    TaskCreateSerializer,
    ScheduleRequestSerializer
)
from .task import make_tasks, task_to_dict


logger = logging.getLogger(__name__)


# ============================================
# RATE LIMITING CLASSES
# ============================================

class ClassifyRateThrottle(AnonRateThrottle):
    """Rate limit for the list, classify and create endpoints - 30 requests per minute."""
    scope = 'classify'
    rate = '30/min'


class ScheduleRateThrottle(AnonRateThrottle):
    """Rate limit for critical path scheduling - 30 requests per minute."""
    scope = 'schedule'
    rate = '30/min'


def _invalid_input(errors) -> Response:
    return Response(
        {
            'success': False,
            'error_code': ErrorCode.ERR_MISSING_FIELD.value,
            'errors': errors,
            'message': 'Invalid input data. Please check your tasks format.'
        },
        status=status.HTTP_400_BAD_REQUEST
    )


# ============================================
# API ENDPOINTS
# ============================================

@extend_schema(
    summary="Classify the sample backlog",
    description="Classify a fixed sample backlog into the Eisenhower Matrix.",
    responses={200: OpenApiTypes.OBJECT},
    tags=['Classification']
)
@api_view(['GET'])
@throttle_classes([ClassifyRateThrottle])
def list_tasks(request: Request) -> Response:
    """
    List the sample tasks classified by priority matrix.

    GET /api/tasks/list/
    """
    now = timezone.now()
    tasks = sample_backlog(now)
    matrix = classify(tasks, now)

    return Response({
        'success': True,
        'error_code': ErrorCode.SUCCESS.value,
        'total': len(tasks),
        'matrix': matrix_to_dict(matrix)
    })


@extend_schema(
    summary="Classify and rank tasks",
    description="""
    Classify submitted tasks into the Eisenhower Matrix and rank them by
    priority score: importance * 10 + urgency * 5 + priority.
    """,
    request={
        'application/json': {
            'type': 'object',
            'properties': {
                'tasks': {'type': 'array', 'items': {'type': 'object'}},
            },
            'required': ['tasks']
        }
    },
    responses={200: OpenApiTypes.OBJECT},
    tags=['Classification']
)
@api_view(['POST'])
@throttle_classes([ClassifyRateThrottle])
def classify_tasks(request: Request) -> Response:
    """
    Classify tasks and return the matrix plus a ranked task list.

    POST /api/tasks/classify/

    Request Body:
    {
        "tasks": [
            {
                "id": "1",
                "title": "Fix login bug",
                "estimated_time": 3,
                "priority": 9,
                "due_date": "2026-10-20T09:00:00Z",
                "dependencies": []          // Optional
            }
        ]
    }
    """
    # Non-object bodies fall through to the serializer's own error
    if isinstance(request.data, dict) and not request.data.get('tasks'):
        return Response(
            {
                'success': False,
                'error_code': ErrorCode.ERR_EMPTY_TASKS.value,
                'message': 'No tasks provided. Please submit at least one task.'
            },
            status=status.HTTP_400_BAD_REQUEST
        )

    serializer = TaskBulkInputSerializer(data=request.data)

    if not serializer.is_valid():
        return _invalid_input(serializer.errors)

    now = timezone.now()
    tasks = make_tasks(serializer.validated_data['tasks'])
    matrix = classify(tasks, now)
    ranked = rank_tasks(tasks, now)

    logger.info("Classified %d task(s)", len(tasks))

    return Response({
        'success': True,
        'error_code': ErrorCode.SUCCESS.value,
        'evaluated_at': now.isoformat(),
        'total': len(tasks),
        'matrix': matrix_to_dict(matrix),
        'ranked': [scored_task_to_dict(s) for s in ranked]
    })


@extend_schema(
    summary="Create a task",
    description="Build a task with a fresh id and return its priority score. Nothing is stored.",
    request={
        'application/json': {
            'type': 'object',
            'properties': {
                'title': {'type': 'string', 'default': 'New Task'},
                'estimated_time': {'type': 'integer', 'default': 5},
                'priority': {'type': 'integer', 'default': 5},
                'due_date': {'type': 'string', 'format': 'date-time'},
                'dependencies': {'type': 'array', 'items': {'type': 'string'}},
            }
        }
    },
    responses={201: OpenApiTypes.OBJECT},
    tags=['Tasks']
)
@api_view(['POST'])
@throttle_classes([ClassifyRateThrottle])
def create_task(request: Request) -> Response:
    """
    Create a new task and return its id and score.

    POST /api/tasks/create/
    """
    now = timezone.now()
    serializer = TaskCreateSerializer(data=request.data, context={'now': now})

    if not serializer.is_valid():
        return _invalid_input(serializer.errors)

    task = serializer.save()
    quadrant = Quadrant.of(task.urgency(now), task.importance)

    logger.info("Created task %s", task.id)

    return Response(
        {
            'success': True,
            'error_code': ErrorCode.SUCCESS.value,
            'id': task.id,
            'title': task.title,
            'priority': task.priority,
            'priority_score': priority_score(task, now),
            'quadrant': quadrant.label,
            'task': task_to_dict(task),
            'status': 'created'
        },
        status=status.HTTP_201_CREATED
    )


@extend_schema(
    summary="Calculate the critical path",
    description="""
    Compute the critical path duration over the submitted dependency graph
    (or the sample project when no tasks are sent) and a PERT estimate.

    Tasks whose dependencies cannot be resolved are listed in
    `unresolved_tasks`. With `strict: true` they turn the response into a 422.
    """,
    request={
        'application/json': {
            'type': 'object',
            'properties': {
                'tasks': {'type': 'array', 'items': {'type': 'object'}},
                'pert': {
                    'type': 'object',
                    'properties': {
                        'optimistic': {'type': 'number', 'default': 2},
                        'most_likely': {'type': 'number', 'default': 4},
                        'pessimistic': {'type': 'number', 'default': 8},
                    }
                },
                'strict': {'type': 'boolean', 'default': False},
            }
        }
    },
    responses={200: OpenApiTypes.OBJECT, 422: OpenApiTypes.OBJECT},
    tags=['Scheduling']
)
@api_view(['POST'])
@throttle_classes([ScheduleRateThrottle])
def schedule_tasks(request: Request) -> Response:
    """
    Calculate critical path and PERT estimate for project scheduling.

    POST /api/tasks/schedule/

    Request Body:
    {
        "tasks": [...],                 // Optional, sample project if empty
        "pert": {                       // Optional three-point estimate
            "optimistic": 2,
            "most_likely": 4,
            "pessimistic": 8
        },
        "strict": false                 // Optional: reject unresolved graphs
    }
    """
    serializer = ScheduleRequestSerializer(data=request.data)

    if not serializer.is_valid():
        return _invalid_input(serializer.errors)

    validated_data = serializer.validated_data
    now = timezone.now()

    if validated_data['tasks']:
        tasks = make_tasks(validated_data['tasks'])
        source = 'request'
    else:
        tasks = sample_project(now)
        source = 'sample'

    result = critical_path.analyze(tasks)
    issues = dependency_issues(tasks)

    pert = dict(settings.TASK_PLANNER['PERT_DEFAULTS'])
    pert.update(validated_data.get('pert') or {})
    estimate = critical_path.pert_estimate(
        pert['optimistic'],
        pert['most_likely'],
        pert['pessimistic']
    )

    response_data = {
        'success': True,
        'error_code': ErrorCode.SUCCESS.value,
        'source': source,
        'total_tasks': len(tasks),
        **result.to_dict(),
        'pert_estimate': round(estimate, 2),
        'pert_inputs': pert,
        'dependency_issues': [issue.to_dict() for issue in issues]
    }

    if not result.is_complete:
        logger.warning(
            "Critical path left %d task(s) unresolved: %s",
            result.unresolved_count,
            ", ".join(result.unresolved)
        )
        if validated_data['strict']:
            response_data.update({
                'success': False,
                'error_code': ErrorCode.ERR_UNRESOLVED_DEPENDENCY.value,
                'message': 'Some tasks depend on unknown or circular dependencies.'
            })
            return Response(response_data, status=status.HTTP_422_UNPROCESSABLE_ENTITY)

    logger.info(
        "Scheduled %d task(s): critical path %s hours",
        len(tasks),
        result.duration
    )

    return Response(response_data)


@extend_schema(
    summary="API information",
    description="Get API information and available endpoints.",
    responses={200: OpenApiTypes.OBJECT},
    tags=['Info']
)
@api_view(['GET'])
def api_info(request: Request) -> Response:
    """
    Return API information and available endpoints.

    GET /api/
    """
    return Response({
        'name': 'Task Planner API',
        'version': settings.SPECTACULAR_SETTINGS['VERSION'],
        'documentation': '/api/docs/',
        'features': [
            'Eisenhower Matrix classification',
            'Priority score ranking',
            'Critical path calculation',
            'PERT three-point estimates',
            'Dependency diagnostics',
            'Rate limiting (30 req/min)',
            'OpenAPI/Swagger documentation'
        ],
        'endpoints': {
            'GET /api/tasks/list/': 'Classify the sample backlog',
            'POST /api/tasks/classify/': 'Classify and rank submitted tasks',
            'POST /api/tasks/create/': 'Build a task and score it',
            'POST /api/tasks/schedule/': 'Critical path and PERT estimate',
            'GET /api/docs/': 'Interactive API documentation',
            'GET /api/schema/': 'OpenAPI schema',
            'GET /api/': 'This info endpoint'
        },
        'quadrants': {
            quadrant.name: quadrant.label for quadrant in Quadrant
        },
        'error_codes': {
            code.value: code.name for code in ErrorCode
        }
    })
