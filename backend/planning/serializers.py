"""
Serializers for planning requests.

Tasks are never persisted; these serializers only validate the shape of
incoming data before it is turned into immutable ``Task`` values. Numeric
ranges are deliberately left open: negative durations and priorities are
passed through to the engines as supplied.
"""

import uuid
from datetime import timedelta

from django.conf import settings
from django.utils import timezone
from rest_framework import serializers

from .task import Task


class TaskInputSerializer(serializers.Serializer):
    """
    Serializer for a single task submitted for analysis.
    """

    id = serializers.CharField(max_length=255)
    title = serializers.CharField(max_length=255)
    estimated_time = serializers.IntegerField()
    priority = serializers.IntegerField()
    due_date = serializers.DateTimeField()
    dependencies = serializers.ListField(
        child=serializers.CharField(max_length=255),
        required=False,
        default=list
    )

    def validate_title(self, value):
        """Ensure title is not empty or just whitespace."""
        if not value.strip():
            raise serializers.ValidationError("Title cannot be empty")
        return value.strip()


class TaskBulkInputSerializer(serializers.Serializer):
    """
    Serializer for classification requests carrying a list of tasks.
    """

    tasks = serializers.ListField(
        child=TaskInputSerializer(),
        min_length=1,
        error_messages={
            'min_length': 'At least one task is required for analysis'
        }
    )


class TaskCreateSerializer(serializers.Serializer):
    """
    Serializer for building one task with defaults for missing fields.
    """

    title = serializers.CharField(max_length=255, required=False, default="New Task")
    estimated_time = serializers.IntegerField(required=False, default=5)
    priority = serializers.IntegerField(required=False, default=5)
    due_date = serializers.DateTimeField(required=False, allow_null=True, default=None)
    dependencies = serializers.ListField(
        child=serializers.CharField(max_length=255),
        required=False,
        default=list
    )

    def create(self, validated_data):
        now = self.context.get('now') or timezone.now()
        due_in_days = settings.TASK_PLANNER['CREATE_DUE_IN_DAYS']
        due_date = validated_data.get('due_date') or now + timedelta(days=due_in_days)
        return Task(
            id=str(uuid.uuid4()),
            title=validated_data['title'],
            estimated_time=validated_data['estimated_time'],
            priority=validated_data['priority'],
            due_date=due_date,
            dependencies=validated_data['dependencies']
        )


class PertSerializer(serializers.Serializer):
    """
    Three-point estimate inputs. No ordering between the points is enforced.
    """

    optimistic = serializers.FloatField(default=2)
    most_likely = serializers.FloatField(default=4)
    pessimistic = serializers.FloatField(default=8)


class ScheduleRequestSerializer(serializers.Serializer):
    """
    Serializer for critical path requests.

    An empty or missing task list schedules the sample project instead.
    """

    tasks = serializers.ListField(
        child=TaskInputSerializer(),
        required=False,
        default=list
    )
    pert = PertSerializer(required=False)
    strict = serializers.BooleanField(required=False, default=False)
