"""
URL configuration for the planning app.
"""

from django.urls import path
from . import views

urlpatterns = [
    path('', views.api_info, name='api-info'),
    path('tasks/list/', views.list_tasks, name='list-tasks'),
    path('tasks/classify/', views.classify_tasks, name='classify-tasks'),
    path('tasks/create/', views.create_task, name='create-task'),
    path('tasks/schedule/', views.schedule_tasks, name='schedule-tasks'),
]
