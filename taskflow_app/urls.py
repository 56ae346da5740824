# taskflow_app/urls.py
from django.urls import path

from .views import (
    CategoryDetailView,
    CategoryListView,
    ProjectDetailView,
    ProjectListView,
    TagDetailView,
    TagListView,
    TaskDetailView,
    TaskListView,
)

urlpatterns = [
    path('projects/', ProjectListView.as_view(), name='project-list'),
    path('projects/<str:pk>/', ProjectDetailView.as_view(), name='project-detail'),
    path('tasks/', TaskListView.as_view(), name='task-list'),
    path('tasks/<str:pk>/', TaskDetailView.as_view(), name='task-detail'),
    path('tags/', TagListView.as_view(), name='tag-list'),
    path('tags/<str:pk>/', TagDetailView.as_view(), name='tag-detail'),
    path('categories/', CategoryListView.as_view(), name='category-list'),
    path('categories/<str:pk>/', CategoryDetailView.as_view(), name='category-detail'),
]
