# taskflow_app/services.py
"""
Services for projects, tasks, tags and categories.

Projects are visible to administrators and project managers only (the access
policy keeps collaborators out entirely). Tasks are shared, but a
collaborator works only with the tasks assigned to them. Tags and categories
belong to the user who created them, whatever that user's role.
"""
import uuid

from django.db.models import Prefetch
from rest_framework.exceptions import ValidationError

from taskflow.services import ModelService
from taskflow_user.models import Role
from taskflow_user.policy import Resource
from .models import Category, Project, Tag, Task
from .serializers import CategorySerializer, ProjectSerializer, TagSerializer, TaskSerializer


def _same_user(value, user):
    if value in (None, ''):
        return False
    try:
        return uuid.UUID(str(value)) == user.pk
    except ValueError:
        return False


class ProjectService(ModelService):
    resource = Resource.PROJECT
    model = Project
    serializer_class = ProjectSerializer

    def get_queryset(self):
        return Project.objects.select_related('assigned_to__profile')


class TaskService(ModelService):
    resource = Resource.TASK
    model = Task
    serializer_class = TaskSerializer

    def get_queryset(self):
        return (
            Task.objects
            .select_related('assigned_to__profile', 'project')
            .prefetch_related(
                Prefetch('tags', queryset=Tag.objects.filter(owner=self.actor)),
                Prefetch('categories', queryset=Category.objects.filter(owner=self.actor)),
            )
        )

    @property
    def is_collaborator(self):
        return self.actor.role == Role.COLABORATOR

    def scope_queryset(self, queryset):
        if self.is_collaborator:
            return queryset.filter(assigned_to=self.actor)
        return queryset

    def check_object(self, instance, operation):
        if self.is_collaborator and instance.assigned_to_id != self.actor.pk:
            self.deny()

    def validate_create(self, data):
        if not self.is_collaborator:
            return data
        data = data.copy()
        assignee = data.get('assigned_to_id')
        if assignee not in (None, '') and not _same_user(assignee, self.actor):
            self.deny()
        data['assigned_to_id'] = str(self.actor.pk)
        return data

    def validate_update(self, instance, data):
        if self.is_collaborator and 'assigned_to_id' in data and not _same_user(data['assigned_to_id'], self.actor):
            self.deny()
        return data

    def perform_update(self, serializer):
        # Label links are replaced only among the caller's own labels.
        chosen = {
            field: serializer.validated_data.pop(field)
            for field in ('tags', 'categories')
            if field in serializer.validated_data
        }
        task = serializer.save()
        for field, labels in chosen.items():
            related = getattr(task, field)
            related.remove(*related.filter(owner=self.actor))
            related.add(*labels)
        return task


class LabelService(ModelService):
    """Tags and categories: visible to and editable by their owner only."""

    def get_queryset(self):
        return self.model.objects.select_related('owner__profile')

    def scope_queryset(self, queryset):
        return queryset.filter(owner=self.actor)

    def check_object(self, instance, operation):
        if instance.owner_id != self.actor.pk:
            self.deny()

    def validate_update(self, instance, data):
        if 'owner' in data or 'owner_id' in data:
            raise ValidationError({'owner': ['The owner of a %s cannot be changed.' % self.resource.value]})
        return data

    def perform_create(self, serializer):
        return serializer.save(owner=self.actor)


class TagService(LabelService):
    resource = Resource.TAG
    model = Tag
    serializer_class = TagSerializer


class CategoryService(LabelService):
    resource = Resource.CATEGORY
    model = Category
    serializer_class = CategorySerializer
