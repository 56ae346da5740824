# taskflow_app/views.py
from taskflow.views import ResourceDetailView, ResourceListView
from taskflow_user.policy import Resource
from .services import CategoryService, ProjectService, TagService, TaskService


class ProjectListView(ResourceListView):
    """Projects, each with its assignee's id, name and avatar. Administrators and project managers only."""
    resource = Resource.PROJECT
    service_class = ProjectService


class ProjectDetailView(ResourceDetailView):
    resource = Resource.PROJECT
    service_class = ProjectService


class TaskListView(ResourceListView):
    """
    Tasks with their assignee, project, tags and categories.

    Collaborators only see tasks assigned to them, and tasks they create are
    assigned to themselves.
    """
    resource = Resource.TASK
    service_class = TaskService


class TaskDetailView(ResourceDetailView):
    """Deleting a task detaches its tags and categories; those records are kept."""
    resource = Resource.TASK
    service_class = TaskService


class TagListView(ResourceListView):
    """The caller's own tags. New tags are always owned by the caller."""
    resource = Resource.TAG
    service_class = TagService


class TagDetailView(ResourceDetailView):
    resource = Resource.TAG
    service_class = TagService


class CategoryListView(ResourceListView):
    """The caller's own categories. New categories are always owned by the caller."""
    resource = Resource.CATEGORY
    service_class = CategoryService


class CategoryDetailView(ResourceDetailView):
    resource = Resource.CATEGORY
    service_class = CategoryService
