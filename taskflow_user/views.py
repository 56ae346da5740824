# taskflow_user/views.py
from rest_framework.response import Response

from taskflow.views import ResourceDetailView, ResourceListView, ServiceView
from .policy import Resource
from .services import DirectoryService, UserService


class UserListView(ResourceListView):
    """List and create user accounts. Administrators only."""
    resource = Resource.USER
    service_class = UserService


class UserDetailView(ResourceDetailView):
    """
    Read, update or delete one user account.

    Deleting a user also deletes their profile. Projects and tasks assigned to
    the user stay in place with no assignee.
    """
    resource = Resource.USER
    service_class = UserService


class UserDirectoryView(ServiceView):
    """Id, name and avatar of every active user, for assignee pickers."""
    resource = Resource.DIRECTORY
    service_class = DirectoryService

    def get(self, request):
        return Response(self.get_service().list())
