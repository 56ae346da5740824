# taskflow_user/services.py
"""Services for user accounts and the assignee directory."""
from taskflow.services import ModelService
from .models import User
from .policy import Operation, Resource, authorize
from .serializers import UserSerializer, UserSummarySerializer


class UserService(ModelService):
    """
    Administrator-only management of user accounts.

    A user's profile is written through the nested ``profile`` field and is
    removed together with the user. Users who still own tags or categories
    cannot be deleted until those are removed.
    """
    resource = Resource.USER
    model = User
    serializer_class = UserSerializer
    conflict_message = 'A user with this email already exists.'
    protected_message = 'The user still owns tags or categories; delete them first.'

    def get_queryset(self):
        return User.objects.select_related('profile')


class DirectoryService:
    """Read-only list of assignable users for project and task forms."""

    def __init__(self, actor):
        self.actor = actor

    def list(self):
        authorize(self.actor, Resource.DIRECTORY, Operation.LIST)
        users = User.objects.filter(is_active=True).select_related('profile').order_by('name')
        return UserSummarySerializer(users, many=True).data
