# taskflow_user/permissions.py
from rest_framework.permissions import BasePermission

from .policy import FORBIDDEN_MESSAGE, Operation, is_allowed

_METHOD_OPERATIONS = {
    'GET': Operation.READ,
    'HEAD': Operation.READ,
    'OPTIONS': Operation.READ,
    'POST': Operation.CREATE,
    'PUT': Operation.UPDATE,
    'PATCH': Operation.UPDATE,
    'DELETE': Operation.DELETE,
}


def operation_for(request, view):
    """Map an HTTP method to a policy operation; GET on a collection view is a listing."""
    operation = _METHOD_OPERATIONS.get(request.method)
    if operation is Operation.READ and 'pk' not in view.kwargs:
        return Operation.LIST
    return operation


class RolePermission(BasePermission):
    """
    Checks the caller's role against the view's ``resource`` before the handler runs.

    Denied requests never reach the service layer, so nothing is read from or
    written to the database on their behalf.
    """
    message = FORBIDDEN_MESSAGE

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False
        operation = operation_for(request, view)
        if operation is None:
            return False
        return is_allowed(user.role, view.resource, operation)
