# taskflow_user/policy.py
"""
Role-based access policy.

``is_allowed`` is a pure function of (role, resource, operation). It never
touches the database, so callers can evaluate it before loading anything.
Record-level scoping (owned tags, assigned tasks) is applied by the services
on top of this table.
"""
import enum
import logging

from rest_framework.exceptions import PermissionDenied

from .models import Role

logger = logging.getLogger(__name__)

FORBIDDEN_MESSAGE = 'You do not have permission to perform this action.'


class Resource(enum.Enum):
    PROJECT = 'project'
    TASK = 'task'
    TAG = 'tag'
    CATEGORY = 'category'
    USER = 'user'
    DIRECTORY = 'directory'


class Operation(enum.Enum):
    LIST = 'list'
    READ = 'read'
    CREATE = 'create'
    UPDATE = 'update'
    DELETE = 'delete'


ALL_OPERATIONS = frozenset(Operation)

# Resources whose records are always filtered down to the caller's own rows.
OWNER_SCOPED = frozenset({Resource.TAG, Resource.CATEGORY})

_SHARED = {
    Resource.TASK: ALL_OPERATIONS,
    Resource.TAG: ALL_OPERATIONS,
    Resource.CATEGORY: ALL_OPERATIONS,
    Resource.DIRECTORY: frozenset({Operation.LIST}),
}

POLICY = {
    Role.ADMINISTRATOR: {
        **_SHARED,
        Resource.PROJECT: ALL_OPERATIONS,
        Resource.USER: ALL_OPERATIONS,
    },
    Role.PROJECT_MANAGER: {
        **_SHARED,
        Resource.PROJECT: ALL_OPERATIONS,
    },
    Role.COLABORATOR: dict(_SHARED),
}

if set(POLICY) != set(Role):
    raise RuntimeError('Access policy does not cover roles: %s' % sorted(set(Role) - set(POLICY)))


def is_allowed(role, resource, operation):
    """Return True when ``role`` may run ``operation`` on ``resource``."""
    try:
        role = Role(role)
    except ValueError:
        return False
    return operation in POLICY[role].get(resource, frozenset())


def authorize(user, resource, operation):
    """Raise ``PermissionDenied`` unless ``user`` may run ``operation`` on ``resource``."""
    role = getattr(user, 'role', None)
    if user is None or not getattr(user, 'is_authenticated', False) or not is_allowed(role, resource, operation):
        logger.warning(
            "Denied %s on %s for user %s (role=%s)",
            operation.value, resource.value, getattr(user, 'pk', None), role,
        )
        raise PermissionDenied(FORBIDDEN_MESSAGE)
