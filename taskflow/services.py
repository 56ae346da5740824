# taskflow/services.py
"""
Shared create/read/update/delete orchestration.

Each resource service runs the same sequence for every call:

    access policy -> record lookup/scoping -> serializer validation
    -> one atomic database write -> canonical serializer output

Subclasses declare ``resource``, ``model`` and ``serializer_class`` and
override the hooks below where the resource has extra rules.
"""
import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError, transaction
from django.db.models import ProtectedError
from rest_framework.exceptions import NotFound, PermissionDenied

from taskflow.exceptions import Conflict
from taskflow_user.policy import FORBIDDEN_MESSAGE, Operation, authorize

logger = logging.getLogger(__name__)


class ModelService:
    resource = None
    model = None
    serializer_class = None
    conflict_message = 'The request conflicts with existing data.'
    protected_message = 'The record is still referenced by other records.'

    def __init__(self, actor):
        self.actor = actor

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------
    def get_queryset(self):
        """Every record of the model, with the relations the serializer reads."""
        return self.model.objects.all()

    def scope_queryset(self, queryset):
        """Narrow ``queryset`` to the rows the actor may see."""
        return queryset

    def check_object(self, instance, operation):
        """Raise ``PermissionDenied`` when the actor may not touch ``instance``."""

    def get_serializer(self, *args, **kwargs):
        kwargs.setdefault('context', {'actor': self.actor})
        return self.serializer_class(*args, **kwargs)

    def validate_create(self, data):
        return data

    def validate_update(self, instance, data):
        return data

    def perform_create(self, serializer):
        return serializer.save()

    def perform_update(self, serializer):
        return serializer.save()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def deny(self):
        raise PermissionDenied(FORBIDDEN_MESSAGE)

    def get_object(self, pk, operation):
        try:
            instance = self.get_queryset().get(pk=pk)
        except (self.model.DoesNotExist, DjangoValidationError, ValueError):
            raise NotFound('%s %s does not exist' % (self.model.__name__, pk))
        self.check_object(instance, operation)
        return instance

    def canonical(self, instance):
        """Reload ``instance`` with its relations and serialize it."""
        return self.get_serializer(self.get_queryset().get(pk=instance.pk)).data

    def _write(self, func, *args):
        try:
            with transaction.atomic():
                return func(*args)
        except ProtectedError:
            raise Conflict(self.protected_message)
        except IntegrityError as exc:
            logger.info("Integrity error on %s: %s", self.resource.value, exc)
            raise Conflict(self.conflict_message)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def list(self):
        authorize(self.actor, self.resource, Operation.LIST)
        queryset = self.scope_queryset(self.get_queryset())
        return self.get_serializer(queryset, many=True).data

    def get(self, pk):
        authorize(self.actor, self.resource, Operation.READ)
        return self.get_serializer(self.get_object(pk, Operation.READ)).data

    def create(self, data):
        authorize(self.actor, self.resource, Operation.CREATE)
        data = self.validate_create(data)
        serializer = self.get_serializer(data=data)
        serializer.is_valid(raise_exception=True)
        instance = self._write(self.perform_create, serializer)
        logger.info("Created %s %s (actor=%s)", self.resource.value, instance.pk, self.actor.pk)
        return self.canonical(instance)

    def update(self, pk, data):
        authorize(self.actor, self.resource, Operation.UPDATE)
        instance = self.get_object(pk, Operation.UPDATE)
        data = self.validate_update(instance, data)
        serializer = self.get_serializer(instance, data=data, partial=True)
        serializer.is_valid(raise_exception=True)
        instance = self._write(self.perform_update, serializer)
        logger.info("Updated %s %s (actor=%s)", self.resource.value, instance.pk, self.actor.pk)
        return self.canonical(instance)

    def delete(self, pk):
        authorize(self.actor, self.resource, Operation.DELETE)
        instance = self.get_object(pk, Operation.DELETE)
        record_id = instance.pk
        self._write(instance.delete)
        logger.info("Deleted %s %s (actor=%s)", self.resource.value, record_id, self.actor.pk)
