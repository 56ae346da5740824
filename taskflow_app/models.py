# taskflow_app/models.py
import uuid

from django.conf import settings
from django.db import models


class TaskPriority(models.TextChoices):
    LOW = 'low', 'Low'
    MEDIUM = 'medium', 'Medium'
    HIGH = 'high', 'High'


class TaskStatus(models.TextChoices):
    PENDING = 'Pending', 'Pending'
    IN_PROCESS = 'InProcess', 'In process'
    REVIEW = 'Review', 'Review'
    FINISHED = 'Finished', 'Finished'


class Color(models.TextChoices):
    GRAY = 'Gray', 'Gray'
    RED = 'Red', 'Red'
    ORANGE = 'Orange', 'Orange'
    YELLOW = 'Yellow', 'Yellow'
    GREEN = 'Green', 'Green'
    BLUE = 'Blue', 'Blue'
    PURPLE = 'Purple', 'Purple'
    PINK = 'Pink', 'Pink'


class Project(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    description = models.TextField(null=True, blank=True)
    assigned_to = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name='projects'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['created_at']

    def __str__(self):
        return self.name


class Label(models.Model):
    """Common shape of user-owned task labels (tags and categories)."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    color = models.CharField(max_length=10, choices=Color.choices, default=Color.GRAY)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ['created_at']

    def __str__(self):
        return self.name


class Tag(Label):
    # Owned labels block deletion of their owner.
    owner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name='tags')


class Category(Label):
    owner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name='categories')

    class Meta(Label.Meta):
        verbose_name_plural = 'categories'


class Task(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    description = models.TextField(null=True, blank=True)
    priority = models.CharField(max_length=10, choices=TaskPriority.choices, default=TaskPriority.LOW)
    status = models.CharField(max_length=10, choices=TaskStatus.choices, default=TaskStatus.PENDING)
    assigned_to = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name='tasks'
    )
    project = models.ForeignKey(
        Project, on_delete=models.SET_NULL, null=True, blank=True, related_name='tasks'
    )
    due_date = models.DateField(null=True, blank=True)
    tags = models.ManyToManyField(Tag, blank=True, related_name='tasks')
    categories = models.ManyToManyField(Category, blank=True, related_name='tasks')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['created_at']

    def __str__(self):
        return self.title
