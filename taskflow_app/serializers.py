# taskflow_app/serializers.py
from django.contrib.auth import get_user_model
from rest_framework import serializers

from taskflow_user.serializers import UserSummarySerializer
from .models import Category, Project, Tag, Task

User = get_user_model()


class ProjectSerializer(serializers.ModelSerializer):
    assigned_to = UserSummarySerializer(read_only=True)
    assigned_to_id = serializers.PrimaryKeyRelatedField(
        source='assigned_to',
        queryset=User.objects.all(),
        allow_null=True,
        required=False,
        write_only=True,
    )

    class Meta:
        model = Project
        fields = ['id', 'name', 'description', 'assigned_to', 'assigned_to_id', 'created_at', 'updated_at']
        extra_kwargs = {'description': {'required': False, 'allow_null': True, 'allow_blank': True}}


class ProjectSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Project
        fields = ['id', 'name']
        read_only_fields = fields


class LabelSummarySerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)
    color = serializers.CharField(read_only=True)


class TagSerializer(serializers.ModelSerializer):
    owner = UserSummarySerializer(read_only=True)

    class Meta:
        model = Tag
        fields = ['id', 'name', 'color', 'owner', 'created_at', 'updated_at']


class CategorySerializer(serializers.ModelSerializer):
    owner = UserSummarySerializer(read_only=True)

    class Meta:
        model = Category
        fields = ['id', 'name', 'color', 'owner', 'created_at', 'updated_at']


class TaskSerializer(serializers.ModelSerializer):
    assigned_to = UserSummarySerializer(read_only=True)
    assigned_to_id = serializers.PrimaryKeyRelatedField(
        source='assigned_to',
        queryset=User.objects.all(),
        allow_null=True,
        required=False,
        write_only=True,
    )
    project = ProjectSummarySerializer(read_only=True)
    project_id = serializers.PrimaryKeyRelatedField(
        source='project',
        queryset=Project.objects.all(),
        allow_null=True,
        required=False,
        write_only=True,
    )
    tags = LabelSummarySerializer(many=True, read_only=True)
    tag_ids = serializers.PrimaryKeyRelatedField(
        source='tags', queryset=Tag.objects.all(), many=True, required=False, write_only=True
    )
    categories = LabelSummarySerializer(many=True, read_only=True)
    category_ids = serializers.PrimaryKeyRelatedField(
        source='categories', queryset=Category.objects.all(), many=True, required=False, write_only=True
    )

    class Meta:
        model = Task
        fields = [
            'id', 'title', 'description', 'priority', 'status', 'due_date',
            'assigned_to', 'assigned_to_id', 'project', 'project_id',
            'tags', 'tag_ids', 'categories', 'category_ids',
            'created_at', 'updated_at',
        ]
        extra_kwargs = {'description': {'required': False, 'allow_null': True, 'allow_blank': True}}

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        actor = self.context.get('actor')
        if actor is not None:
            # Only the caller's own labels can be attached.
            self.fields['tag_ids'].child_relation.queryset = Tag.objects.filter(owner=actor)
            self.fields['category_ids'].child_relation.queryset = Category.objects.filter(owner=actor)
