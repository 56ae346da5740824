from django.apps import AppConfig


class TaskflowUserConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'taskflow_user'
    verbose_name = 'Users'
