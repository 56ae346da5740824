from django.apps import AppConfig


class TaskflowAppConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'taskflow_app'
    verbose_name = 'Projects and tasks'
