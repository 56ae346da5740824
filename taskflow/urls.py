# taskflow/urls.py
from django.urls import include, path

urlpatterns = [
    path('api/', include('taskflow_user.urls')),
    path('api/', include('taskflow_app.urls')),
]
