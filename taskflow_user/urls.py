# taskflow_user/urls.py
from django.urls import path

from .views import UserDetailView, UserDirectoryView, UserListView

urlpatterns = [
    path('users/', UserListView.as_view(), name='user-list'),
    path('users/directory/', UserDirectoryView.as_view(), name='user-directory'),
    path('users/<str:pk>/', UserDetailView.as_view(), name='user-detail'),
]
