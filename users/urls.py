"""
users/urls.py

HTML screen + JSON API for user records.
Included from the root urls.py (screen at /users/, API under /api/).
"""
from django.urls import path

from .views import UserListActionView, users_page


urlpatterns = [
    path("users/", users_page, name="users-page"),
    path("api/users/", UserListActionView.as_view(), name="users-api"),
]
