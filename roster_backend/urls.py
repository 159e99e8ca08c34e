"""
urls.py — Root URL configuration for Roster

Purpose
===============================================================================
- Wire Django admin, the users screen and its JSON API.
- Serve uploaded profile pictures (/uploads/) in development.
- Provide interactive API docs:
    * /api/docs/   → Swagger UI
    * /api/schema/ → OpenAPI JSON (machine-readable)

Notes
- "/" redirects to the users screen; it is the only screen in the app.
- Swagger UI documents the `_intent` contract of POST /api/users/.
"""

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.shortcuts import redirect
from django.urls import include, path
from rest_framework import permissions

from drf_yasg.views import get_schema_view
from drf_yasg import openapi

# ----------------------------------------------------------------------------- #
# API Docs (Swagger/OpenAPI via drf-yasg)                                       #
# ----------------------------------------------------------------------------- #
schema_view = get_schema_view(
    openapi.Info(
        title="Roster API",
        default_version="v1",
        description=(
            "Read and write user records.\n\n"
            "- GET /api/users/  → every record, skills always an array\n"
            "- POST /api/users/ → form-encoded write selected by `_intent` "
            "(create | update | delete)"
        ),
    ),
    public=True,
    permission_classes=[permissions.AllowAny],
)

# ----------------------------------------------------------------------------- #
# URL Patterns                                                                  #
# ----------------------------------------------------------------------------- #
urlpatterns = [
    path("", lambda r: redirect("users-page"), name="root-redirect"),

    path("admin/", admin.site.urls),

    path("", include("users.urls")),

    # API docs
    path("api/docs/",   schema_view.with_ui("swagger", cache_timeout=0), name="api-docs-swagger"),
    path("api/schema/", schema_view.without_ui(cache_timeout=0),         name="openapi-schema"),
]

# Dev-only serving of uploaded pictures (public/uploads/ at /uploads/)
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
