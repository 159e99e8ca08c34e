"""
users/views.py — Users screen (HTML) and JSON API for Roster

Purpose
===============================================================================
Both surfaces share the same two collaborators:
- users.loaders.load_users()   → read side, skills normalized to a list
- users.actions.dispatch()     → write side, one intent per request

HTML screen
- GET  /users/            form (from users.form_config.FORM_FIELDS) + table
- GET  /users/?edit=<id>  same page, form pre-filled with that record
- POST /users/            dispatch, then re-render with the result banner and
                          the result's status code. Success resets the form.

JSON API
- GET  /api/users/        full list (no pagination); ?gender=, ?search=,
                          ?ordering= are optional narrowing helpers
- POST /api/users/        form-encoded/multipart write with `_intent`;
                          {"success": msg} or {"error": msg[, "fields": [...]]}

There is no authorization model: every endpoint is AllowAny.
"""

from django.shortcuts import render
from django.utils.html import format_html
from django_filters import rest_framework as dj_filters
from rest_framework import filters, generics, permissions
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response

from drf_yasg import openapi
from drf_yasg.utils import swagger_auto_schema

from .actions import INTENT_CREATE, INTENT_UPDATE, dispatch, get_list
from .form_config import FORM_FIELDS
from .loaders import load_users
from .models import UserRecord
from .serializers import UserRecordSerializer
from .tables import Column, build_table


# ----------------------------------------------------------------------------- #
# Table columns                                                                 #
# ----------------------------------------------------------------------------- #

def _render_skills(user):
    skills = user.get("skills")
    return ",".join(skills) if isinstance(skills, list) else "No Skills"


def _render_picture(user):
    if user.get("profilePic"):
        return format_html('<img src="{}" alt="Profile" class="avatar">', user["profilePic"])
    return "No Image"


USER_COLUMNS = [
    Column("name", "Name"),
    Column("email", "Email"),
    Column("age", "Age"),
    Column("dob", "DOB"),
    Column("gender", "Gender"),
    Column("skills", "Skills", render=_render_skills),
    Column("bio", "Bio"),
    Column("profilePic", "Profile Picture", render=_render_picture),
]


def _row_actions(user):
    return {"id": user["id"], "edit_query": f"?edit={user['id']}"}


# ----------------------------------------------------------------------------- #
# HTML screen                                                                   #
# ----------------------------------------------------------------------------- #

def _editing_record(request):
    """Record selected with ?edit=<id>, as a loader-shaped dict, or None."""
    raw = request.GET.get("edit")
    if not raw or not raw.isdecimal():
        return None
    rows = load_users(UserRecord.objects.filter(pk=int(raw)))
    return rows[0] if rows else None


def _form_rows(editing, submitted=None):
    """
    Pair every catalog field with the value to show in its input.

    After a failed submission the submitted values are shown again; otherwise
    the record being edited (if any) provides them.
    """
    source = {}
    if submitted is not None:
        source = {field.name: submitted.get(field.name, "") for field in FORM_FIELDS}
        source["skills"] = get_list(submitted, "skills")
    elif editing is not None:
        source = editing

    form_rows = []
    for field in FORM_FIELDS:
        value = source.get(field.name)
        form_rows.append({
            "field": field,
            "value": "" if value is None else value,
            "selected": value if isinstance(value, list) else [],
        })
    return form_rows


def users_page(request):
    result = None
    editing = None
    submitted = None

    if request.method == "POST":
        result = dispatch(request.POST, request.FILES)
        if not result.ok:
            submitted = request.POST
            if request.POST.get("id"):
                editing = {"id": request.POST.get("id")}
    else:
        editing = _editing_record(request)

    users = load_users()
    context = {
        "result": result,
        "editing": editing,
        "intent": INTENT_UPDATE if editing else INTENT_CREATE,
        "form_rows": _form_rows(None if submitted is not None else editing, submitted),
        "table": build_table(users, USER_COLUMNS, actions=_row_actions),
        "actions_template": "users/_user_actions.html",
    }
    status_code = result.status_code if result is not None else 200
    return render(request, "users/users.html", context, status=status_code)


# ----------------------------------------------------------------------------- #
# JSON API                                                                      #
# ----------------------------------------------------------------------------- #

class UserRecordFilter(dj_filters.FilterSet):
    gender = dj_filters.CharFilter(field_name="gender", lookup_expr="iexact")

    class Meta:
        model = UserRecord
        fields = ["gender"]


class UserListActionView(generics.GenericAPIView):
    """
    GET lists every record; POST dispatches a create/update/delete intent.
    """
    permission_classes = [permissions.AllowAny]
    parser_classes = [FormParser, MultiPartParser, JSONParser]
    queryset = UserRecord.objects.all()
    serializer_class = UserRecordSerializer
    pagination_class = None

    filter_backends = [dj_filters.DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_class = UserRecordFilter
    search_fields = ["name", "email", "bio"]
    ordering_fields = ["id", "name", "age", "dob"]
    ordering = ["id"]

    _intent_props = {
        "_intent": openapi.Schema(type=openapi.TYPE_STRING, enum=["create", "update", "delete"]),
        "id": openapi.Schema(type=openapi.TYPE_INTEGER, description="Required for update and delete."),
        "name": openapi.Schema(type=openapi.TYPE_STRING),
        "email": openapi.Schema(type=openapi.TYPE_STRING, description="Unique across all records."),
        "age": openapi.Schema(type=openapi.TYPE_INTEGER),
        "dob": openapi.Schema(type=openapi.TYPE_STRING, format="date"),
        "gender": openapi.Schema(type=openapi.TYPE_STRING, enum=["Male", "Female", "Others"]),
        "skills": openapi.Schema(
            type=openapi.TYPE_ARRAY, items=openapi.Schema(type=openapi.TYPE_STRING),
            description="Repeat the key once per selected skill.",
        ),
        "bio": openapi.Schema(type=openapi.TYPE_STRING),
    }
    _result_schema = openapi.Schema(
        type=openapi.TYPE_OBJECT,
        properties={
            "success": openapi.Schema(type=openapi.TYPE_STRING),
            "error": openapi.Schema(type=openapi.TYPE_STRING),
            "fields": openapi.Schema(type=openapi.TYPE_ARRAY, items=openapi.Schema(type=openapi.TYPE_STRING)),
        },
    )

    @swagger_auto_schema(
        tags=["Users"],
        operation_description=(
            "List every user record. `skills` is always an array.\n\n"
            "- `?gender=<Male|Female|Others>` (case-insensitive)\n"
            "- `?search=<text>` across name, email, bio\n"
            "- `?ordering=id | name | age | dob` (prefix `-` for descending)"
        ),
        responses={200: openapi.Response("OK", UserRecordSerializer(many=True))},
    )
    def get(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        return Response(load_users(queryset))

    @swagger_auto_schema(
        tags=["Users"],
        operation_description=(
            "Create, update or delete a user, selected by `_intent`.\n\n"
            "- create: name, email, age, dob, gender, skills, bio, optional `profilePic` file\n"
            "- update: id + the same fields (profilePic is not changed)\n"
            "- delete: id (deleting an absent id still succeeds)"
        ),
        request_body=openapi.Schema(type=openapi.TYPE_OBJECT, properties=_intent_props, required=["_intent"]),
        responses={
            200: openapi.Response("OK", _result_schema),
            201: openapi.Response("Created", _result_schema),
            400: "Validation failure or invalid action",
            404: "Not Found (update)",
            409: "Email already in use",
            500: "Unexpected failure",
        },
    )
    def post(self, request, *args, **kwargs):
        result = dispatch(request.data, request.FILES)
        return Response(result.as_payload(), status=result.status_code)
