"""
users/form_config.py — Field catalog for the users form

Ordered, purely descriptive list of the editable attributes of a UserRecord.
The users page renders one input per entry; nothing else reads it and no
validation lives here.

Each kind is its own variant carrying only the data it needs: the two choice
kinds hold their option list, the rest hold just name + label. The template
branches on `kind`, and `input_type` is the HTML <input type> for the plain
single-line kinds.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional

from django.conf import settings


@dataclass(frozen=True)
class FormField:
    name: str
    label: str

    kind: ClassVar[str] = ""
    input_type: ClassVar[Optional[str]] = None


@dataclass(frozen=True)
class TextField(FormField):
    kind: ClassVar[str] = "text"
    input_type: ClassVar[Optional[str]] = "text"


@dataclass(frozen=True)
class EmailField(FormField):
    kind: ClassVar[str] = "email"
    input_type: ClassVar[Optional[str]] = "email"


@dataclass(frozen=True)
class NumberField(FormField):
    kind: ClassVar[str] = "number"
    input_type: ClassVar[Optional[str]] = "number"


@dataclass(frozen=True)
class DateField(FormField):
    kind: ClassVar[str] = "date"
    input_type: ClassVar[Optional[str]] = "date"


@dataclass(frozen=True)
class FileField(FormField):
    kind: ClassVar[str] = "file"
    accept: ClassVar[str] = "image/*"


@dataclass(frozen=True)
class TextAreaField(FormField):
    kind: ClassVar[str] = "textarea"


@dataclass(frozen=True)
class SingleChoiceField(FormField):
    options: tuple = ()

    kind: ClassVar[str] = "radio"


@dataclass(frozen=True)
class MultiChoiceField(FormField):
    options: tuple = ()

    kind: ClassVar[str] = "checkbox"


FORM_FIELDS = (
    TextField("name", "Name"),
    EmailField("email", "Email"),
    NumberField("age", "Age"),
    DateField("dob", "Date of Birth"),
    FileField("profilePic", "Profile Picture"),
    SingleChoiceField("gender", "Gender", options=tuple(settings.ROSTER_GENDER_OPTIONS)),
    MultiChoiceField("skills", "Skills", options=tuple(settings.ROSTER_SKILL_OPTIONS)),
    TextAreaField("bio", "Bio"),
)
