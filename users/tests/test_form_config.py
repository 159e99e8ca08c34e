import dataclasses

import pytest
from django.template.loader import get_template

from users.form_config import FORM_FIELDS, MultiChoiceField, SingleChoiceField

BY_NAME = {f.name: f for f in FORM_FIELDS}


def test_catalog_order_and_kinds():
    assert [f.name for f in FORM_FIELDS] == [
        "name", "email", "age", "dob", "profilePic", "gender", "skills", "bio",
    ]
    assert [f.kind for f in FORM_FIELDS] == [
        "text", "email", "number", "date", "file", "radio", "checkbox", "textarea",
    ]


def test_every_kind_has_a_field_template():
    for f in FORM_FIELDS:
        assert get_template(f"users/fields/{f.kind}.html")


def test_only_choice_fields_carry_options():
    for f in FORM_FIELDS:
        names = {fld.name for fld in dataclasses.fields(f)}
        if isinstance(f, (SingleChoiceField, MultiChoiceField)):
            assert "options" in names
            assert f.options
        else:
            assert names == {"name", "label"}


def test_choice_options():
    assert BY_NAME["gender"].options == ("Male", "Female", "Others")
    assert BY_NAME["skills"].options == ("JS", "Python", "Java")


def test_descriptors_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        BY_NAME["name"].label = "Full name"
