import re

from .exceptions import InvariantViolation
from .section import assert_sections

SLUG_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*$")


def assert_required_text(data, *fields):
    for field in fields:
        value = data.get(field)
        if not isinstance(value, str) or not value.strip():
            raise InvariantViolation(f"{field} is required.")


def assert_slug(slug):
    if not SLUG_PATTERN.match(slug):
        raise InvariantViolation(
            f"Slug '{slug}' may only contain letters, digits, '-' and '_'."
        )


def assert_string_list(data, field):
    value = data.get(field)
    if value is None:
        return

    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise InvariantViolation(f"{field} must be a list of strings.")


def assert_project(data):
    assert_required_text(data, "slug", "title")
    assert_slug(data["slug"])
    assert_string_list(data, "tags")
    assert_string_list(data, "images")
    assert_sections(data.get("content"))


def assert_post(data):
    assert_required_text(data, "slug", "title")
    assert_slug(data["slug"])
    assert_string_list(data, "tags")
    assert_sections(data.get("content"))
