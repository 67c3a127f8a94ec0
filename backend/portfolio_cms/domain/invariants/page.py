from typing import get_args, get_origin, get_type_hints, is_typeddict

from portfolio_cms.domain.page_content import PAGE_VARIANTS
from .exceptions import InvariantViolation


def _assert_shape(value, expected, path):
    if is_typeddict(expected):
        if not isinstance(value, dict):
            raise InvariantViolation(f"{path} must be an object.")

        for key, hint in get_type_hints(expected).items():
            if key not in value:
                raise InvariantViolation(f"{path}.{key} is missing.")
            _assert_shape(value[key], hint, f"{path}.{key}")
        return

    if get_origin(expected) is list:
        if not isinstance(value, list):
            raise InvariantViolation(f"{path} must be a list.")
        (item_type,) = get_args(expected)
        for index, item in enumerate(value):
            _assert_shape(item, item_type, f"{path}[{index}]")
        return

    # bool is an int subclass but never a valid id
    if expected is int and isinstance(value, bool):
        raise InvariantViolation(f"{path} must be an integer.")

    if not isinstance(value, expected):
        raise InvariantViolation(f"{path} must be of type {expected.__name__}.")


def assert_page_content(slug, content):
    """
    Check ``content`` against the variant owned by ``slug``.
    Unknown keys are kept, missing or mistyped ones are rejected.
    """
    variant = PAGE_VARIANTS.get(slug)
    if variant is None:
        return

    _assert_shape(content, variant, "content")
