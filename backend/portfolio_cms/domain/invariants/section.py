from .exceptions import InvariantViolation

SECTION_FIELDS = ("title", "subtitle", "body", "imageUrl")


def assert_section(section, index):
    if not isinstance(section, dict):
        raise InvariantViolation(f"content[{index}] must be an object.")

    for field in SECTION_FIELDS:
        value = section.get(field)
        if value is not None and not isinstance(value, str):
            raise InvariantViolation(f"content[{index}].{field} must be a string.")


def assert_sections(sections):
    if sections is None:
        return

    if not isinstance(sections, list):
        raise InvariantViolation("content must be a list of sections.")

    for index, section in enumerate(sections):
        assert_section(section, index)
