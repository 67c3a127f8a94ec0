from .entry import assert_required_text


def assert_message(data):
    assert_required_text(data, "project_description", "contact_info")
