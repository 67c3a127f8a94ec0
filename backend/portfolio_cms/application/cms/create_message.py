from typing import Any, Dict
from portfolio_cms.domain.invariants.message import assert_message
from portfolio_cms.extensions import db
from portfolio_cms.models.message import Message
from portfolio_cms.utils.transaction import transactional


def create_message(data: Dict[str, Any]) -> Message:
    """
    Store a contact request. The public form posts camelCase keys,
    snake_case is accepted too.
    """
    fields = {
        "project_description": data.get("projectDescription", data.get("project_description")),
        "contact_info": data.get("contactInfo", data.get("contact_info")),
    }
    assert_message(fields)

    message = Message()
    message.project_description = fields["project_description"]
    message.contact_info = fields["contact_info"]

    with transactional():
        db.session.add(message)
        db.session.flush()

    return message
