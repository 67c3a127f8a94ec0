def normalize_message(message):
    return {
        "id": message.id,
        "project_description": message.project_description,
        "contact_info": message.contact_info,
        "submitted_at": (
            message.submitted_at.isoformat() if message.submitted_at else None
        ),
    }
