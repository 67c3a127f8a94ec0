from datetime import datetime, timezone
from portfolio_cms.extensions import db
from .base import BaseModel


class Message(BaseModel):
    """Contact request left by a visitor. Never edited, only deleted."""
    __tablename__ = "messages"
    LABEL = "Message"

    project_description = db.Column(db.Text, nullable=False)
    contact_info = db.Column(db.Text, nullable=False)
    submitted_at = db.Column(
        db.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        index=True,
    )

    def __repr__(self):
        return f"<Message {self.id}>"
