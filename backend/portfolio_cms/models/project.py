from portfolio_cms.extensions import db
from .base import BaseModel


class Project(BaseModel):
    __tablename__ = "projects"
    LABEL = "Project"

    slug = db.Column(db.String(200), nullable=False, unique=True, index=True)
    title = db.Column(db.String(200), nullable=False)
    year = db.Column(db.String(20))
    blurb = db.Column(db.Text)
    tags = db.Column(db.JSON, default=list)
    thumbnail = db.Column(db.String(512))
    images = db.Column(db.JSON, default=list)
    outcome = db.Column(db.Text)
    challenge = db.Column(db.Text)
    solution = db.Column(db.Text)
    content = db.Column(db.JSON, default=list)  # list of sections

    WRITABLE_FIELDS = (
        "slug", "title", "year", "blurb", "tags", "thumbnail",
        "images", "outcome", "challenge", "solution", "content",
    )
    JSON_FIELDS = {"tags": list, "images": list, "content": list}

    def __repr__(self):
        return f"<Project {self.slug}>"
