from portfolio_cms.extensions import db
from .base import BaseModel


class Page(BaseModel):
    __tablename__ = "pages"
    LABEL = "Page"

    slug = db.Column(db.String(50), nullable=False, unique=True, index=True)
    title = db.Column(db.String(200))
    # Shape depends on slug, see domain.page_content
    content = db.Column(db.JSON)

    WRITABLE_FIELDS = ("title", "content")

    def __repr__(self):
        return f"<Page {self.slug}>"
