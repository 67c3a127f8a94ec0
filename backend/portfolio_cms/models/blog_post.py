from portfolio_cms.extensions import db
from .base import BaseModel


class BlogPost(BaseModel):
    __tablename__ = "blog_posts"
    LABEL = "Post"

    slug = db.Column(db.String(200), nullable=False, unique=True, index=True)
    title = db.Column(db.String(200), nullable=False)
    date = db.Column(db.String(50))
    excerpt = db.Column(db.Text)
    tags = db.Column(db.JSON, default=list)
    content = db.Column(db.JSON, default=list)  # list of sections

    WRITABLE_FIELDS = ("slug", "title", "date", "excerpt", "tags", "content")
    JSON_FIELDS = {"tags": list, "content": list}

    def __repr__(self):
        return f"<BlogPost {self.slug}>"
