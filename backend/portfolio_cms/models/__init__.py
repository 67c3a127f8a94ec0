from .project import Project
from .blog_post import BlogPost
from .page import Page
from .message import Message

__all__ = ["Project", "BlogPost", "Page", "Message"]
