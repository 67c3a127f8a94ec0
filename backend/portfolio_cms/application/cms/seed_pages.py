import copy
from portfolio_cms.domain.page_content import DEFAULT_PAGES
from portfolio_cms.extensions import db
from portfolio_cms.models.page import Page
from portfolio_cms.utils.transaction import transactional


def seed_pages() -> int:
    """
    Insert the default home/about/contact pages that are missing.
    Existing pages are left untouched. Returns how many were created.
    """
    created = 0

    with transactional():
        for slug, title, content in DEFAULT_PAGES:
            if Page.query.filter_by(slug=slug).first():
                continue

            page = Page()
            page.slug = slug
            page.title = title
            page.content = copy.deepcopy(content)
            db.session.add(page)
            created += 1

    return created
