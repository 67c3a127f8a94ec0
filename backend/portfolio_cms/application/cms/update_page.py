from typing import Any, Dict
from portfolio_cms.domain.invariants.page import assert_page_content
from portfolio_cms.models.page import Page
from portfolio_cms.utils.media import prune_orphans, row_upload_paths
from portfolio_cms.utils.transaction import transactional


def update_page(*, slug: str, data: Dict[str, Any]) -> int:
    """
    Replace a page's title and content.

    The content must match the variant of the page's slug. Pages are
    only ever seeded, so an unknown slug changes nothing.
    """
    assert_page_content(slug, data.get("content"))

    page = Page.query.filter_by(slug=slug).first()
    if page is None:
        return 0

    previous_uploads = row_upload_paths(page)

    with transactional():
        page.assign(data)

    prune_orphans(previous_uploads - row_upload_paths(page))

    return 1
