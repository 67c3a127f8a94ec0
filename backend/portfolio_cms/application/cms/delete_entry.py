from typing import Type
from portfolio_cms.extensions import db
from portfolio_cms.models.base import BaseModel
from portfolio_cms.utils.media import prune_orphans, row_upload_paths
from portfolio_cms.utils.transaction import transactional


def delete_entry(*, model: Type[BaseModel], entry_id: int) -> int:
    """
    Hard-delete a row by id. Returns the number of rows removed.
    """
    entry = db.session.get(model, entry_id)
    if entry is None:
        return 0

    uploads = row_upload_paths(entry)

    with transactional():
        db.session.delete(entry)

    prune_orphans(uploads)

    return 1
