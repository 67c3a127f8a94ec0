from typing import Any, Callable, Dict, Type
from sqlalchemy.exc import IntegrityError
from portfolio_cms.domain.invariants.exceptions import SlugConflict
from portfolio_cms.extensions import db
from portfolio_cms.models.base import BaseModel
from portfolio_cms.utils.media import prune_orphans, row_upload_paths
from portfolio_cms.utils.transaction import transactional


def update_entry(
    *,
    model: Type[BaseModel],
    entry_id: int,
    data: Dict[str, Any],
    validate: Callable[[Dict[str, Any]], None],
) -> int:
    """
    Full-row replace of a project or blog post.

    Returns the number of rows changed: 0 means the id does not exist,
    which callers report as a normal response rather than an error.
    Uploads the old row referenced and nothing references anymore are
    pruned after the commit.
    """
    validate(data)

    entry = db.session.get(model, entry_id)
    if entry is None:
        return 0

    previous_uploads = row_upload_paths(entry)

    try:
        with transactional():
            entry.assign(data)

    except IntegrityError as exc:
        raise SlugConflict(
            f"A {model.LABEL.lower()} with slug '{data.get('slug')}' already exists."
        ) from exc

    prune_orphans(previous_uploads - row_upload_paths(entry))

    return 1
