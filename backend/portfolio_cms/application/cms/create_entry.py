from typing import Any, Callable, Dict, Type
from sqlalchemy.exc import IntegrityError
from portfolio_cms.domain.invariants.exceptions import SlugConflict
from portfolio_cms.extensions import db
from portfolio_cms.models.base import BaseModel
from portfolio_cms.utils.transaction import transactional


def create_entry(
    *,
    model: Type[BaseModel],
    data: Dict[str, Any],
    validate: Callable[[Dict[str, Any]], None],
) -> BaseModel:
    """
    Insert a project or blog post.

    Edge cases handled:
    - Missing required fields (validator raises InvariantViolation)
    - Duplicate slug
    - Absent list fields stored as empty lists
    """
    validate(data)

    entry = model()
    entry.assign(data)

    try:
        with transactional():
            db.session.add(entry)
            db.session.flush()  # ensures entry.id exists

        return entry

    except IntegrityError as exc:
        # Unique constraint on slug
        raise SlugConflict(
            f"A {model.LABEL.lower()} with slug '{data.get('slug')}' already exists."
        ) from exc
