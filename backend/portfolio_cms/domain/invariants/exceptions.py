class InvariantViolation(Exception):
    """Raised when submitted content breaks a domain rule (maps to 400)."""


class SlugConflict(Exception):
    """Raised when a slug is already taken by another row (maps to 409)."""
