from flask import Blueprint, request
from portfolio_cms.domain.invariants.exceptions import InvariantViolation

api_bp = Blueprint("api", __name__)


def json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvariantViolation("Request body must be a JSON object.")
    return data


# Import route modules so they register with api_bp
from . import health
from . import auth
from . import projects
from . import posts
from . import pages
from . import messages
from . import uploads
