from flask import Blueprint

site_bp = Blueprint("site", __name__)

from . import filters
from . import views
