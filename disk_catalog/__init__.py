from flask import Blueprint

disk_catalog = Blueprint('disk_catalog', __name__)

from . import routes  # noqa: E402,F401
