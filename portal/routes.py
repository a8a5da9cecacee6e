from functools import partial
from flask import Blueprint
from .views import render_view

bp = Blueprint("web", __name__)

# path -> view identifier; fixed at import time
VIEWS = {
    "/": "index",
    "/login": "login",
}

# Endpoints are named after their view (web.index, web.login).
# The login page is static; no credential handling lives here.
for path, view in VIEWS.items():
    bp.add_url_rule(path, view, partial(render_view, view), methods=["GET"])
