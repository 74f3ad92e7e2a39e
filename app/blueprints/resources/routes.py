"""
Routes for the resources blueprint.
"""

from flask import current_app, jsonify, request

from app.blueprints.resources import bp
from app.services import organization_service


# Every common method is routed here so that non-POST requests get the
# JSON 405 body from the handler.  Flask's automatic OPTIONS reply is
# turned off for the same reason; anything else is caught by the app's
# 405 handler.
@bp.route(
    "/organizations",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    provide_automatic_options=False,
)
def organizations():
    """
    Return one page of organizations for the directory's pager.

    Form fields ``limit`` and ``offset`` select the page.
    """
    body, status = organization_service.handle_organizations_action(
        request.method,
        request.form,
        page_size=current_app.config["ORGANIZATIONS_PAGE_SIZE"],
    )
    return jsonify(body), status
