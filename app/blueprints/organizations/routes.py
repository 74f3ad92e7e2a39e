"""
Routes for the organizations blueprint.
"""

from flask import current_app, render_template

from app.blueprints.organizations import bp
from app.services import organization_service
from app.services.pagination import PageState


def render_organizations_page():
    """
    Load the first page and render the directory from its page state.

    Shared by ``/`` and ``/organizations``.
    """
    page_size = current_app.config["ORGANIZATIONS_PAGE_SIZE"]
    result = organization_service.load_organizations(page_size=page_size)
    state = PageState.from_loader(result, page_size=page_size)
    return render_template(
        "organizations/index.html",
        state=state,
        resource_url=current_app.config["ORGANIZATIONS_RESOURCE_URL"],
    )


@bp.route("")
@bp.route("/")
def index():
    """List organizations, ten per page, ordered by name."""
    return render_organizations_page()
