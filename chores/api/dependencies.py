from fastapi import Request

from chores.domain.Household import Household


def get_household(request: Request) -> Household:
    """The Household owned by the running app (set up in create_app)."""
    return request.app.state.household
