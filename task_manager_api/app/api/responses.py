"""Response helpers shared by the endpoint modules."""

from fastapi import status
from fastapi.responses import RedirectResponse


def see_other(url: str) -> RedirectResponse:
    """Redirect after a successful form POST (post/redirect/get)."""
    return RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)
