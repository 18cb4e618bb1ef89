"""
Session guard shared by the route modules.

A request counts as logged in when its session holds a truthy "user_id".
Routes that need a login declare `Depends(require_logged_in)`; an anonymous
request raises LoginRequired before the handler body runs, and the handler
registered in main.py turns that into a redirect to the login form.
"""

import logging

from fastapi import Request
from fastapi.responses import RedirectResponse

logger = logging.getLogger(__name__)

LOGIN_PATH = "/sessions/new"
SESSION_KEY = "user_id"


class LoginRequired(Exception):
    """Raised by the guard to stop a handler and send the client to the login form."""

    def __init__(self, location: str = LOGIN_PATH):
        super().__init__(location)
        self.location = location


def is_authenticated(request: Request) -> bool:
    return bool(request.session.get(SESSION_KEY))


def require_logged_in(request: Request) -> None:
    if not is_authenticated(request):
        logger.info("Anonymous request to %s, redirecting to login", request.url.path)
        raise LoginRequired()


def redirect_to(request: Request, path: str) -> RedirectResponse:
    # 303 makes the client follow a POST with a GET; plain GETs keep 302
    if request.method != "GET" and request.scope.get("http_version") != "1.0":
        status_code = 303
    else:
        status_code = 302
    return RedirectResponse(url=path, status_code=status_code)


async def login_required_handler(request: Request, exc: LoginRequired) -> RedirectResponse:
    return redirect_to(request, exc.location)
