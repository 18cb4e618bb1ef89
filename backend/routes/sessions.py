import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from helpers import SESSION_KEY, redirect_to
from models.login import LoginSubmission
from views import templates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sessions"])


# ---------- Endpoints ----------

@router.get("/", response_class=HTMLResponse)
@router.get("/sessions/new", response_class=HTMLResponse)
async def show_login(request: Request):
    """Renders the login form. No guard, no side effects."""
    return templates.TemplateResponse(request, "login.html")


@router.post("/sessions")
async def receive_login(request: Request):
    """
    Stores the submitted user_id in the session and sends the client on to /secrets.
    The value is written verbatim: a missing field stores None, an empty one "".
    A file part named user_id counts as missing.
    """
    form = await request.form()
    user_id = form.get("user_id")
    if not isinstance(user_id, str):
        user_id = None
    submission = LoginSubmission(user_id=user_id)

    request.session[SESSION_KEY] = submission.user_id

    if submission.user_id:
        logger.info("Session login for user_id=%s", submission.user_id)
    else:
        logger.warning("Login submitted without a user_id, session stays anonymous")

    return redirect_to(request, "/secrets")
