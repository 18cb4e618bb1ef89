from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from helpers import SESSION_KEY, require_logged_in
from views import templates

router = APIRouter(tags=["secrets"])


@router.get("/secrets", response_class=HTMLResponse, dependencies=[Depends(require_logged_in)])
async def show_secrets(request: Request):
    """Protected page; anonymous clients are redirected by the guard before this runs."""
    return templates.TemplateResponse(
        request, "secrets.html", {"user_id": request.session[SESSION_KEY]}
    )
