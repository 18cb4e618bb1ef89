from dotenv import load_dotenv
load_dotenv()

import logging
import os
from typing import Optional

import uvicorn
from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from config import Settings, load_settings
from helpers import LoginRequired, login_required_handler
from routes import sessions, secrets

logger = logging.getLogger(__name__)

# uvicorn imports "main:app" from here
APP_DIR = os.path.dirname(os.path.abspath(__file__))


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Builds the app: cookie-backed sessions, both route groups and the
    redirect that backs the login guard.
    """
    if settings is None:
        settings = load_settings()

    app = FastAPI(title="Simple App", version="0.1.0")

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        session_cookie=settings.session_cookie,
        max_age=settings.session_max_age,
        same_site="lax",
        https_only=settings.session_https_only,
    )

    app.include_router(sessions.router)
    app.include_router(secrets.router)

    app.add_exception_handler(LoginRequired, login_required_handler)

    logger.debug("App created for APP_ENV=%s", settings.app_env)
    return app


settings = load_settings()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = create_app(settings)


def run():
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        app_dir=APP_DIR,
    )


if __name__ == "__main__":
    run()
