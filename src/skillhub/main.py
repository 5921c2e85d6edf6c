"""FastAPI application entry point."""

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from skillhub.config import settings
from skillhub.errors import register_error_handlers
from skillhub.logging_config import configure_logging
from skillhub.routers import auth, skills, users


def create_app() -> FastAPI:
    """Build the application with logging, error handlers and routers."""
    configure_logging(settings)

    app = FastAPI(
        title="SkillHub API",
        description="Backend API for user accounts and personal skill tracking",
        version="0.1.0",
    )
    register_error_handlers(app)

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    def welcome() -> str:
        return "Welcome to SkillHub!"

    # Mount routers
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(skills.router)
    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run(
        "skillhub.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
