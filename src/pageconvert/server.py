"""Reverse service: a FastAPI app that echoes `first_name` back reversed."""

from __future__ import annotations

from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, PlainTextResponse

from pageconvert import __version__
from pageconvert.dependencies import ensure_server_dependencies
from pageconvert.logging import configure_logging, get_logger
from pageconvert.settings import Settings, get_settings
from pageconvert.typing.models import EchoRequest

logger = get_logger(__name__)

DEFAULT_USE_PAGE = Path(__file__).parent / "static" / "use.html"


def reverse_text(value: str) -> str:
    """Return the characters of `value` in reverse order."""
    return value[::-1]


async def read_echo_request(request: Request) -> EchoRequest:
    """Read `first_name` from a JSON body or from form data.

    Args:
        request (Request): Incoming request.

    Returns:
        EchoRequest: Parsed body; `first_name` is empty when absent.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        payload = await request.json()
        if not isinstance(payload, dict):
            return EchoRequest()
        return EchoRequest.model_validate(payload)

    form = await request.form()
    first_name = form.get("first_name")
    return EchoRequest(first_name=first_name if isinstance(first_name, str) else "")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the reverse service.

    Args:
        settings (Settings | None): Runtime settings; cached settings when omitted.

    Returns:
        FastAPI: Configured application.
    """
    config = settings or get_settings()
    use_page = config.use_page_path or DEFAULT_USE_PAGE

    app = FastAPI(title="pageconvert reverse service", version=__version__)

    @app.get("/use")
    def use_page_view() -> FileResponse:
        return FileResponse(use_page, media_type="text/html")

    @app.post("/user", response_class=PlainTextResponse)
    async def reverse_user(request: Request) -> str:
        body = await read_echo_request(request)
        logger.info("Received first_name", extra={"first_name": body.first_name})
        return reverse_text(body.first_name)

    return app


def main() -> None:
    """Serve the reverse service with uvicorn."""
    settings = get_settings()
    configure_logging(settings=settings)
    ensure_server_dependencies()

    app = create_app(settings)
    logger.info(
        f"Starting reverse service on http://{settings.server_host}:{settings.server_port}",
        extra={"host": settings.server_host, "port": settings.server_port},
    )
    uvicorn.run(app, host=settings.server_host, port=settings.server_port, log_config=None)


if __name__ == "__main__":
    main()
