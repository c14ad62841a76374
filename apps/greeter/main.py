"""HTTP entry point for the greeter service.

Every route from :func:`apps.greeter.build_routes` is registered as a GET-only
endpoint answering ``text/plain``.  Unknown paths and other methods are left
to the framework, which replies 404 and 405 respectively.  The interactive
docs, the OpenAPI schema and trailing-slash redirects are switched off so
that only the exact route paths are served.
"""

from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from apps.greeter import Greeter, build_routes
from lib.config.greeter_loader import GreeterConfig, load_greeter_config
from lib.telemetry.logger import configure_logging, get_logger


logger = get_logger(__name__)


def create_app(config: Optional[GreeterConfig] = None) -> FastAPI:
    """Build the FastAPI application for ``config`` (loaded from disk if omitted)."""

    if config is None:
        config = load_greeter_config()
    greeter = Greeter.from_config(config)
    app = FastAPI(
        title="Greeter",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    routes = build_routes(greeter)
    for path, handler in routes.items():
        app.add_api_route(
            path,
            handler,
            methods=["GET"],
            response_class=PlainTextResponse,
        )
    app.state.greeter = greeter
    app.state.config = config
    app.state.routes = routes
    return app


def log_routes(app: FastAPI) -> None:
    for path, handler in app.state.routes.items():
        logger.info("registered GET %s -> %s", path, handler.__name__)


app = create_app()


def run(config: Optional[GreeterConfig] = None) -> None:
    """Serve the app with ``uvicorn`` on the configured host and port.

    Without ``config`` the module-level :data:`app` is served as is.
    """

    if config is None:
        target = app
        config = app.state.config
    else:
        target = create_app(config)
    server = config.server
    configure_logging(server.log_level)
    log_routes(target)
    uvicorn.run(
        target,
        host=server.host,
        port=server.port,
        log_level=server.log_level,
    )


if __name__ == "__main__":
    run()
