"""
Keep-alive web server for hosted deployments.
Exposes the client's status over HTTP.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from command_client import __version__
from command_client.bot.config import Config, config
from command_client.utils.logger import get_logger

logger = get_logger("KeepAlive")

# Track bot status
_bot_status = {
    "status": "starting",
    "discord_connected": False,
}

# Client whose registry and monitoring are reported
_client: Optional[Any] = None


def update_bot_status(**kwargs) -> None:
    """Update bot status for health endpoint."""
    _bot_status.update(kwargs)


def attach_client(client: Any) -> None:
    """Report the given client's commands and metrics."""
    global _client
    _client = client


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown events."""
    logger.info("Keep-alive server starting...")
    yield
    logger.info("Keep-alive server shutting down...")


app = FastAPI(
    title="Command Client",
    description="Discord command client keep-alive server",
    version=__version__,
    lifespan=lifespan,
)


@app.get("/")
async def root():
    return {
        "name": "Command Client",
        "version": __version__,
        "status": _bot_status.get("status", "unknown"),
    }


@app.get("/health")
async def health():
    """Health check endpoint for monitoring."""
    connected = bool(_bot_status.get("discord_connected"))
    content = {
        "status": "healthy" if connected else "degraded",
        "discord": "connected" if connected else "disconnected",
    }

    if _client is not None:
        content["commands"] = len(_client.registry)
        monitoring = getattr(_client, "monitoring", None)
        if monitoring:
            content["metrics"] = monitoring.get_app_metrics()
            content["system"] = monitoring.get_system_metrics()

    return JSONResponse(status_code=200 if connected else 503, content=content)


@app.get("/ping")
async def ping():
    return {"pong": True}


async def start_server(settings: Config = config) -> None:
    """Start the keep-alive server."""
    import uvicorn

    config_uvicorn = uvicorn.Config(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level="warning",
        access_log=False,
    )
    server = uvicorn.Server(config_uvicorn)

    logger.info(f"Keep-alive server listening on port {settings.PORT}")
    await server.serve()


def run_server(settings: Config = config) -> asyncio.Task:
    """Run server in background task."""
    return asyncio.create_task(start_server(settings))
