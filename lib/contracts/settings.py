"""Pydantic models describing ``greeter.yaml``."""
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_ROOT_MESSAGE = "Hello from REST API!"
DEFAULT_NAME = "Guest"


class _BaseStrictModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class GreeterSection(_BaseStrictModel):
    """Response texts served by the greeter routes."""

    root_message: str = DEFAULT_ROOT_MESSAGE
    default_name: str = DEFAULT_NAME


class ServerSection(_BaseStrictModel):
    """Where and how loudly ``uvicorn`` runs the app."""

    host: str = "127.0.0.1"
    port: int = Field(default=8080, ge=1, le=65535)
    log_level: Literal["critical", "error", "warning", "info", "debug"] = "info"
