"""Greeter service.

This module provides :class:`Greeter`, the set of plain-text handlers served
by :mod:`apps.greeter.main`, and :func:`build_routes` which turns a greeter
into the explicit route table registered with the web application.  Handlers
are pure: the same inputs always produce the same body.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from lib.config.greeter_loader import GreeterConfig
from lib.contracts.settings import DEFAULT_NAME, DEFAULT_ROOT_MESSAGE
from lib.telemetry.logger import get_logger


logger = get_logger(__name__)

PONG = "pong"


@dataclass(frozen=True)
class Greeter:
    """Produce the response bodies for ``/``, ``/ping`` and ``/greet``."""

    root_message: str = DEFAULT_ROOT_MESSAGE
    default_name: str = DEFAULT_NAME

    @classmethod
    def from_config(cls, config: GreeterConfig) -> "Greeter":
        return cls(
            root_message=config.greeter.root_message,
            default_name=config.greeter.default_name,
        )

    def hello(self) -> str:
        """Return the fixed root greeting."""

        return self.root_message

    def ping(self) -> str:
        return PONG

    def resolve_name(self, name: Optional[str]) -> str:
        """Bind the ``name`` query parameter to its default.

        An absent parameter and an empty one (``?name=``) both resolve to
        :attr:`default_name`.  Any other value is used verbatim.
        """

        if not name:
            return self.default_name
        return name

    def greet(self, name: Optional[str] = None) -> str:
        """Return ``Hello, <name>!`` for the resolved ``name``."""

        resolved = self.resolve_name(name)
        logger.debug("greeting %r", resolved)
        return f"Hello, {resolved}!"


Handler = Callable[..., str]


def build_routes(greeter: Greeter) -> Dict[str, Handler]:
    """Return the exact-path route table for ``greeter``.

    Insertion order is the registration order.
    """

    return {
        "/": greeter.hello,
        "/ping": greeter.ping,
        "/greet": greeter.greet,
    }


__all__ = ["Greeter", "Handler", "build_routes", "PONG"]
