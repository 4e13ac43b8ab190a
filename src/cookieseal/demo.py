"""Demo ASGI application storing a person record in a protected cookie.

Run it with any ASGI server, for example::

    COOKIESEAL_SECRET_KEY=13d6b4dff8f84a10851021ec8608f814570d562c92fe6b5ec4c9f595bcb3234b \
        uvicorn --factory cookieseal.demo:create_app_from_env
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from dataclasses import asdict, dataclass
from typing import Any

from .client import SecureCookies
from .config import CookieConfig
from .errors import CookieNotFoundError, InvalidValueError
from .http.asgi import AsgiCookieTransport
from .types import Level

logger = logging.getLogger("cookieseal")

COOKIE_NAME = "exampleCookie"

Receive = Callable[[], Awaitable[dict[str, Any]]]
Send = Callable[[dict[str, Any]], Awaitable[None]]
ASGIApp = Callable[[dict[str, Any], Receive, Send], Awaitable[None]]


@dataclass
class Person:
    """Example payload stored in the cookie."""

    name: str
    age: int
    height: float
    hair_color: str

    def to_bytes(self) -> bytes:
        return json.dumps(asdict(self), separators=(",", ":")).encode("utf-8")

    @classmethod
    def from_bytes(cls, data: bytes) -> Person:
        return cls(**json.loads(data.decode("utf-8")))


DEFAULT_PERSON = Person(name="Kevin", age=23, height=5.9, hair_color="black")


def create_app(
    config: CookieConfig,
    level: Level = Level.SIGNED,
    person: Person = DEFAULT_PERSON,
) -> ASGIApp:
    """Create the demo application.

    Routes:
        GET /set: store ``person`` in ``exampleCookie``.
        GET /get: read it back and print its fields.

    Args:
        config: Key and default cookie attributes.
        level: Trust level used for the cookie.
        person: Record written by ``/set``.
    """
    secure_cookies = SecureCookies(config)

    async def set_cookie_handler(transport: AsgiCookieTransport) -> tuple[int, str]:
        secure_cookies.set(
            transport,
            COOKIE_NAME,
            person.to_bytes(),
            level,
            path="/",
            max_age=3600,
            http_only=True,
            secure=True,
        )
        return 200, "cookie set!"

    async def get_cookie_handler(transport: AsgiCookieTransport) -> tuple[int, str]:
        try:
            data = secure_cookies.get(transport, COOKIE_NAME, level)
        except CookieNotFoundError:
            return 400, "cookie not found"
        except InvalidValueError:
            return 400, "invalid cookie"

        try:
            stored = Person.from_bytes(data)
        except (ValueError, TypeError) as e:
            logger.warning("Failed to decode stored person: %s", e)
            return 500, "server error"

        return 200, (
            f"Name: {json.dumps(stored.name)}\n"
            f"Age: {stored.age}\n"
            f"Height: {stored.height}\n"
            f"Haircolor: {json.dumps(stored.hair_color)}\n"
        )

    routes = {
        "/set": set_cookie_handler,
        "/get": get_cookie_handler,
    }

    async def app(scope: dict[str, Any], receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            return

        transport = AsgiCookieTransport(scope)
        handler = routes.get(scope["path"])
        if handler is None:
            status, body = 404, "not found"
        else:
            try:
                status, body = await handler(transport)
            except Exception:
                logger.exception("Error handling %s", scope["path"])
                transport.response_headers.clear()
                status, body = 500, "server error"

        payload = body.encode("utf-8")
        await send(
            {
                "type": "http.response.start",
                "status": status,
                "headers": [
                    (b"content-type", b"text/plain; charset=utf-8"),
                    (b"content-length", str(len(payload)).encode("ascii")),
                    *transport.response_headers,
                ],
            }
        )
        await send({"type": "http.response.body", "body": payload})

    return app


def create_app_from_env() -> ASGIApp:
    """Create the demo application configured from ``COOKIESEAL_*`` variables."""
    return create_app(CookieConfig.from_env(), level=Level.ENCRYPTED)
