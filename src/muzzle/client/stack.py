"""Composable request handlers.

A handler turns a request into a response. A middleware wraps a handler and
returns a new one. The stack composes named middleware around a single
innermost handler.
"""

from collections.abc import Callable
from functools import reduce

import httpx
from loguru import logger

from muzzle.exceptions import MuzzleError

__all__ = ["Handler", "HandlerStack", "Middleware"]

Handler = Callable[[httpx.Request], httpx.Response]
Middleware = Callable[[Handler], Handler]


class HandlerStack:
    """
    Named middleware around a handler.

    The first middleware pushed is the outermost one, so it sees the request
    first and the response last.
    """

    def __init__(self, handler: Handler | None = None) -> None:
        self._handler = handler
        self._stack: list[tuple[Middleware, str | None]] = []
        self._cached: Handler | None = None

    def set_handler(self, handler: Handler) -> None:
        self._handler = handler
        self._cached = None

    @property
    def handler(self) -> Handler | None:
        return self._handler

    def has_handler(self) -> bool:
        return self._handler is not None

    def push(self, middleware: Middleware, name: str | None = None) -> None:
        """Add a middleware inside every middleware already on the stack."""
        self._stack.append((middleware, name))
        self._cached = None
        logger.debug(f"Pushed middleware {name or middleware!r}")

    def unshift(self, middleware: Middleware, name: str | None = None) -> None:
        """Add a middleware outside every middleware already on the stack."""
        self._stack.insert(0, (middleware, name))
        self._cached = None

    def remove(self, remove: str | Middleware) -> None:
        """Remove middleware by name or by identity."""
        if isinstance(remove, str):
            kept = [entry for entry in self._stack if entry[1] != remove]
        else:
            kept = [entry for entry in self._stack if entry[0] is not remove]

        if len(kept) != len(self._stack):
            self._stack = kept
            self._cached = None
            logger.debug(f"Removed middleware {remove!r}")

    def names(self) -> list[str | None]:
        return [name for _, name in self._stack]

    def resolve(self) -> Handler:
        if self._cached is None:
            if self._handler is None:
                raise MuzzleError("No handler has been specified")
            self._cached = reduce(
                lambda handler, entry: entry[0](handler),
                reversed(self._stack),
                self._handler,
            )
        return self._cached

    def __call__(self, request: httpx.Request) -> httpx.Response:
        return self.resolve()(request)

    def __contains__(self, name: object) -> bool:
        return name in self.names()

    def __len__(self) -> int:
        return len(self._stack)

    def __repr__(self) -> str:
        entries = ", ".join(repr(name) for name in self.names())
        return f"HandlerStack(handler={self._handler!r}, middleware=[{entries}])"
