from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Self

import httpx

from muzzle.assertions import assert_equals, assert_true
from muzzle.exceptions import MuzzleError
from muzzle.expectation import Expectation
from muzzle.messages.request import AssertableRequest
from muzzle.messages.response import AssertableResponse
from muzzle.messages.transaction import Transactions

from .handler import MockHandler
from .middleware import history as record_history
from .stack import HandlerStack, Middleware
from .transport import MuzzleTransport

if TYPE_CHECKING:
    from .builder import MuzzleBuilder

__all__ = ["Muzzle"]

# Options handed to httpx.Client at construction time.
CLIENT_OPTIONS: tuple[str, ...] = (
    "auth",
    "base_url",
    "cookies",
    "default_encoding",
    "event_hooks",
    "follow_redirects",
    "headers",
    "max_redirects",
    "params",
    "timeout",
)

# Options that can be changed on a live client.
MUTABLE_OPTIONS: tuple[str, ...] = (
    "auth",
    "base_url",
    "cookies",
    "follow_redirects",
    "headers",
    "params",
    "timeout",
)


class Muzzle(httpx.Client):
    """
    An ``httpx.Client`` that replays queued expectations instead of hitting the network.

    Every request passes through a handler stack: a ``history`` middleware
    records each transaction, and the innermost handler asserts the request
    against the next queued ``Expectation`` and returns its reply.

    Example:
        client = Muzzle()
        client.append(Expectation().method("POST").uri("https://example.com").reply_with(
            httpx.Response(201)
        ))
        client.post("https://example.com").assert_status(201)
    """

    def __init__(self, config: Mapping[str, Any] | None = None, **options: Any) -> None:
        self._config: dict[str, Any] = {**(config or {}), **options}

        stack = self._config.get("handler")
        if stack is None:
            stack = HandlerStack()
            self._config["handler"] = stack
        if not stack.has_handler():
            stack.set_handler(MockHandler())
        self.stack: HandlerStack = stack
        # None when the stack answers with its own handler
        self.mock_handler: MockHandler | None = (
            stack.handler if isinstance(stack.handler, MockHandler) else None
        )

        self._history = Transactions()
        self.stack.remove("history")
        self.stack.unshift(record_history(self._history), "history")

        super().__init__(
            transport=MuzzleTransport(self.stack),
            **{key: value for key, value in self._config.items() if key in CLIENT_OPTIONS},
        )

    @classmethod
    def make(cls, config: Mapping[str, Any] | None = None) -> "Muzzle":
        return cls(config)

    def send(self, request: httpx.Request, **kwargs: Any) -> AssertableResponse:
        """Send ``request``; the returned response carries the recorded ``AssertableRequest``."""
        response = super().send(request, **kwargs)
        transaction = self._history.last()
        if transaction is not None and transaction.response is response:
            response.request = transaction.request
        return response

    @staticmethod
    def builder() -> "MuzzleBuilder":
        from .builder import MuzzleBuilder

        return MuzzleBuilder()

    def append(self, *expectations: Expectation) -> Self:
        """Queue expectations; requests consume them in the order they were appended."""
        if self.mock_handler is None:
            raise MuzzleError(
                "Expectations cannot be queued: the handler stack does not use a MockHandler."
            )
        self.mock_handler.append(*expectations)
        return self

    def add_middleware(self, middleware: Middleware, name: str | None = None) -> Self:
        self.stack.push(middleware, name)
        return self

    def remove_middleware(self, name: str | Middleware) -> Self:
        self.stack.remove(name)
        return self

    def get_config(self, key: str | None = None) -> Any:
        if key is None:
            return dict(self._config)
        return self._config.get(key)

    def update_config(self, config: Mapping[str, Any]) -> Self:
        """Merge ``config`` into the client configuration, applying live options in place."""
        self._config.update(config)
        for key, value in config.items():
            if key in MUTABLE_OPTIONS:
                setattr(self, key, value)
        return self

    def history(self) -> Transactions:
        return self._history

    def set_history(self, transactions: Transactions) -> Self:
        """Replace the recorded transactions; later requests are recorded into ``transactions``."""
        self.stack.remove("history")
        self._history = transactions
        self.stack.unshift(record_history(self._history), "history")
        return self

    def first_request(self) -> AssertableRequest | None:
        transaction = self._history.first()
        return transaction.request if transaction is not None else None

    def last_request(self) -> AssertableRequest | None:
        transaction = self._history.last()
        return transaction.request if transaction is not None else None

    def first_response(self) -> AssertableResponse | None:
        transaction = self._history.first()
        return transaction.response if transaction is not None else None

    def last_response(self) -> AssertableResponse | None:
        transaction = self._history.last()
        return transaction.response if transaction is not None else None

    def assert_request_count(self, count: int) -> Self:
        assert_equals(
            count,
            len(self._history),
            f"Expected {count} request(s) but {len(self._history)} were made.",
        )
        return self

    def assert_all_expectations_met(self) -> Self:
        pending = list(self.mock_handler.queue) if self.mock_handler is not None else []
        assert_true(
            not pending,
            f"{len(pending)} expectation(s) were never requested: {pending!r}",
        )
        return self
