"""Middleware for the handler stack."""

from collections.abc import Iterable

import httpx
from loguru import logger
from tenacity import (
    RetryCallState,
    RetryError,
    Retrying,
    retry_if_result,
    stop_after_attempt,
    wait_none,
)

from muzzle.client.stack import Handler, Middleware
from muzzle.messages.request import AssertableRequest
from muzzle.messages.response import AssertableResponse
from muzzle.messages.transaction import Transaction, Transactions

__all__ = ["decodable", "history", "log_requests", "retry"]

RETRY_STATUSES: tuple[int, ...] = (500, 502, 503, 504)


def history(transactions: Transactions) -> Middleware:
    """Record every request and its response, or its error, into ``transactions``."""

    def middleware(handler: Handler) -> Handler:
        def handle(request: httpx.Request) -> httpx.Response:
            transaction = Transaction(request=AssertableRequest.from_base_request(request))
            transactions.append(transaction)
            try:
                response = handler(transaction.request)
            except Exception as e:
                transaction.set_error(e)
                raise
            response = AssertableResponse.from_base_response(response)
            transaction.set_response(response)
            return response

        return handle

    return middleware


def decodable() -> Middleware:
    """Make every response an ``AssertableResponse`` so ``decode()`` is always available."""

    def middleware(handler: Handler) -> Handler:
        def handle(request: httpx.Request) -> httpx.Response:
            return AssertableResponse.from_base_response(handler(request))

        return handle

    return middleware


def log_requests(level: str = "DEBUG") -> Middleware:
    def middleware(handler: Handler) -> Handler:
        def handle(request: httpx.Request) -> httpx.Response:
            response = handler(request)
            logger.log(level, f"{request.method} {request.url} -> {response.status_code}")
            return response

        return handle

    return middleware


def retry(attempts: int = 3, statuses: Iterable[int] = RETRY_STATUSES) -> Middleware:
    """
    Call the inner handler again while it answers with one of ``statuses``.

    After the last attempt the final response is returned as is.
    """
    retry_statuses = frozenset(int(status) for status in statuses)

    def middleware(handler: Handler) -> Handler:
        def handle(request: httpx.Request) -> httpx.Response:
            def _log_retry(retry_state: RetryCallState) -> None:
                status = retry_state.outcome.result().status_code
                logger.warning(
                    f"{request.method} {request.url} returned {status}, "
                    f"retrying (attempt {retry_state.attempt_number}/{attempts})"
                )

            retrying = Retrying(
                stop=stop_after_attempt(attempts),
                wait=wait_none(),
                retry=retry_if_result(lambda response: response.status_code in retry_statuses),
                before_sleep=_log_retry,
            )
            try:
                return retrying(handler, request)
            except RetryError as e:
                return e.last_attempt.result()

        return handle

    return middleware
