from collections import deque
from collections.abc import Iterable

import httpx
from loguru import logger

from muzzle.exceptions import ExpectationQueueEmptyError
from muzzle.expectation import Expectation
from muzzle.messages.request import AssertableRequest
from muzzle.messages.response import AssertableResponse

__all__ = ["MockHandler"]


class MockHandler:
    """
    Replays queued expectations in order.

    Each request consumes the next expectation, is asserted against it, and
    receives its reply.
    """

    def __init__(self, expectations: Iterable[Expectation] = ()) -> None:
        self.queue: deque[Expectation] = deque(expectations)

    def append(self, *expectations: Expectation) -> None:
        self.queue.extend(expectations)

    def reset(self) -> None:
        self.queue.clear()

    def __len__(self) -> int:
        return len(self.queue)

    def __call__(self, request: httpx.Request) -> AssertableResponse:
        if not self.queue:
            raise ExpectationQueueEmptyError(
                f"Unexpected request {request.method} {request.url}: "
                "the expectation queue is empty."
            )

        expectation = self.queue.popleft()
        logger.debug(f"Matching {request.method} {request.url} against {expectation!r}")
        expectation.assert_matches(AssertableRequest.from_base_request(request))
        return expectation.reply()
