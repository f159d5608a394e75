import httpx

from .stack import HandlerStack

__all__ = ["MuzzleTransport"]


class MuzzleTransport(httpx.BaseTransport, httpx.AsyncBaseTransport):
    """
    Transport that answers every request from a handler stack instead of the network.

    Works for both ``httpx.Client`` and ``httpx.AsyncClient``.
    """

    def __init__(self, stack: HandlerStack) -> None:
        self.stack = stack

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        request.read()
        return self.stack(request)

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        await request.aread()
        return self.stack(request)
