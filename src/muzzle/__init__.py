from .client import HandlerStack, MockHandler, Muzzle, MuzzleBuilder, MuzzleTransport
from .constants import HttpMethod, HttpStatus
from .expectation import Expectation
from .messages import (
    AssertableRequest,
    AssertableResponse,
    Fixture,
    HtmlFixture,
    JsonFixture,
    Transaction,
    Transactions,
)
from .response_builder import ResponseBuilder

__all__ = [
    "AssertableRequest",
    "AssertableResponse",
    "Expectation",
    "Fixture",
    "HandlerStack",
    "HtmlFixture",
    "HttpMethod",
    "HttpStatus",
    "JsonFixture",
    "MockHandler",
    "Muzzle",
    "MuzzleBuilder",
    "MuzzleTransport",
    "ResponseBuilder",
    "Transaction",
    "Transactions",
]
