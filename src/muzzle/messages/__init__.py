from .fixtures import Fixture, HtmlFixture, JsonFixture, load_fixture
from .request import AssertableRequest
from .response import AssertableResponse
from .transaction import Transaction, Transactions

__all__ = [
    "AssertableRequest",
    "AssertableResponse",
    "Fixture",
    "HtmlFixture",
    "JsonFixture",
    "Transaction",
    "Transactions",
    "load_fixture",
]
