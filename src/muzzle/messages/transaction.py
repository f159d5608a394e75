from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Self

from muzzle.messages.request import AssertableRequest
from muzzle.messages.response import AssertableResponse

__all__ = ["Transaction", "Transactions"]


@dataclass
class Transaction:
    """A request and the response (or error) it produced."""

    request: AssertableRequest | None = None
    response: AssertableResponse | None = None
    error: BaseException | None = None

    def set_request(self, request: AssertableRequest) -> Self:
        self.request = request
        return self

    def set_response(self, response: AssertableResponse) -> Self:
        self.response = response
        return self

    def set_error(self, error: BaseException) -> Self:
        self.error = error
        return self


class Transactions:
    """Recorded transactions in the order they happened."""

    def __init__(self, items: Iterable[Transaction] = ()) -> None:
        self.items = list(items)

    def append(self, transaction: Transaction) -> None:
        self.items.append(transaction)

    def clear(self) -> None:
        self.items.clear()

    def first(self) -> Transaction | None:
        return self.items[0] if self.items else None

    def last(self) -> Transaction | None:
        return self.items[-1] if self.items else None

    def requests(self) -> list[AssertableRequest]:
        return [t.request for t in self.items if t.request is not None]

    def responses(self) -> list[AssertableResponse]:
        return [t.response for t in self.items if t.response is not None]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Transaction:
        return self.items[index]

    def __repr__(self) -> str:
        return f"Transactions({self.items!r})"
