"""pytest fixtures, registered through the ``pytest11`` entry point."""

from collections.abc import Generator
from pathlib import Path

import pytest

from muzzle.client import Muzzle
from muzzle.response_builder import ResponseBuilder


@pytest.fixture
def muzzle() -> Generator[Muzzle, None, None]:
    """A fresh mock client, closed after the test."""
    with Muzzle() as client:
        yield client


@pytest.fixture
def response_builder() -> ResponseBuilder:
    return ResponseBuilder()


@pytest.fixture
def fixture_directory(tmp_path: Path) -> Generator[Path, None, None]:
    """
    A temporary fixture directory set on ``ResponseBuilder`` for the test.

    The previous directory setting is cleared afterwards.
    """
    directory = tmp_path / "fixtures"
    directory.mkdir()
    ResponseBuilder.set_fixture_directory(directory)
    yield directory
    ResponseBuilder.reset_fixture_directory()
