import json

import pytest

from muzzle.response_builder import ResponseBuilder


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep tests independent of the developer's MUZZLE_* environment."""
    for name in ("MUZZLE_FIXTURE_DIRECTORY", "MUZZLE_LOG_LEVEL", "MUZZLE_CAPTURE_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    yield
    ResponseBuilder.reset_fixture_directory()


@pytest.fixture
def json_data():
    return {"data": {"message": "done"}}


@pytest.fixture
def json_fixture(fixture_directory, json_data):
    """Write ``response.json`` into the temporary fixture directory."""
    path = fixture_directory / "response.json"
    path.write_text(json.dumps(json_data), encoding="utf-8")
    return path


@pytest.fixture
def html_fixture(fixture_directory):
    """Write ``response.html`` into the temporary fixture directory."""
    path = fixture_directory / "response.html"
    path.write_text(
        "<html><head><title>Done</title></head><body><span>some html</span></body></html>",
        encoding="utf-8",
    )
    return path
