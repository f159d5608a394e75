import httpx
import pytest

from muzzle import (
    AssertableRequest,
    AssertableResponse,
    Expectation,
    HandlerStack,
    HttpMethod,
    HttpStatus,
    MockHandler,
    Muzzle,
    Transaction,
    Transactions,
)
from muzzle.exceptions import ExpectationQueueEmptyError, MuzzleError


def test_create_a_client_with_queued_expectations():
    client = Muzzle()
    client.append(
        Expectation()
        .method(HttpMethod.POST)
        .uri("https://example.com")
        .reply_with(httpx.Response(HttpStatus.CREATED))
    )
    client.append(
        Expectation()
        .method(HttpMethod.GET)
        .uri("https://example.com")
        .reply_with(httpx.Response(HttpStatus.OK))
    )

    assert isinstance(client, httpx.Client)
    client.post("https://example.com").assert_status(HttpStatus.CREATED)
    client.get("https://example.com").assert_status(HttpStatus.OK)


def test_construct_from_the_builder():
    client = (
        Muzzle.builder()
        .post("https://example.com")
        .reply_with(httpx.Response(HttpStatus.CREATED))
        .get("https://example.com")
        .query({"foo": "bar"})
        .build()
    )

    assert isinstance(client, Muzzle)
    client.post("https://example.com").assert_status(HttpStatus.CREATED)
    client.get("https://example.com?foo=bar&baz=qux").assert_status(HttpStatus.OK)


def test_builder_requires_a_verb_first():
    with pytest.raises(MuzzleError, match="Start an expectation"):
        Muzzle.builder().query({"foo": "bar"})


def test_update_config_keeps_the_reference():
    client = Muzzle.make({"base_url": "https://example.com"})
    assert client.get_config("base_url") == "https://example.com"

    updated = client.update_config({"base_url": "https://example.com/foo"})

    assert updated.get_config("base_url") == "https://example.com/foo"
    assert updated is client
    assert client.base_url == httpx.URL("https://example.com/foo/")


def test_update_config_applies_headers_to_later_requests():
    client = Muzzle().append(Expectation().headers({"X-Api-Key": "secret"}))

    client.update_config({"headers": {"X-Api-Key": "secret"}, "retries": 2})

    client.get("https://example.com").assert_ok()
    assert client.get_config("retries") == 2


def test_remove_a_middleware():
    stack = HandlerStack()
    client = Muzzle.make({"handler": stack})

    stack.push(lambda handler: handler, "redirect")
    assert "redirect" in stack

    client.remove_middleware("redirect")

    assert "redirect" not in stack
    assert "history" in stack


def test_add_middleware():
    seen = []

    def tag(handler):
        def handle(request):
            seen.append(request.url.path)
            return handler(request)

        return handle

    client = Muzzle().append(Expectation())
    client.add_middleware(tag, "tag")

    client.get("https://example.com/tagged")

    assert seen == ["/tagged"]
    assert client.stack.names() == ["history", "tag"]


def test_get_the_last_request():
    muzzle = Muzzle()
    request = AssertableRequest.from_base_request(httpx.Request(HttpMethod.GET, "/"))
    transaction = Transaction().set_request(request)
    muzzle.set_history(Transactions([Transaction(), transaction]))

    assert muzzle.last_request() is request


def test_get_the_first_request():
    muzzle = Muzzle()
    request = AssertableRequest.from_base_request(httpx.Request(HttpMethod.GET, "/"))
    transaction = Transaction().set_request(request)
    muzzle.set_history(Transactions([transaction, Transaction()]))

    assert muzzle.first_request() is request


def test_history_is_empty_before_any_request():
    client = Muzzle()

    assert client.first_request() is None
    assert client.last_response() is None
    client.assert_request_count(0)


def test_requests_are_recorded_in_order():
    client = Muzzle().append(
        Expectation().reply_with(httpx.Response(201)),
        Expectation().reply_with(httpx.Response(204)),
    )

    client.post("https://example.com/first", json={"n": 1})
    client.delete("https://example.com/second")

    client.assert_request_count(2)
    client.first_request().assert_method("POST").assert_uri_path("/first").assert_json({"n": 1})
    client.last_request().assert_method("DELETE").assert_uri_path("/second")
    client.first_response().assert_created()
    client.last_response().assert_no_content()
    assert all(isinstance(r, AssertableResponse) for r in client.history().responses())


def test_set_history_records_later_requests_into_the_new_collection():
    client = Muzzle().append(Expectation())
    transactions = Transactions()

    client.set_history(transactions)
    client.get("https://example.com/")

    assert len(transactions) == 1
    assert client.history() is transactions


def test_responses_are_assertable():
    client = Muzzle().append(Expectation().reply_with(httpx.Response(200, json={"a": 1})))

    response = client.get("https://example.com/")

    assert isinstance(response, AssertableResponse)
    assert response.decode() == {"a": 1}
    assert response.request.url == httpx.URL("https://example.com/")


def test_relative_requests_use_the_base_url():
    client = Muzzle(base_url="https://api.example.com").append(
        Expectation().uri("https://api.example.com/users")
    )

    client.get("/users").assert_ok()


def test_unmet_expectation_fails_the_request():
    client = Muzzle().append(Expectation().method("POST"))

    with pytest.raises(AssertionError, match=r"Expected HTTP method \[POST\]"):
        client.get("https://example.com/")

    transaction = client.history().last()
    assert isinstance(transaction.error, AssertionError)
    assert transaction.response is None


def test_empty_queue_fails_the_request():
    client = Muzzle()

    with pytest.raises(ExpectationQueueEmptyError, match="expectation queue is empty"):
        client.get("https://example.com/")


def test_assert_all_expectations_met():
    client = Muzzle().append(Expectation(), Expectation().uri("/later"))
    client.get("https://example.com/")

    with pytest.raises(AssertionError, match="1 expectation"):
        client.assert_all_expectations_met()

    client.get("https://example.com/later")
    client.assert_all_expectations_met()


def test_assert_request_count_failure():
    with pytest.raises(AssertionError, match="Expected 1 request"):
        Muzzle().assert_request_count(1)


def test_usable_as_a_context_manager():
    with Muzzle.builder().get("https://example.com").build() as client:
        client.get("https://example.com").assert_ok()


def test_numeric_query_expectation_matches_the_sent_params():
    client = Muzzle.builder().get("https://example.com/items").query({"page": 2}).build()

    client.get("https://example.com/items", params={"page": 2}).assert_ok()
    client.assert_all_expectations_met()


def test_header_expectation_matches_identical_request():
    accept = "application/json, text/plain"
    client = Muzzle.builder().get("https://example.com/").headers({"Accept": accept}).build()

    client.get("https://example.com/", headers={"Accept": accept}).assert_ok()


def test_shared_stack_with_a_mock_handler_receives_expectations():
    stack = HandlerStack(MockHandler())
    client = Muzzle(handler=stack).append(Expectation().reply_with(httpx.Response(201)))

    assert client.mock_handler is stack.handler
    client.post("https://example.com/").assert_created()
    client.assert_all_expectations_met()


def test_append_requires_a_mock_handler():
    client = Muzzle(handler=HandlerStack(lambda request: httpx.Response(500)))

    assert client.mock_handler is None
    with pytest.raises(MuzzleError, match="does not use a MockHandler"):
        client.append(Expectation())
    client.get("https://example.com/").assert_status(500)
    client.assert_all_expectations_met()


def test_response_request_is_the_recorded_request():
    client = Muzzle().append(Expectation())

    response = client.get("https://example.com/users?page=1")

    assert isinstance(response.request, AssertableRequest)
    assert response.request is client.last_request()
    response.request.assert_uri_query_contains({"page": 1})
