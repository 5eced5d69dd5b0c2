import httpx
from fastapi.testclient import TestClient

from cfproxy.api.main import create_app
from cfproxy.upstream import CodeforcesClient

from .helpers import RecordingTransport, envelope, make_problem


def _client_for(settings, handler):
    transport = RecordingTransport(handler)
    app = create_app(settings, client=CodeforcesClient(settings, transport=transport))
    return TestClient(app), transport


def _serve(payload):
    return lambda request: httpx.Response(200, json=payload)


def test_problems_sorted_by_rating(settings):
    payload = envelope([
        make_problem("a", 1200, ["dp"]),
        make_problem("b", 900, ["dp"]),
        make_problem("c", 1600, ["dp"]),
    ])
    client, transport = _client_for(settings, _serve(payload))
    with client:
        resp = client.get("/problems", params={"tag": "dp"})

    assert resp.status_code == 200
    assert [p["rating"] for p in resp.json()] == [900, 1200, 1600]
    assert transport.requests[0].url.params["tags"] == "dp"


def test_problem_fields_use_wire_names(settings):
    client, _ = _client_for(settings, _serve(envelope([make_problem("a", 800, ["dp"], contest_id=1, index="B")])))
    with client:
        data = client.get("/problems", params={"tag": "dp"}).json()

    assert data[0]["contestId"] == 1
    assert data[0]["index"] == "B"
    assert data[0]["problemsetName"] == ""
    assert data[0]["tags"] == ["dp"]


def test_only_keeps_single_tag_problems(settings):
    payload = envelope([
        make_problem("single hard", 1600, ["dp"]),
        make_problem("double", 800, ["dp", "math"]),
        make_problem("single easy", 1000, ["dp"]),
    ])
    client, _ = _client_for(settings, _serve(payload))
    with client:
        resp = client.get("/problems/only", params={"tag": "dp"})

    assert resp.status_code == 200
    assert [p["name"] for p in resp.json()] == ["single easy", "single hard"]


def test_only_with_no_matches_returns_empty_list(settings):
    client, _ = _client_for(settings, _serve(envelope([make_problem("double", 800, ["dp", "math"])])))
    with client:
        resp = client.get("/problems/only", params={"tag": "dp"})
    assert resp.json() == []


def test_multi_joins_tags_and_keeps_extra_tags(settings):
    payload = envelope([
        make_problem("three", 1400, ["dp", "math", "greedy"]),
        make_problem("two", 1100, ["dp", "math"]),
    ])
    client, transport = _client_for(settings, _serve(payload))
    with client:
        resp = client.get("/problems/multi", params={"tags": "dp,math"})

    assert [p["name"] for p in resp.json()] == ["two", "three"]
    assert transport.requests[0].url.params["tags"] == "dp;math"


def test_multi_only_matches_tag_count(settings):
    payload = envelope([
        make_problem("three", 1400, ["dp", "math", "greedy"]),
        make_problem("two", 1100, ["dp", "math"]),
        make_problem("one", 900, ["dp"]),
    ])
    client, _ = _client_for(settings, _serve(payload))
    with client:
        resp = client.get("/problems/multi/only", params={"tags": "dp,math"})

    assert [p["name"] for p in resp.json()] == ["two"]


def test_empty_tag_forwarded_and_returns_catalog(settings):
    catalog = envelope([
        make_problem("x", 1500, ["graphs"]),
        make_problem("y", 800, []),
        make_problem("z", 1000, ["dp", "math"]),
    ])
    client, transport = _client_for(settings, _serve(catalog))
    with client:
        resp = client.get("/problems")
        multi_only = client.get("/problems/multi/only", params={"tags": ""})

    assert [p["name"] for p in resp.json()] == ["y", "z", "x"]
    assert [r.url.params["tags"] for r in transport.requests] == ["", ""]
    # "" splits into one empty tag, so exact-match keeps single-tag problems
    assert [p["name"] for p in multi_only.json()] == ["x"]


def test_same_query_twice_refetches_and_matches(settings):
    payload = envelope([make_problem("a", 1200, ["dp"]), make_problem("b", 900, ["dp"])])
    client, transport = _client_for(settings, _serve(payload))
    with client:
        first = client.get("/problems", params={"tag": "dp"}).json()
        second = client.get("/problems", params={"tag": "dp"}).json()

    assert first == second
    assert len(transport.requests) == 2


def test_fetch_error_returns_500_plain_text(settings):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client, _ = _client_for(settings, handler)
    with client:
        resp = client.get("/problems", params={"tag": "dp"})

    assert resp.status_code == 500
    assert resp.headers["content-type"].startswith("text/plain")
    assert "connection refused" in resp.text


def test_decode_error_returns_500(settings):
    client, _ = _client_for(settings, lambda r: httpx.Response(200, text="not json"))
    with client:
        resp = client.get("/problems/multi", params={"tags": "dp,math"})

    assert resp.status_code == 500
    assert "error decoding problem set" in resp.text


def test_health_does_not_touch_upstream(settings):
    def handler(request):
        raise AssertionError("health must not call upstream")

    client, transport = _client_for(settings, handler)
    with client:
        resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.text == "ok"
    assert transport.requests == []


def test_tags_are_deduplicated(settings):
    client, _ = _client_for(settings, _serve(envelope([])))
    with client:
        tags = client.get("/tags").json()["tags"]

    assert len(tags) == len(set(tags))
    assert tags[:3] == ["dp", "greedy", "math"]
    assert "binary search" in tags
