"""Sort Route: POST /sort end to end through the ASGI app.

Tests cover:
    - Example scenarios: [2,3,1] → [1,2,3]; {"foo":"bar"} → 400; [] → []; no body → 400
    - Every non-array top-level JSON type → 400 with empty body
    - Non-number element at any position → 400 with empty body
    - Non-JSON content types and malformed JSON → 400
    - Bodies above max_body_bytes → 413 with error envelope
    - Wrong method → 405
"""

import json

import pytest

from httpx import ASGITransport, AsyncClient

from sort_service.config import Settings
from sort_service.main import create_app

JSON_HEADERS = {"content-type": "application/json"}


async def test_sorts_example(client):
    res = await client.post("/sort", json=[2, 3, 1])
    assert res.status_code == 200
    assert res.headers["content-type"] == "application/json"
    assert res.json() == [1, 2, 3]


async def test_sorts_numerically(client):
    res = await client.post("/sort", json=[10, -3.5, 2, 100, 9, 2])
    assert res.json() == [-3.5, 2, 2, 9, 10, 100]


async def test_already_sorted_is_unchanged(client):
    res = await client.post("/sort", json=[1, 2, 3])
    assert res.json() == [1, 2, 3]


async def test_empty_array(client):
    res = await client.post("/sort", json=[])
    assert res.status_code == 200
    assert res.json() == []


async def test_object_body_returns_400(client):
    res = await client.post("/sort", json={"foo": "bar"})
    assert res.status_code == 400
    assert res.content == b""


async def test_missing_body_returns_400(client):
    res = await client.post("/sort")
    assert res.status_code == 400
    assert res.content == b""


@pytest.mark.parametrize("value", ["text", 42, 1.5, True, None])
async def test_non_array_top_level_returns_400(client, value):
    res = await client.post(
        "/sort", content=json.dumps(value), headers=JSON_HEADERS,
    )
    assert res.status_code == 400
    assert res.content == b""


@pytest.mark.parametrize("body", [
    ["1", 2, 3],
    [1, None, 3],
    [1, 2, True],
    [1, {"n": 2}],
    [[1], 2],
])
async def test_non_number_element_returns_400(client, body):
    res = await client.post("/sort", json=body)
    assert res.status_code == 400
    assert res.content == b""


async def test_plain_text_body_returns_400(client):
    res = await client.post(
        "/sort", content=b"[2, 1]", headers={"content-type": "text/plain"},
    )
    assert res.status_code == 400
    assert res.content == b""


async def test_malformed_json_returns_400(client):
    res = await client.post("/sort", content=b"[2, 1", headers=JSON_HEADERS)
    assert res.status_code == 400
    assert res.content == b""


async def test_json_with_charset_is_accepted(client):
    res = await client.post(
        "/sort", content=b"[2, 1]",
        headers={"content-type": "application/json; charset=utf-8"},
    )
    assert res.status_code == 200
    assert res.json() == [1, 2]


async def test_get_sort_is_not_allowed(client):
    res = await client.get("/sort")
    assert res.status_code == 405


async def test_oversized_body_returns_413():
    app = create_app(Settings(_env_file=None, max_body_bytes=16))
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.post("/sort", json=list(range(50)))
    assert res.status_code == 413
    assert res.json()["error"]["code"] == "PAYLOAD_TOO_LARGE"


async def test_body_at_limit_is_accepted():
    app = create_app(Settings(_env_file=None, max_body_bytes=5))
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.post("/sort", content=b"[2,1]", headers=JSON_HEADERS)
    assert res.status_code == 200
    assert res.json() == [1, 2]
