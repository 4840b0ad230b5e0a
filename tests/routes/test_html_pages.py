"""Tests for the HTML form and result pages."""

import httpx
import pytest

from backend.app import create_app


@pytest.fixture
async def client(tmp_path):
    app = create_app(config_file=tmp_path / "missing.json")
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


async def test_form_page(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    html = resp.text
    assert '<form method="get" action="/result">' in html
    assert 'name="packs" value="baseset" checked' in html
    assert 'name="packs" value="miniexpansion" checked' in html
    assert 'name="packs" value="rookcity">' in html
    assert 'name="pc" value="3" checked' in html
    assert 'value="50"' in html
    assert "Shattered Timelines" in html


async def test_result_without_packs(client):
    resp = await client.get("/result", params={"pc": 3, "lp": 50})
    assert resp.status_code == 200
    assert "No card set selected." in resp.text


async def test_result_found(client):
    resp = await client.get("/result", params=[
        ("pc", "3"), ("lp", "30"), ("packs", "baseset"), ("packs", "miniexpansion"),
    ])
    assert resp.status_code == 200
    html = resp.text
    assert "Found in " in html
    assert "3 heroes" in html
    assert "Difficulty: " in html
    assert "(target 30% loss)" in html


async def test_result_structural_error(client):
    resp = await client.get("/result", params=[("pc", "5"), ("lp", "30"), ("packs", "miniexpansion")])
    assert resp.status_code == 200
    assert "Too many players for the selected heroes." in resp.text
    assert "Found in" not in resp.text


@pytest.mark.parametrize("params", [
    {"pc": 9, "lp": 50, "packs": "baseset"},
    {"pc": 3, "lp": 0, "packs": "baseset"},
    {"pc": "three", "lp": 50, "packs": "baseset"},
    {"lp": 50, "packs": "baseset"},
])
async def test_result_invalid_params(client, params):
    resp = await client.get("/result", params=params)
    assert resp.status_code == 422
