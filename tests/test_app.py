"""HTTP tests for the Bazaar application.

Uses the in-memory backend — tests the HTTP layer without a database.
"""

from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from bazaar.app import create_app
from bazaar.config import BazaarConfig, load_config
from bazaar.handler import HandlerResponse
from bazaar.interface import CHAIN_METHODS
from bazaar.seed import build_catalogue
from bazaar.testing.contract import is_error_envelope
from bazaar.testing.mock_model import mock_model

BOOK_ID = "66db427fdb0119d9234b27ef"
LAPTOP_ID = "66db427fdb0119d9234b27f1"
TSHIRT_ID = "66db427fdb0119d9234b27f9"


def _make_test_app(seed: bool = True):
    """Create a test app with an injected in-memory catalogue."""
    categories, products = build_catalogue(seed=seed)
    return create_app(BazaarConfig(), categories=categories, products=products)


@pytest.fixture
def client():
    return TestClient(_make_test_app())


@pytest.fixture
def empty_client():
    return TestClient(_make_test_app(seed=False))


class TestMeta:
    def test_health(self, client):
        r = client.get("/api/v1/health")
        assert r.status_code == 200
        assert r.json() == {"status": "ok", "service": "bazaar"}

    def test_version(self, client):
        r = client.get("/api/v1/version")
        assert r.status_code == 200
        assert r.json()["service"] == "0.1.0"
        assert r.json()["query_methods"] == list(CHAIN_METHODS)


class TestCategories:
    def test_list(self, client):
        r = client.get("/api/v1/category/get-category")
        assert r.status_code == 200
        body = r.json()
        assert body["success"] is True
        assert [c["slug"] for c in body["category"]] == ["electronics", "book", "clothing"]

    def test_list_empty(self, empty_client):
        r = empty_client.get("/api/v1/category/get-category")
        assert r.status_code == 200
        assert r.json()["message"] == "No Categories Found"
        assert r.json()["category"] == []

    def test_single(self, client):
        r = client.get("/api/v1/category/single-category/book")
        assert r.status_code == 200
        assert r.json()["category"]["_id"] == BOOK_ID

    def test_single_not_found(self, client):
        r = client.get("/api/v1/category/single-category/furniture")
        assert r.status_code == 404
        assert r.json() == {"success": False, "message": "Category not found"}


class TestProducts:
    def test_list_newest_first_without_photos(self, client):
        r = client.get("/api/v1/product/get-product")
        assert r.status_code == 200
        body = r.json()
        assert body["count_total"] == 5
        assert body["products"][0]["slug"] == "nus-tshirt"
        assert all("photo" not in p for p in body["products"])
        assert body["products"][0]["category"]["slug"] == "clothing"

    def test_single(self, client):
        r = client.get("/api/v1/product/get-product/laptop")
        assert r.status_code == 200
        product = r.json()["product"]
        assert product["_id"] == LAPTOP_ID
        assert product["category"]["name"] == "Electronics"

    def test_single_not_found(self, client):
        r = client.get("/api/v1/product/get-product/ghost")
        assert r.status_code == 404

    def test_photo(self, client):
        r = client.get(f"/api/v1/product/product-photo/{TSHIRT_ID}")
        assert r.status_code == 200
        assert r.headers["content-type"] == "image/png"
        assert r.content == b"\x89PNG\r\n\x1a\n"

    def test_photo_missing(self, client):
        r = client.get(f"/api/v1/product/product-photo/{LAPTOP_ID}")
        assert r.status_code == 404
        assert r.json()["message"] == "Photo not found"

    def test_product_list_pages(self, client):
        first = client.get("/api/v1/product/product-list/1").json()["products"]
        second = client.get("/api/v1/product/product-list/2").json()["products"]
        assert len(first) == 5
        assert second == []

    def test_product_list_bad_page(self, client):
        r = client.get("/api/v1/product/product-list/zero")
        assert r.status_code == 400

    def test_search(self, client):
        r = client.get("/api/v1/product/search/NOVEL")
        assert r.status_code == 200
        assert [p["slug"] for p in r.json()] == ["novel"]

    def test_search_matches_description(self, client):
        r = client.get("/api/v1/product/search/comprehensive")
        assert [p["slug"] for p in r.json()] == ["textbook"]

    def test_related(self, client):
        r = client.get(f"/api/v1/product/related-product/66db427fdb0119d9234b27f5/{BOOK_ID}")
        assert r.status_code == 200
        assert [p["slug"] for p in r.json()["products"]] == ["novel"]

    def test_by_category(self, client):
        r = client.get("/api/v1/product/product-category/electronics")
        assert r.status_code == 200
        body = r.json()
        assert body["category"]["slug"] == "electronics"
        assert {p["slug"] for p in body["products"]} == {"laptop", "smartphone"}

    def test_by_category_omits_photos(self, client):
        r = client.get("/api/v1/product/product-category/clothing")
        assert r.status_code == 200
        products = r.json()["products"]
        assert [p["slug"] for p in products] == ["nus-tshirt"]
        assert all("photo" not in p for p in products)

    def test_by_category_not_found(self, client):
        r = client.get("/api/v1/product/product-category/furniture")
        assert r.status_code == 404


class TestFailureEnvelope:
    """Mock models injected into the app surface the envelope over HTTP."""

    def test_category_failure_is_500_envelope(self):
        categories = mock_model()
        categories.set_rejected("find")
        app = create_app(BazaarConfig(), categories=categories.model, products=mock_model().model)
        r = TestClient(app).get("/api/v1/category/get-category")
        assert r.status_code == 500
        body = r.json()
        assert is_error_envelope(body)
        assert body["error"] == "Database failure"

    def test_product_failure_is_500_envelope(self):
        products = mock_model()
        products.set_rejected("sort")
        app = create_app(BazaarConfig(), categories=mock_model().model, products=products.model)
        r = TestClient(app).get("/api/v1/product/product-list/1")
        assert r.status_code == 500
        assert is_error_envelope(r.json())


class TestLifespan:
    def test_builds_seeded_catalogue(self):
        app = create_app(BazaarConfig(seed=True))
        with TestClient(app) as c:
            r = c.get("/api/v1/category/get-category")
            assert len(r.json()["category"]) == 3

    def test_unseeded_catalogue(self):
        app = create_app(BazaarConfig(seed=False))
        with TestClient(app) as c:
            r = c.get("/api/v1/product/get-product")
            assert r.json()["count_total"] == 0

    def test_audit_log(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="bazaar.audit"):
            client.get("/api/v1/health")
        assert any("GET /api/v1/health 200" in m for m in caplog.messages)


class TestConfig:
    def test_defaults(self, tmp_path, monkeypatch):
        for key in ("BAZAAR_HOST", "BAZAAR_PORT", "BAZAAR_LOG_LEVEL", "BAZAAR_SEED"):
            monkeypatch.delenv(key, raising=False)
        config = load_config(tmp_path / "missing.ini")
        assert config == BazaarConfig()

    def test_ini_file(self, tmp_path, monkeypatch):
        for key in ("BAZAAR_HOST", "BAZAAR_PORT", "BAZAAR_LOG_LEVEL", "BAZAAR_SEED"):
            monkeypatch.delenv(key, raising=False)
        ini = tmp_path / "bazaar.ini"
        ini.write_text(
            "[server]\nhost = 0.0.0.0\nport = 9000\nlog_level = debug\n\n[catalogue]\nseed = no\n"
        )
        config = load_config(ini)
        assert config.host == "0.0.0.0"
        assert config.port == 9000
        assert config.log_level == "DEBUG"
        assert config.seed is False

    def test_env_overrides_ini(self, tmp_path, monkeypatch):
        ini = tmp_path / "bazaar.ini"
        ini.write_text("[server]\nport = 9000\n")
        monkeypatch.setenv("BAZAAR_PORT", "9100")
        monkeypatch.setenv("BAZAAR_SEED", "true")
        config = load_config(ini)
        assert config.port == 9100
        assert config.seed is True

    def test_config_is_frozen(self):
        with pytest.raises(AttributeError):
            BazaarConfig().port = 1


class TestHandlerResponse:
    def test_json_keeps_raw_body(self):
        body = [{"slug": "novel", "price": 14.99}]
        res = HandlerResponse().status(200).json(body)
        assert res.body is body
        rendered = res.render()
        assert rendered.media_type == "application/json"
        assert rendered.body == b'[{"slug":"novel","price":14.99}]'

    def test_bytes_use_content_type_header(self):
        rendered = HandlerResponse().set("Content-Type", "image/png").send(b"img").render()
        assert rendered.media_type == "image/png"
        assert rendered.body == b"img"
