from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from conftest import FILES_URL

from image_helper.main import app
from image_helper.services.image_helper import get_image_helper

RECORD = {
    "id": "42",
    "fields": {
        "field_image": [],
        "field_fallback": [{"entity": {"entity_type": "file", "uri": "public://f1.jpg"}, "alt": "F1"}],
        "field_gallery": [
            {"entity": {"entity_type": "file", "uri": "public://1.jpg"}, "alt": "one"},
            {"entity": {"entity_type": "taxonomy_term", "id": "3"}},
            {
                "entity": {
                    "entity_type": "media",
                    "fields": {
                        "field_media_image": [
                            {"entity": {"entity_type": "file", "uri": "public://3.jpg"}, "title": "three"}
                        ]
                    },
                }
            },
        ],
    },
}


@pytest.fixture()
def client(helper):
    app.dependency_overrides[get_image_helper] = lambda: helper
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_healthz(client):
    assert client.get("/healthz").json() == {"status": "ok"}


def test_image_url_with_fallback(client):
    resp = client.post(
        "/images/url",
        json={"record": RECORD, "field_name": "field_image", "fallback_field": "field_fallback"},
    )

    assert resp.status_code == 200
    assert resp.json() == {"url": f"{FILES_URL}/f1.jpg"}


def test_image_url_missing_image_is_null(client):
    resp = client.post("/images/url", json={"record": RECORD, "field_name": "field_image"})

    assert resp.status_code == 200
    assert resp.json() == {"url": None}


def test_image_list_skips_unsupported_items(client):
    resp = client.post(
        "/images/list",
        json={"record": RECORD, "field_name": "field_gallery", "style": "thumbnail"},
    )

    assert resp.json() == {
        "images": [
            {"url": f"{FILES_URL}/styles/thumbnail/1.jpg", "alt": "one", "title": ""},
            {"url": f"{FILES_URL}/styles/thumbnail/3.jpg", "alt": "", "title": "three"},
        ]
    }


def test_responsive(client):
    resp = client.post(
        "/images/responsive",
        json={
            "record": RECORD,
            "field_name": "field_fallback",
            "sizes": [
                {"style": "ghost", "width": 50},
                {"style": "thumbnail", "width": 100},
                {"style": "medium", "width": 300},
            ],
        },
    )

    url_100 = f"{FILES_URL}/styles/thumbnail/f1.jpg"
    url_300 = f"{FILES_URL}/styles/medium/f1.jpg"
    assert resp.json() == {
        "image": {"src": url_100, "srcset": f"{url_100} 100w, {url_300} 300w", "sizes_hint": "100vw"}
    }


def test_responsive_empty_sizes_is_null(client):
    resp = client.post(
        "/images/responsive", json={"record": RECORD, "field_name": "field_fallback", "sizes": []}
    )

    assert resp.status_code == 200
    assert resp.json() == {"image": None}


def test_share_image(client):
    resp = client.post("/images/share", json={"record": RECORD, "fields": ["field_image", "field_gallery"]})

    assert resp.json() == {"url": f"{FILES_URL}/1.jpg"}
