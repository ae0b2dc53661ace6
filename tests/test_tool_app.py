from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from modules.case_transform.tool.app import app


@pytest.fixture
def client():
    return TestClient(app)


def test_index_renders_form(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "Case Transform" in response.text
    assert 'data-style="kebab"' in response.text


def test_transform_returns_every_style(client):
    response = client.post("/transform", data={"text": "userName"})
    assert response.status_code == 200
    payload = response.json()
    assert payload["words"] == ["user", "name"]
    assert payload["kebab"] == "user-name"
    assert payload["dot"] == "user.name"
    assert payload["camel"] == "userName"


def test_transform_requires_text(client):
    response = client.post("/transform")
    assert response.status_code == 400
    assert response.json() == {"error": "Text is required."}


@pytest.mark.parametrize(
    "style, expected",
    [("camel", "helloWorld"), ("kebab", "hello-world"), ("dot", "hello.world")],
)
def test_convert_single_style(client, style, expected):
    response = client.post(f"/convert/{style}", data={"text": "hello___world"})
    assert response.status_code == 200
    assert response.json() == {"style": style, "result": expected}


def test_convert_unknown_style(client):
    response = client.post("/convert/title", data={"text": "hello"})
    assert response.status_code == 404
    assert response.json()["error"].startswith("Unknown case style 'title'")


def test_convert_without_text(client):
    response = client.post("/convert/camel")
    assert response.status_code == 400
    assert response.json() == {"error": "Input cannot be null"}


def test_convert_blank_text(client):
    response = client.post("/convert/kebab", data={"text": "   "})
    assert response.status_code == 200
    assert response.json()["result"] == ""


@pytest.mark.parametrize("style", ["camel", "kebab", "dot"])
def test_convert_empty_text_is_not_null(client, style):
    response = client.post(f"/convert/{style}", data={"text": ""})
    assert response.status_code == 200
    assert response.json() == {"style": style, "result": ""}


def test_transform_empty_text_gives_empty_outputs(client):
    response = client.post("/transform", data={"text": ""})
    assert response.status_code == 200
    payload = response.json()
    assert payload["source"] == ""
    assert payload["word_count"] == 0
    assert payload["camel"] == payload["kebab"] == payload["dot"] == ""
