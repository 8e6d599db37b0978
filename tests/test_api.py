from fastapi.testclient import TestClient

from autolang.api import create_app


def test_health_endpoint(monkeypatch) -> None:
    monkeypatch.delenv("AUTOLANG_ENV", raising=False)
    client = TestClient(create_app())

    response = client.get("/health")
    assert response.status_code == 200

    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["version"] == "0.1.0"
    assert payload["env"] == "dev"


def test_annotate_endpoint() -> None:
    client = TestClient(create_app())
    response = client.post("/v1/annotate", json={"text": "Salam, how are you?"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["metadata"]["token_count"] == 4
    assert payload["metadata"]["dominant_language"] == "en"
    assert [segment["lang"] for segment in payload["segments"]] == [
        "az",
        None,
        "en",
        None,
        "en",
        None,
        "en",
    ]
    assert payload["segments"][0]["explanation"] is None


def test_annotate_endpoint_with_explain() -> None:
    client = TestClient(create_app())
    response = client.post("/v1/annotate", json={"text": "thəs", "explain": True})

    assert response.status_code == 200
    explanation = response.json()["segments"][0]["explanation"]
    assert explanation["score_az"] == explanation["score_en"] == 4


def test_annotate_html_endpoint() -> None:
    client = TestClient(create_app())
    response = client.post(
        "/v1/annotate/html",
        params={"tag": "h2", "class_name": "title"},
        json={"text": "salam the"},
    )

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert response.text == (
        '<h2 class="title"><span lang="az">salam</span> <span lang="en">the</span></h2>'
    )


def test_annotate_html_endpoint_rejects_bad_tag() -> None:
    client = TestClient(create_app())
    response = client.post(
        "/v1/annotate/html",
        params={"tag": "<script>"},
        json={"text": "salam"},
    )

    assert response.status_code == 422
    assert "invalid HTML tag name" in response.json()["detail"]


def test_classify_endpoint() -> None:
    client = TestClient(create_app())
    response = client.post(
        "/v1/classify",
        json={"tokens": ["https://example.com", "user@example.com", "12,345.67%", "salam"]},
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["classifier_id"] == "az-en-heuristic-v1"
    assert [item["lang"] for item in payload["results"]] == ["en", "en", "en", "az"]


def test_classify_endpoint_rejects_whitespace_tokens() -> None:
    client = TestClient(create_app())
    response = client.post("/v1/classify", json={"tokens": ["salam", "two words"]})

    assert response.status_code == 422


def test_classify_endpoint_rejects_empty_batch() -> None:
    client = TestClient(create_app())
    response = client.post("/v1/classify", json={"tokens": []})

    assert response.status_code == 422
