"""Tests for the manuscript HTTP API."""

import pytest
from fastapi.testclient import TestClient

from kindle_builder_schemas import ManuscriptInvariantError
from services.orchestrator.app import main

client = TestClient(main.app)


def _payload(**overrides) -> dict:
    payload = {
        "workingTitle": "The 30-Minute Creator Sprint",
        "coreIdea": "building a daily creative routine that ships ideas",
        "audience": "solopreneur creators",
        "tone": "energizing and practical",
        "targetPages": 24,
    }
    payload.update(overrides)
    return payload


def test_health() -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_sample_brief_uses_wire_names() -> None:
    response = client.get("/api/brief/sample")

    assert response.status_code == 200
    assert response.json()["workingTitle"] == "The 30-Minute Creator Sprint"
    assert response.json()["targetPages"] == 24


def test_generate_returns_camel_case_manuscript() -> None:
    response = client.post("/api/generate", json=_payload())

    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"inputs", "blueprint", "chapters", "pages", "guidance", "marketing"}
    assert body["inputs"]["targetPages"] == 24
    assert "measurableOutcome" in body["blueprint"]
    assert sum(chapter["pageEstimate"] for chapter in body["chapters"]) == 24
    assert [page["pageNumber"] for page in body["pages"]] == list(range(1, 25))
    assert "callToAction" not in body["pages"][0]
    assert body["pages"][5]["callToAction"]
    assert body["guidance"]["trimSize"]
    assert body["marketing"]["elevatorPitch"]


def test_generate_trims_strings_and_accepts_numeric_strings() -> None:
    response = client.post(
        "/api/generate",
        json=_payload(workingTitle="  Spaced Title  ", targetPages="12"),
    )

    assert response.status_code == 200
    assert response.json()["inputs"]["workingTitle"] == "Spaced Title"
    assert len(response.json()["pages"]) == 12


def test_generate_is_deterministic() -> None:
    first = client.post("/api/generate", json=_payload())
    second = client.post("/api/generate", json=_payload())

    assert first.content == second.content


@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"workingTitle": None}, "workingTitle"),
        ({"coreIdea": "   "}, "coreIdea"),
        ({"audience": ""}, "audience"),
        ({"tone": None}, "tone"),
        ({"targetPages": None}, "targetPages"),
    ],
)
def test_missing_fields_are_rejected(overrides: dict, field: str) -> None:
    response = client.post("/api/generate", json=_payload(**overrides))

    assert response.status_code == 400
    assert response.json()["detail"] == f"Missing required field: {field}"


def test_first_missing_field_is_reported() -> None:
    response = client.post("/api/generate", json={"tone": "warm"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Missing required field: workingTitle"


@pytest.mark.parametrize("target_pages", [5, 40, "abc", 12.5, "9"])
def test_invalid_page_counts_are_rejected(target_pages) -> None:
    response = client.post("/api/generate", json=_payload(targetPages=target_pages))

    assert response.status_code == 400
    assert response.json()["detail"] == "targetPages must be a number between 10 and 30"


def test_integral_float_page_count_is_accepted() -> None:
    response = client.post("/api/generate", json=_payload(targetPages=15.0))

    assert response.status_code == 200
    assert response.json()["inputs"]["targetPages"] == 15


def test_invariant_failures_map_to_generic_error(monkeypatch) -> None:
    def failing_assembly(inputs, *, service_name):
        raise ManuscriptInvariantError("Drafted 23 pages, expected 24")

    monkeypatch.setattr(main, "assemble_manuscript", failing_assembly)

    response = client.post("/api/generate", json=_payload())

    assert response.status_code == 500
    assert response.json()["detail"] == "Manuscript generation failed"


def test_metrics_endpoint_exposes_stage_metrics() -> None:
    client.post("/api/generate", json=_payload())

    response = client.get("/metrics")

    assert response.status_code == 200
    assert "kindle_builder_stage_runs_total" in response.text
    assert "kindle_builder_manuscripts_total" in response.text
