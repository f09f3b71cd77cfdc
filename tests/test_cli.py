"""CLI tests through typer's CliRunner with the fake API."""

from __future__ import annotations

import io
import json

import pytest
from rich.console import Console
from typer.testing import CliRunner

from cli import doctor, main
from cli.main import app
from core.services import person_info
from factories import BASE_URL, FILM_2_URL, FakeSwapi, default_routes

runner = CliRunner()


@pytest.fixture
def fake_api(monkeypatch: pytest.MonkeyPatch) -> FakeSwapi:
    fake = FakeSwapi(default_routes())
    monkeypatch.setenv("SWAPI_MERGE_BASE_URL", BASE_URL)
    monkeypatch.setenv("SWAPI_MERGE_PERSON_ID", "1")
    monkeypatch.setattr(person_info, "build_async_client", lambda settings: fake.client(settings))
    return fake


@pytest.mark.parametrize("variant", ["callbacks", "async", "stream"])
def test_fetch_json(fake_api: FakeSwapi, variant: str) -> None:
    result = runner.invoke(app, ["fetch", "--json", "--variant", variant])

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["homeworld"] == "Tatooine"
    assert [film["title"] for film in data["films"]] == ["A New Hope", "The Empire Strikes Back"]


def test_fetch_table_and_export(fake_api: FakeSwapi, tmp_path) -> None:
    target = tmp_path / "luke.json"

    result = runner.invoke(app, ["fetch", "--output", str(target)])

    assert result.exit_code == 0, result.output
    assert "Luke Skywalker" in result.stdout
    assert "Tatooine" in result.stdout
    assert json.loads(target.read_text(encoding="utf-8"))["name"] == "Luke Skywalker"


def test_fetch_failure_exits_non_zero(fake_api: FakeSwapi, monkeypatch: pytest.MonkeyPatch) -> None:
    errors = io.StringIO()
    monkeypatch.setattr(main, "_err_console", Console(file=errors))
    fake_api.statuses[FILM_2_URL] = 500

    result = runner.invoke(app, ["fetch", "--json"])

    assert result.exit_code == 1
    assert "Error" in errors.getvalue()
    assert "500" in errors.getvalue()
    assert result.stdout.strip() == ""


def test_compare_reports_matching_variants(fake_api: FakeSwapi) -> None:
    result = runner.invoke(app, ["compare"])

    assert result.exit_code == 0, result.output
    for name in ("callbacks", "async", "stream"):
        assert name in result.stdout
    assert len(fake_api.requests) == 3 * 4


@pytest.fixture
def doctor_api(monkeypatch: pytest.MonkeyPatch) -> FakeSwapi:
    fake = FakeSwapi({f"{BASE_URL}/": {"people": f"{BASE_URL}/people/"}})
    monkeypatch.setenv("SWAPI_MERGE_BASE_URL", BASE_URL)
    monkeypatch.setattr(doctor, "build_async_client", lambda settings: fake.client(settings))
    return fake


def test_doctor_reports_reachable_api(doctor_api: FakeSwapi) -> None:
    result = runner.invoke(app, ["doctor", "run"])

    assert result.exit_code == 0, result.output
    assert "HTTP 200" in result.stdout
    assert "FAIL" not in result.stdout
    assert doctor_api.requests == [f"{BASE_URL}/"]


def test_doctor_fails_on_server_error(doctor_api: FakeSwapi) -> None:
    doctor_api.statuses[f"{BASE_URL}/"] = 500

    result = runner.invoke(app, ["doctor", "run"])

    assert result.exit_code == 1
    assert "FAIL" in result.stdout
    assert "HTTP 500" in result.stdout
