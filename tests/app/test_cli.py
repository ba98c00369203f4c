from __future__ import annotations

import json
from typing import TYPE_CHECKING
from uuid import UUID

import pytest

from sources_bulk.domain.bulk import BulkCreateRequest, BulkCreateResult
from sources_bulk.domain.errors import ResourceNotFoundError
from sources_bulk.domain.model import Source, SourceType
from sources_bulk.ui import cli

if TYPE_CHECKING:
    from pathlib import Path


SOURCE_ID = UUID("00000000-0000-0000-0000-000000000001")


def _write_payload(tmp_path: Path, payload: dict[str, object]) -> Path:
    path = tmp_path / "payload.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_bulk_create_prints_summary(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    received: list[BulkCreateRequest] = []

    def fake_bulk_create(request: BulkCreateRequest) -> BulkCreateResult:
        received.append(request)
        return BulkCreateResult(
            sources=(Source(id=SOURCE_ID, name="aws", source_type_id=SOURCE_ID),)
        )

    monkeypatch.setattr(cli, "bulk_create", fake_bulk_create)
    path = _write_payload(tmp_path, {"sources": [{"name": "aws", "type": "amazon"}]})

    cli.main(["bulk-create", str(path)])

    (request,) = received
    assert request.sources[0]["name"] == "aws"
    summary = json.loads(capsys.readouterr().out)
    assert summary["sources"] == [str(SOURCE_ID)]
    assert summary["authentications"] == []


def test_invalid_payload_exits_with_usage_error(tmp_path: Path) -> None:
    path = _write_payload(tmp_path, {"endpoints": [{"host": "missing-source"}]})

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["bulk-create", str(path)])

    assert excinfo.value.code == 2


def test_empty_payload_exits_without_creating(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    received: list[BulkCreateRequest] = []
    monkeypatch.setattr(cli, "bulk_create", received.append)
    path = _write_payload(tmp_path, {"sources": [], "endpoints": None})

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["bulk-create", str(path)])

    assert excinfo.value.code == 2
    assert received == []


def test_missing_payload_file_exits_with_usage_error(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["bulk-create", str(tmp_path / "absent.json")])

    assert excinfo.value.code == 2


def test_failed_batch_exits_with_error(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    def failing_bulk_create(request: BulkCreateRequest) -> BulkCreateResult:
        _ = request
        raise ResourceNotFoundError("sources", "gcp")

    monkeypatch.setattr(cli, "bulk_create", failing_bulk_create)
    path = _write_payload(tmp_path, {"endpoints": [{"source_name": "gcp"}]})

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["bulk-create", str(path)])

    assert excinfo.value.code == 1


def test_add_source_type_prints_id(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    calls: list[tuple[str, str | None, str | None]] = []

    def fake_add_source_type(
        name: str, *, product_name: str | None = None, vendor: str | None = None
    ) -> SourceType:
        calls.append((name, product_name, vendor))
        return SourceType(id=SOURCE_ID, name=name)

    monkeypatch.setattr(cli, "add_source_type", fake_add_source_type)

    cli.main(["types", "add-source-type", "--name", "amazon", "--vendor", "Amazon"])

    assert calls == [("amazon", None, "Amazon")]
    assert capsys.readouterr().out.strip() == str(SOURCE_ID)
