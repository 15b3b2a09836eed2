"""
Unit tests for api/routes/exports.py - POST /api/exports/{fmt}.
"""

import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient

from api.main import app
from manuscript.exceptions import RenderError
from manuscript.export_service import ExportResult
from manuscript.models import ExportFormat


@pytest.fixture
def client():
    return TestClient(app)


def _pdf_result(body):
    return ExportResult(
        filename="Mon roman.pdf",
        media_type="application/pdf",
        fmt=ExportFormat.PDF,
        body=body,
    )


class TestExportPdf:

    def test_streams_pdf(self, client, project_payload):
        chunks = iter([b"%PDF-1.4\n", b"body", b"%%EOF"])
        with patch("api.routes.exports.ExportService.export", return_value=_pdf_result(chunks)):
            resp = client.post("/api/exports/pdf", json=project_payload)

        assert resp.status_code == 200
        assert resp.headers["content-type"] == "application/pdf"
        assert resp.headers["content-disposition"] == 'attachment; filename="Mon roman.pdf"'
        assert resp.content == b"%PDF-1.4\nbody%%EOF"

    def test_render_failure_returns_500(self, client, project_payload):
        def failing():
            raise RenderError("pdf", RuntimeError("layout"))
            yield b""

        with patch("api.routes.exports.ExportService.export", return_value=_pdf_result(failing())):
            resp = client.post("/api/exports/pdf", json=project_payload)

        assert resp.status_code == 500
        assert resp.json()["detail"] == "Export failed"

    def test_project_reaches_service(self, client, project_payload):
        captured = {}

        def fake_export(self, project, fmt):
            captured["project"] = project
            captured["fmt"] = fmt
            return _pdf_result(iter([b"%PDF"]))

        with patch("api.routes.exports.ExportService.export", fake_export):
            client.post("/api/exports/pdf", json=project_payload)

        project = captured["project"]
        assert captured["fmt"] == "pdf"
        assert project.name == "Mon roman"
        assert project.owner.full_name == "Ada Martin"
        assert sorted(p.number for p in project.parts) == [1, 2]


class TestExportDocx:

    def test_returns_docx_bytes(self, client, project_payload):
        result = ExportResult(
            filename="Mon roman.docx",
            media_type="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
            fmt=ExportFormat.DOCX,
            body=b"PK\x03\x04",
        )
        with patch("api.routes.exports.ExportService.export", return_value=result):
            resp = client.post("/api/exports/docx", json=project_payload)

        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith(
            "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
        )
        assert 'filename="Mon roman.docx"' in resp.headers["content-disposition"]
        assert resp.content == b"PK\x03\x04"

    def test_render_failure_returns_500(self, client, project_payload):
        error = RenderError("docx", OSError("disk"))
        with patch("api.routes.exports.ExportService.export", side_effect=error):
            resp = client.post("/api/exports/docx", json=project_payload)

        assert resp.status_code == 500


class TestValidation:

    def test_unknown_format_returns_400(self, client, project_payload):
        resp = client.post("/api/exports/odt", json=project_payload)
        assert resp.status_code == 400
        assert "odt" in resp.json()["detail"]

    def test_missing_name_returns_422(self, client):
        resp = client.post("/api/exports/pdf", json={"parts": []})
        assert resp.status_code == 422

    def test_bad_number_returns_422(self, client, project_payload):
        project_payload["parts"][0]["part_number"] = "first"
        resp = client.post("/api/exports/pdf", json=project_payload)
        assert resp.status_code == 422

    def test_short_field_names_accepted(self, client):
        payload = {"name": "Court", "parts": [{"number": 1, "title": "P"}]}
        with patch("api.routes.exports.ExportService.export",
                   return_value=_pdf_result(iter([b"%PDF"]))) as export:
            resp = client.post("/api/exports/pdf", json=payload)

        assert resp.status_code == 200
        project = export.call_args.args[0]
        assert project.name == "Court"
        assert project.parts[0].title == "P"
