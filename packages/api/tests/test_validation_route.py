# This project was developed with assistance from AI tools.
"""Tests for the claim document validation endpoint."""

from unittest.mock import patch

from claimdesk.enums import ValidationStatus
from claimdesk.schemas.validation import ValidationResult

URL = "/api/validation/validate"


def _body(**overrides):
    body = {
        "insurerName": "Star Health",
        "claimType": "Cashless Hospitalization",
        "uploadedDocuments": [
            {"name": "id.pdf", "type": "ID_PROOF", "status": "COMPLETE"},
            {"name": "ins.pdf", "type": "INSURANCE_CARD", "status": "UNCLEAR"},
        ],
    }
    body.update(overrides)
    return body


class TestValidateDocuments:
    """POST /api/validation/validate"""

    def test_returns_verdict(self, client):
        resp = client.post(URL, json=_body())
        assert resp.status_code == 200
        assert resp.json() == {
            "missing": [
                "Doctor's Admission Notes",
                "Discharge Summary",
                "Final Hospital Bill with Breakup",
                "Payment Receipts",
                "Lab/Diagnostic Reports",
            ],
            "issues": ["ins.pdf - document is unclear or illegible"],
            "status": "FAIL",
            "notes": "5 required document(s) missing and 1 document(s) have issues.",
        }

    def test_complete_claim_passes(self, client):
        docs = [
            {"name": f"{t.lower()}.pdf", "type": t, "status": "VALID"}
            for t in (
                "ID_PROOF",
                "INSURANCE_CARD",
                "DOCTOR_PRESCRIPTION",
                "DISCHARGE_SUMMARY",
                "HOSPITAL_BILL",
                "PAYMENT_RECEIPT",
            )
        ]
        resp = client.post(URL, json=_body(insurerName="EssentialHealth", uploadedDocuments=docs))
        assert resp.status_code == 200
        assert resp.json()["status"] == "PASS"
        assert resp.json()["notes"] == "All required documents are present and valid."

    def test_status_is_optional(self, client):
        docs = [{"name": "bill.pdf", "type": "HOSPITAL_BILL"}]
        resp = client.post(URL, json=_body(uploadedDocuments=docs))
        assert resp.status_code == 200
        assert resp.json()["issues"] == ["bill.pdf - document status not provided"]

    def test_unrecognized_status_is_not_rejected(self, client):
        docs = [{"name": "bill.pdf", "type": "HOSPITAL_BILL", "status": "MISSING"}]
        resp = client.post(URL, json=_body(uploadedDocuments=docs))
        assert resp.status_code == 200
        assert resp.json()["issues"] == ["bill.pdf - unknown issue"]

    def test_repeated_calls_are_identical(self, client):
        first = client.post(URL, json=_body())
        second = client.post(URL, json=_body())
        assert first.content == second.content

    def test_passes_fields_through_to_service(self, client):
        verdict = ValidationResult(missing=[], issues=[], status=ValidationStatus.PASS, notes="ok")
        with patch(
            "claimdesk.routes.validation.validate_claim_documents", return_value=verdict
        ) as mock:
            resp = client.post(URL, json=_body())
        assert resp.status_code == 200
        insurer, claim_type, docs = mock.call_args.args
        assert insurer == "Star Health"
        assert claim_type == "Cashless Hospitalization"
        assert [d.name for d in docs] == ["id.pdf", "ins.pdf"]
        assert docs[1].status == "UNCLEAR"


class TestValidateDocumentsBadRequest:
    """Precondition failures are 400 Problem Details and never reach the service."""

    def _assert_rejected(self, client, body, detail_fragment):
        with patch("claimdesk.routes.validation.validate_claim_documents") as mock:
            resp = client.post(URL, json=body)
        assert resp.status_code == 400
        data = resp.json()
        assert data["status"] == 400
        assert data["title"] == "Bad Request"
        assert detail_fragment in data["detail"]
        mock.assert_not_called()

    def test_missing_insurer(self, client):
        body = _body()
        del body["insurerName"]
        self._assert_rejected(client, body, "insurerName")

    def test_empty_claim_type(self, client):
        self._assert_rejected(client, _body(claimType=""), "claimType")

    def test_empty_document_list(self, client):
        self._assert_rejected(client, _body(uploadedDocuments=[]), "uploadedDocuments")

    def test_document_without_type(self, client):
        docs = [{"name": "id.pdf", "type": "ID_PROOF"}, {"name": "x.pdf"}]
        self._assert_rejected(client, _body(uploadedDocuments=docs), "name and type")

    def test_document_with_empty_name(self, client):
        docs = [{"name": "", "type": "ID_PROOF"}]
        self._assert_rejected(client, _body(uploadedDocuments=docs), "name and type")

    def test_documents_not_an_array(self, client):
        resp = client.post(URL, json=_body(uploadedDocuments="id.pdf"))
        assert resp.status_code == 400
        data = resp.json()
        assert data["detail"] == "Request body is malformed."
        assert any("uploadedDocuments" in e for e in data["errors"])

    def test_request_id_is_echoed(self, client):
        resp = client.post(URL, json=_body(claimType=""), headers={"x-request-id": "req-42"})
        assert resp.json()["request_id"] == "req-42"
