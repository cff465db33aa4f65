"""Tests for the signature operations against a stubbed API."""

import json

import httpx
import pytest

from signaturit.client import SignaturitClient
from signaturit.config import Settings
from signaturit.errors import ArgumentError, EncodingError, UpstreamError
from signaturit.models import Document, SignatureRequest
from signaturit.signatures import (
    cancel_signature,
    create_signature,
    get_signature,
    send_signature_reminder,
)


def _document(doc_id: str, status: str, events=()) -> dict:
    return {
        "id": doc_id,
        "email": f"{doc_id}@example.com",
        "name": f"Signer {doc_id}",
        "status": status,
        "file": {"id": f"f-{doc_id}", "name": "contract.pdf", "pages": 3, "size": 2048},
        "events": [{"type": t, "created_at": "2024-05-01T10:00:00+0000"} for t in events],
    }


def _signature(*documents: dict) -> dict:
    return {"id": "sig-1", "created_at": "2024-05-01T09:00:00+0000", "documents": list(documents)}


RECIPIENTS = [
    {"name": "John Doe", "email": "john@example.com"},
    {"name": "Jane Roe", "email": "jane@example.com"},
]

CREATE_ARGS = {
    "templates": "#NDA,abc123",
    "recipients": json.dumps(RECIPIENTS),
    "body": "Please sign",
    "subject": "NDA",
}


# -----------------------------------------------------------------------------
# Readiness
# -----------------------------------------------------------------------------
@pytest.mark.parametrize(
    "statuses, ready",
    [
        ([], True),
        (["completed"], True),
        (["ready"], False),
        (["completed", "completed"], True),
        (["completed", "declined"], False),
    ],
)
def test_signature_ready_iff_every_document_completed(statuses, ready):
    documents = [Document(id=str(i), status=status) for i, status in enumerate(statuses)]
    assert SignatureRequest(id="s", documents=documents).ready is ready


# -----------------------------------------------------------------------------
# get_signature
# -----------------------------------------------------------------------------
def test_get_signature_summary(client, api):
    api.reply(
        "GET",
        "/signatures/sig-1.json",
        body=_signature(
            _document("d1", "completed", ["email_sent", "document_signed"]),
            _document("d2", "ready", ["email_sent"]),
        ),
    )

    text = get_signature(client, {"signature_id": "sig-1"})

    assert text.splitlines() == [
        "Signature ID sig-1 created at 2024-05-01T09:00:00+0000, summary:",
        "Document d1 (Signer d1): sent to d1@example.com is completed",
        "  - email_sent at 2024-05-01T10:00:00+0000",
        "  - document_signed at 2024-05-01T10:00:00+0000",
        "Document d2 (Signer d2): sent to d2@example.com is ready",
        "  - email_sent at 2024-05-01T10:00:00+0000",
        "",
        "Complete: false",
    ]


def test_get_signature_all_completed(client, api):
    api.reply("GET", "/signatures/sig-1.json", status=201, body=_signature(_document("d1", "completed")))

    assert get_signature(client, {"signature_id": "sig-1"}).endswith("Complete: true")


def test_get_signature_without_documents_is_complete(client, api):
    api.reply("GET", "/signatures/sig-1.json", body=_signature())

    assert get_signature(client, {"signature_id": "sig-1"}).endswith("Complete: true")


def test_get_signature_upstream_error(client, api):
    api.reply("GET", "/signatures/sig-1.json", status=404, body='{"message":"Signature not found"}')

    with pytest.raises(UpstreamError) as excinfo:
        get_signature(client, {"signature_id": "sig-1"})

    assert excinfo.value.status_code == 404
    assert excinfo.value.body == '{"message":"Signature not found"}'


# -----------------------------------------------------------------------------
# create_signature
# -----------------------------------------------------------------------------
def test_create_signature_request_body(client, api):
    api.reply("POST", "/signatures.json", status=201, body=_signature(_document("d1", "ready")))

    text = create_signature(client, CREATE_ARGS)

    assert api.last_json() == {
        "templates": ["#NDA", "abc123"],
        "recipients": RECIPIENTS,
        "expires_in": 7,
        "body": "Please sign",
        "subject": "NDA",
    }
    assert text.splitlines() == [
        "Signature request sig-1 created from templates #NDA, abc123 for:",
        "- John Doe (john@example.com)",
        "- Jane Roe (jane@example.com)",
        "Document d1 (Signer d1): sent to d1@example.com is ready",
    ]


@pytest.mark.parametrize("days", [1, 30, 365, 2.5])
def test_create_signature_forwards_supplied_expiry(client, api, days):
    api.reply("POST", "/signatures.json", body=_signature())

    create_signature(client, {**CREATE_ARGS, "expires_in_days": days})

    assert api.last_json()["expires_in"] == days


def test_create_signature_forwards_optional_settings(client, api):
    api.reply("POST", "/signatures.json", body=_signature())

    create_signature(
        client,
        {
            **CREATE_ARGS,
            "delivery_type": "sms",
            "event_url": "https://hooks.example.com/signaturit",
            "signing_mode": "parallel",
        },
    )

    body = api.last_json()
    assert body["delivery_type"] == "sms"
    assert body["events_url"] == "https://hooks.example.com/signaturit"
    assert body["signing_mode"] == "parallel"


def test_create_signature_keeps_template_segments_verbatim(client, api):
    api.reply("POST", "/signatures.json", body=_signature())

    create_signature(client, {**CREATE_ARGS, "templates": "a, b,,c"})

    assert api.last_json()["templates"] == ["a", " b", "", "c"]


def test_create_signature_trims_templates_when_configured(api):
    api.reply("POST", "/signatures.json", body=_signature())
    settings = Settings(secret_token="t", sandbox=False, trim_templates=True)

    with SignaturitClient(settings, transport=httpx.MockTransport(api.handler)) as client:
        create_signature(client, {**CREATE_ARGS, "templates": "a, b,,c"})

    assert api.last_json()["templates"] == ["a", "b", "c"]


def test_create_signature_recipient_round_trip(client, api):
    recipients = [{"name": f"Signer {i}", "email": f"s{i}@example.com"} for i in range(5, 0, -1)]
    api.reply("POST", "/signatures.json", body=_signature())

    create_signature(client, {**CREATE_ARGS, "recipients": json.dumps(recipients)})

    assert api.last_json()["recipients"] == recipients


def test_create_signature_malformed_recipients(client, api):
    with pytest.raises(ArgumentError) as excinfo:
        create_signature(client, {**CREATE_ARGS, "recipients": "[{'name': 'single quotes'}]"})

    assert (excinfo.value.field, excinfo.value.reason) == ("recipients", "invalid_json")
    assert api.requests == []


@pytest.mark.parametrize("missing", ["templates", "recipients", "body", "subject"])
def test_create_signature_required_fields(client, api, missing):
    args = {key: value for key, value in CREATE_ARGS.items() if key != missing}

    with pytest.raises(ArgumentError) as excinfo:
        create_signature(client, args)

    assert (excinfo.value.field, excinfo.value.reason) == (missing, "missing")
    assert api.requests == []


def test_create_signature_rejects_string_expiry(client, api):
    with pytest.raises(ArgumentError) as excinfo:
        create_signature(client, {**CREATE_ARGS, "expires_in_days": "7"})
    assert excinfo.value.reason == "wrong_type"


def test_create_signature_upstream_error(client, api):
    api.reply("POST", "/signatures.json", status=422, body='{"message":"invalid template"}')

    with pytest.raises(UpstreamError) as excinfo:
        create_signature(client, CREATE_ARGS)

    assert (excinfo.value.status_code, excinfo.value.body) == (422, '{"message":"invalid template"}')


# -----------------------------------------------------------------------------
# send_signature_reminder / cancel_signature
# -----------------------------------------------------------------------------
@pytest.mark.parametrize("status", [200, 201])
def test_send_signature_reminder(client, api, status):
    api.reply("POST", "/signatures/sig-1/reminders.json", status=status, body="[]")

    text = send_signature_reminder(client, {"signature_id": "sig-1"})

    assert text == "Reminder sent for signature sig-1"
    assert api.last.content == b""


def test_send_signature_reminder_failure(client, api):
    api.reply("POST", "/signatures/sig-1/reminders.json", status=400, body="already signed")

    with pytest.raises(UpstreamError) as excinfo:
        send_signature_reminder(client, {"signature_id": "sig-1"})

    assert excinfo.value.body == "already signed"


def test_cancel_signature_with_reason(client, api):
    api.reply("PATCH", "/signatures/sig-1.json", body=_signature())

    text = cancel_signature(client, {"signature_id": "sig-1", "reason": "wrong contract"})

    assert api.last_json() == {"reason": "wrong contract"}
    assert text == "Signature sig-1 canceled. Reason: wrong contract"


def test_cancel_signature_reason_defaults_to_empty(client, api):
    api.reply("PATCH", "/signatures/sig-1.json", body=_signature())

    cancel_signature(client, {"signature_id": "sig-1"})

    assert api.last_json() == {"reason": ""}


def test_cancel_signature_rejects_201(client, api):
    api.reply("PATCH", "/signatures/sig-1.json", status=201, body=_signature())
    with pytest.raises(UpstreamError):
        cancel_signature(client, {"signature_id": "sig-1"})


@pytest.mark.parametrize("days", [float("nan"), float("inf")])
def test_create_signature_non_finite_expiry_is_never_sent(client, api, days):
    with pytest.raises(EncodingError):
        create_signature(client, {**CREATE_ARGS, "expires_in_days": days})
    assert api.requests == []


def test_create_signature_accepts_sparse_response(client, api):
    api.reply(
        "POST",
        "/signatures.json",
        status=201,
        body={
            "id": "sig-2",
            "created_at": None,
            "documents": [{"id": "d1", "email": None, "file": None}],
        },
    )

    text = create_signature(client, CREATE_ARGS)

    assert text.splitlines()[0] == "Signature request sig-2 created from templates #NDA, abc123 for:"
    assert text.splitlines()[-1] == "Document d1 (): sent to  is "


def test_get_signature_tolerates_null_events(client, api):
    api.reply(
        "GET",
        "/signatures/sig-1.json",
        body={"id": "sig-1", "documents": [{"id": "d1", "status": "completed", "events": None}]},
    )

    text = get_signature(client, {"signature_id": "sig-1"})

    assert "Document d1 (): sent to  is completed" in text
    assert text.endswith("Complete: true")


def test_signature_id_stays_one_path_segment(client, api):
    api.reply("POST", "/signatures/a/b/reminders.json")

    send_signature_reminder(client, {"signature_id": "a/b"})

    assert api.last.url.raw_path == b"/v3/signatures/a%2Fb/reminders.json"
