# =============================================================================
# signaturit/signatures.py  —  Signature Request Operations
# =============================================================================
#
# Same pipeline as contacts.py:
#
#   decode_arguments → client.<verb>() → expect_status → decode_body → text
#
# get_signature is the only operation that derives anything: each document's
# "completed" flag and the overall readiness of the request
# (SignatureRequest.ready).
# =============================================================================

from dataclasses import asdict
from typing import Any, Mapping

from signaturit.arguments import decode_arguments, parse_recipients, split_templates
from signaturit.client import (
    OK,
    OK_OR_CREATED,
    SignaturitClient,
    decode_body,
    expect_status,
    path_segment,
)
from signaturit.models import (
    CancelSignatureParams,
    CreateSignatureParams,
    Document,
    SignatureIdParams,
    SignatureRequest,
)


def _document_lines(document: Document) -> list[str]:
    lines = [
        f"Document {document.id} ({document.name}): sent to {document.email} "
        f"is {document.status}"
    ]
    lines.extend(f"  - {event.type} at {event.created_at}" for event in document.events)
    return lines


def get_signature(client: SignaturitClient, bag: Mapping[str, Any]) -> str:
    """Summarize a signature request: one line per document, events indented.

    The last line reports whether every document is completed.
    """
    params = decode_arguments(SignatureIdParams, bag)

    result = client.get(f"/signatures/{path_segment(params.signature_id)}.json")
    expect_status(result, OK_OR_CREATED)
    signature = decode_body(result, SignatureRequest)

    lines = [f"Signature ID {params.signature_id} created at {signature.created_at}, summary:"]
    for document in signature.documents:
        lines.extend(_document_lines(document))
    lines.append("")
    lines.append(f"Complete: {str(signature.ready).lower()}")
    return "\n".join(lines)


def create_signature(client: SignaturitClient, bag: Mapping[str, Any]) -> str:
    """Send one or more templates to a list of recipients for signing."""
    params = decode_arguments(CreateSignatureParams, bag)
    templates = split_templates(params.templates, trim=client.settings.trim_templates)
    recipients = parse_recipients(params.recipients)

    body: dict[str, Any] = {
        "templates": templates,
        "recipients": [asdict(recipient) for recipient in recipients],
        "expires_in": params.expires_in_days,
        "body": params.body,
        "subject": params.subject,
    }
    if params.delivery_type:
        body["delivery_type"] = params.delivery_type
    if params.event_url:
        body["events_url"] = params.event_url
    if params.signing_mode:
        body["signing_mode"] = params.signing_mode

    result = client.post("/signatures.json", body)
    expect_status(result, OK_OR_CREATED)
    signature = decode_body(result, SignatureRequest)

    lines = [
        f"Signature request {signature.id} created from templates "
        f"{', '.join(templates)} for:"
    ]
    lines.extend(f"- {recipient.name} ({recipient.email})" for recipient in recipients)
    for document in signature.documents:
        lines.extend(_document_lines(document))
    return "\n".join(lines)


def send_signature_reminder(client: SignaturitClient, bag: Mapping[str, Any]) -> str:
    params = decode_arguments(SignatureIdParams, bag)

    result = client.post(f"/signatures/{path_segment(params.signature_id)}/reminders.json")
    expect_status(result, OK_OR_CREATED)
    return f"Reminder sent for signature {params.signature_id}"


def cancel_signature(client: SignaturitClient, bag: Mapping[str, Any]) -> str:
    params = decode_arguments(CancelSignatureParams, bag)

    result = client.patch(
        f"/signatures/{path_segment(params.signature_id)}.json",
        {"reason": params.reason},
    )
    expect_status(result, OK)
    return f"Signature {params.signature_id} canceled. Reason: {params.reason}"
