# =============================================================================
# signaturit/contacts.py  —  Contact Operations
# =============================================================================
#
# One function per tool.  Each one runs the same pipeline:
#
#   decode_arguments → client.<verb>() → expect_status → decode_body → text
#
# and either returns the text summary or raises a SignaturitError.  Nothing
# is retried and nothing is caught here.
# =============================================================================

from typing import Any, Mapping

from signaturit.arguments import decode_arguments
from signaturit.client import (
    OK,
    OK_OR_CREATED,
    SignaturitClient,
    decode_body,
    expect_status,
    path_segment,
)
from signaturit.models import (
    Contact,
    ContactIdParams,
    CreateContactParams,
    UpdateContactParams,
)


def _describe(contact: Contact) -> str:
    return f"{contact.name} ({contact.email}) [ID: {contact.id}]"


def list_contacts(client: SignaturitClient, bag: Mapping[str, Any]) -> str:
    """List every contact, one ``- name (email) [ID: id]`` line each."""
    result = client.get("/contacts.json")
    expect_status(result, OK)
    contacts = decode_body(result, list[Contact])

    lines = ["Contacts:"]
    lines.extend(f"- {_describe(contact)}" for contact in contacts)
    return "\n".join(lines) + "\n"


def get_contact(client: SignaturitClient, bag: Mapping[str, Any]) -> str:
    params = decode_arguments(ContactIdParams, bag)

    result = client.get(f"/contacts/{path_segment(params.contact_id)}.json")
    expect_status(result, OK)
    contact = decode_body(result, Contact)
    return f"Contact: {_describe(contact)}"


def create_contact(client: SignaturitClient, bag: Mapping[str, Any]) -> str:
    params = decode_arguments(CreateContactParams, bag)

    result = client.post("/contacts.json", {"email": params.email, "name": params.name})
    expect_status(result, OK_OR_CREATED)
    contact = decode_body(result, Contact)
    return f"Contact created: {_describe(contact)}"


def update_contact(client: SignaturitClient, bag: Mapping[str, Any]) -> str:
    """Patch a contact.  Empty optional fields are left out of the body."""
    params = decode_arguments(UpdateContactParams, bag)

    body: dict[str, str] = {}
    if params.email:
        body["email"] = params.email
    if params.name:
        body["name"] = params.name

    result = client.patch(f"/contacts/{path_segment(params.contact_id)}.json", body)
    expect_status(result, OK)
    contact = decode_body(result, Contact)
    return f"Contact updated: {_describe(contact)}"


def delete_contact(client: SignaturitClient, bag: Mapping[str, Any]) -> str:
    params = decode_arguments(ContactIdParams, bag)

    result = client.delete(f"/contacts/{path_segment(params.contact_id)}.json")
    expect_status(result, OK)
    return f"Contact {params.contact_id} successfully deleted"
