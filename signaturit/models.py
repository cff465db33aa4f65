# =============================================================================
# signaturit/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# Two families of models live here:
#
#   1. RESPONSE ENTITIES (dataclasses): snapshots of what the Signaturit API
#      sends back: Contact, SignatureRequest → Document → File / Event.
#      They're validated from JSON with pydantic's TypeAdapter (see
#      client.decode_body) and never mutated afterwards.  Missing keys and
#      nulls read as empty strings, zeros and empty lists.
#
#   2. TOOL PARAMETERS (pydantic models): one per operation.  The field
#      declarations ARE the argument schema: name, type, required/optional,
#      default.  arguments.decode_arguments turns an untyped argument bag
#      into one of these before any HTTP call is made.
#
# Nothing here is persisted or cached; every object lives for one tool call.
# =============================================================================

from dataclasses import dataclass, field
from typing import Annotated, Any, Callable, Literal, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict


def _or_default(factory: Callable[[], Any]) -> BeforeValidator:
    """Replace a JSON null with the field's empty value."""
    return BeforeValidator(lambda value: factory() if value is None else value)


# Response fields: an absent key or a null both read as the empty value.
Text = Annotated[str, _or_default(str)]
Count = Annotated[int, _or_default(int)]


# -----------------------------------------------------------------------------
# Contact: an address-book entry
# -----------------------------------------------------------------------------
@dataclass
class Contact:
    id: Text = ""
    email: Text = ""
    name: Text = ""
    created_at: Text = ""


# -----------------------------------------------------------------------------
# Signature requests
# -----------------------------------------------------------------------------
# A signature request fans out into one Document per signer.  Each document
# carries the file being signed and the audit trail of events (email_sent,
# document_opened, document_signed, ...).
# -----------------------------------------------------------------------------
@dataclass
class Event:
    type: Text = ""
    created_at: Text = ""


@dataclass
class File:
    id: Text = ""
    name: Text = ""
    pages: Count = 0
    size: Count = 0


@dataclass
class Document:
    id: Text = ""
    email: Text = ""
    name: Text = ""
    status: Text = ""
    file: Annotated[File, _or_default(File)] = field(default_factory=File)
    events: Annotated[list[Event], _or_default(list)] = field(default_factory=list)

    @property
    def completed(self) -> bool:
        return self.status == "completed"


@dataclass
class SignatureRequest:
    """A signature request and its per-signer documents.

    ``ready`` is derived on every read: the request is complete only when
    every document is completed.  With no documents it is vacuously true.
    """

    id: Text = ""
    created_at: Text = ""
    documents: Annotated[list[Document], _or_default(list)] = field(default_factory=list)

    @property
    def ready(self) -> bool:
        return all(document.completed for document in self.documents)


# -----------------------------------------------------------------------------
# Recipient: one signer, as given by the caller
# -----------------------------------------------------------------------------
@dataclass
class Recipient:
    name: str
    email: str


# =============================================================================
# Tool parameters
# =============================================================================
class ToolParams(BaseModel):
    """Base for per-operation parameter structs."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class ContactIdParams(ToolParams):
    contact_id: str


class CreateContactParams(ToolParams):
    email: str
    name: str


class UpdateContactParams(ToolParams):
    contact_id: str
    email: str = ""
    name: str = ""


class SignatureIdParams(ToolParams):
    signature_id: str


class CreateSignatureParams(ToolParams):
    templates: str
    recipients: str
    body: str
    subject: str
    expires_in_days: int | float = 7
    delivery_type: Optional[Literal["email", "sms", "wizard"]] = None
    event_url: Optional[str] = None
    signing_mode: Optional[Literal["sequential", "parallel"]] = None


class CancelSignatureParams(ToolParams):
    signature_id: str
    reason: str = ""
