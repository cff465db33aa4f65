# =============================================================================
# signaturit_tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Declares every MCP tool the server exposes.  Each tool is a thin wrapper
#   around a function in signaturit/contacts.py or signaturit/signatures.py:
#   it logs the call, packs its parameters into an argument bag, runs the
#   operation, and returns the text summary.
#
# HOW IT WORKS (the flow):
#   1. An MCP client calls a tool by name (e.g., "get_signature")
#   2. FastMCP validates the wire-level call against the tool's signature
#   3. The wrapper below drops unset optional parameters and runs the
#      operation in a worker thread with the injected SignaturitClient
#   4. The text result goes back to the client; a SignaturitError becomes a
#      ToolError whose message is passed through verbatim
#
# TOOL NAMING CONVENTIONS:
#   - list_* / get_*  → read-only
#   - create_* / update_* / delete_* / cancel_* / send_*  → write operations
#
# RUNNING THIS SERVER:
#   a) python main.py               (loads .env, then serves on stdio)
#   b) python -m signaturit_tools.mcp_server
# =============================================================================

import asyncio
import logging
import sys
from typing import Any, Callable, Mapping

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from signaturit import contacts, signatures
from signaturit.client import SignaturitClient
from signaturit.config import Settings
from signaturit.errors import SignaturitError

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR: STDOUT carries the MCP JSON messages on the stdio
# transport, and anything else written there corrupts the stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for responses
#     - YELLOW for intermediate status messages
#     - RED for errors
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RED = "\033[31m"      # Errors
_RESET = "\033[0m"     # Reset to default terminal color

Operation = Callable[[SignaturitClient, Mapping[str, Any]], str]


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: str) -> str:
    """Log the first line of the tool response in GREEN, then return it."""
    first_line = result.splitlines()[0] if result else ""
    logging.info(f"{_GREEN}  ← {tool_name} response: {first_line}{_RESET}")
    return result


def _log_error(tool_name: str, error: Exception) -> None:
    logging.error(f"{_RED}  ✗ {tool_name} failed: {type(error).__name__}: {error}{_RESET}")


async def _invoke(client: SignaturitClient, tool_name: str, operation: Operation, **params) -> str:
    """Run one operation with the call's parameters as its argument bag.

    The operation blocks on its HTTP exchange, so it runs in a worker thread
    and concurrent tool calls don't wait on each other.
    """
    _log_request(tool_name, **params)
    bag = {key: value for key, value in params.items() if value is not None}
    _log_status(f"{client.base_url} ({len(bag)} argument(s))")
    try:
        result = await asyncio.to_thread(operation, client, bag)
    except SignaturitError as exc:
        _log_error(tool_name, exc)
        raise ToolError(str(exc)) from exc
    return _log_response(tool_name, result)


# =============================================================================
# Server factory
# =============================================================================
# The client (and with it the credential) is injected, so tests can build a
# server around a client whose transport is stubbed.
# =============================================================================
def build_server(client: SignaturitClient) -> FastMCP:
    """Create the FastMCP server and register every contact/signature tool."""
    mcp = FastMCP(
        "signaturit-tools",
        instructions="Manage Signaturit contacts and e-signature requests.",
    )

    # =========================================================================
    # CONTACT TOOLS
    # =========================================================================
    @mcp.tool()
    async def list_contacts() -> str:
        """Get all contacts from your Signaturit account.

        Returns:
            One line per contact: "- name (email) [ID: id]".
        """
        return await _invoke(client, "list_contacts", contacts.list_contacts)

    @mcp.tool()
    async def get_contact(contact_id: str) -> str:
        """Get a single contact by ID.

        Args:
            contact_id: ID of the contact to retrieve
                (e.g., "e8125099-871e-11e6-88d5-06875124f8dd").
        """
        return await _invoke(client, "get_contact", contacts.get_contact, contact_id=contact_id)

    @mcp.tool()
    async def create_contact(email: str, name: str) -> str:
        """Create a new contact in your Signaturit account.

        Args:
            email: Email of the new contact (e.g., "john.doe@signaturit.com").
            name: Name of the new contact (e.g., "John Doe").
        """
        return await _invoke(
            client, "create_contact", contacts.create_contact, email=email, name=name,
        )

    @mcp.tool()
    async def update_contact(contact_id: str, email: str = "", name: str = "") -> str:
        """Update an existing contact's information.

        Only the fields given a non-empty value are changed.

        Args:
            contact_id: ID of the contact to update.
            email: New email for the contact (optional).
            name: New name for the contact (optional).
        """
        return await _invoke(
            client, "update_contact", contacts.update_contact,
            contact_id=contact_id, email=email, name=name,
        )

    @mcp.tool()
    async def delete_contact(contact_id: str) -> str:
        """Delete a contact from your Signaturit account.

        Args:
            contact_id: ID of the contact to delete.
        """
        return await _invoke(
            client, "delete_contact", contacts.delete_contact, contact_id=contact_id,
        )

    # =========================================================================
    # SIGNATURE TOOLS
    # =========================================================================
    @mcp.tool()
    async def get_signature(signature_id: str) -> str:
        """Retrieve a single signature request by ID.

        Returns one line per document (who it was sent to and its status),
        the document's events indented below it, and a final
        "Complete: true|false" line that is true only when every document
        has been completed.

        Args:
            signature_id: ID of the signature request to retrieve.
        """
        return await _invoke(
            client, "get_signature", signatures.get_signature, signature_id=signature_id,
        )

    @mcp.tool()
    async def create_signature(
        templates: str,
        recipients: str,
        body: str,
        subject: str,
        expires_in_days: int | float = 7,
        delivery_type: str | None = None,
        event_url: str | None = None,
        signing_mode: str | None = None,
    ) -> str:
        """Create a new signature request from templates (no file uploads).

        Args:
            templates: Comma-separated list of template IDs or hashtags,
                e.g. "#NDA,abc123".
            recipients: JSON list of signers, each with "name" and "email",
                e.g. '[{"name": "John Doe", "email": "john@example.com"}]'.
            body: Body message for the email or SMS (HTML allowed in email).
            subject: Subject for the email request.
            expires_in_days: Days before the request expires (1-365, default 7).
            delivery_type: "email" (default), "sms" or "wizard". OPTIONAL.
            event_url: Callback URL for real-time notifications. OPTIONAL.
            signing_mode: "sequential" (default) or "parallel". OPTIONAL.
        """
        return await _invoke(
            client, "create_signature", signatures.create_signature,
            templates=templates, recipients=recipients, body=body, subject=subject,
            expires_in_days=expires_in_days, delivery_type=delivery_type,
            event_url=event_url, signing_mode=signing_mode,
        )

    @mcp.tool()
    async def send_signature_reminder(signature_id: str) -> str:
        """Send a reminder email/SMS to the signers of a pending signature.

        Args:
            signature_id: ID of the signature request to remind.
        """
        return await _invoke(
            client, "send_signature_reminder", signatures.send_signature_reminder,
            signature_id=signature_id,
        )

    @mcp.tool()
    async def cancel_signature(signature_id: str, reason: str = "") -> str:
        """Cancel an in-progress signature so it can no longer be signed.

        Args:
            signature_id: ID of the signature request to cancel.
            reason: Optional reason for canceling the signature request.
        """
        return await _invoke(
            client, "cancel_signature", signatures.cancel_signature,
            signature_id=signature_id, reason=reason,
        )

    return mcp


# =============================================================================
# Server entry point
# =============================================================================
def run() -> None:
    """Read settings from the environment and serve the tools over stdio."""
    settings = Settings()
    configure_logging(settings.log_level)
    logging.info(
        f"Starting signaturit-tools against {settings.base_url}"
        f"{' (sandbox)' if settings.sandbox else ''}"
    )
    with SignaturitClient(settings) as client:
        build_server(client).run()


if __name__ == "__main__":
    run()
