# =============================================================================
# signaturit/__init__.py
# =============================================================================
# This package contains ALL the request/response translation logic for the
# Signaturit API: configuration, the HTTP client, argument extraction, the
# data models, and one function per contact/signature operation.
#
# Nothing in this package imports FastMCP.  Every operation has the same
# shape: (client, argument bag) in, text out, SignaturitError on failure,
# so it can be driven by the MCP server or called directly from tests.
# =============================================================================
