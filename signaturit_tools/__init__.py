# =============================================================================
# signaturit_tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool wrappers.
#
# ARCHITECTURAL ROLE:
#   signaturit_tools/ is the "translation layer" between the MCP protocol and
#   the signaturit/ operations.  It:
#     1. Declares each tool's name, parameters, defaults and description
#     2. Packs the call's parameters into an argument bag
#     3. Calls the matching operation and returns its text
#     4. Turns a SignaturitError into a ToolError for the MCP client
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT build HTTP requests or read responses (signaturit/ does)
#   - They do NOT retry or swallow errors
# =============================================================================
