# =============================================================================
# main.py  —  Entry Point for the Signaturit MCP Tool Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#   (or the installed console script: signaturit-mcp)
#
# WHAT HAPPENS:
#   1. Loads a .env file into the environment (SIGNATURIT_SECRET_TOKEN, ...)
#   2. Builds Settings and the SignaturitClient (signaturit_tools/mcp_server.py)
#   3. Registers every contact/signature tool on a FastMCP server
#   4. Serves them over stdio until the MCP client disconnects
# =============================================================================

from dotenv import load_dotenv

# Load environment variables from .env file BEFORE Settings is built.
load_dotenv()

from signaturit_tools.mcp_server import run


def main() -> None:
    run()


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    main()
