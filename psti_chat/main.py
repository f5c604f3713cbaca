"""Main application entry point.

Runs the NiceGUI chat client, or a one-off connection check against the
backend when RUN_MODE=check. Environment variables are loaded from .env file.
"""

import asyncio
import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

from psti_chat.config import ServerSettings, get_gateway_settings, get_server_settings  # noqa: E402
from psti_chat.gateway import BackendGateway, run_connection_check  # noqa: E402

logger = logging.getLogger(__name__)


def configure_logging(server: ServerSettings) -> None:
    """Configure root logging to stdout at the configured level."""
    logging.basicConfig(
        level=server.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def run_ui(gateway: BackendGateway, server: ServerSettings) -> None:
    """Serve the chat page with NiceGUI."""
    from nicegui import ui

    from psti_chat.ui import register_chat_page

    register_chat_page(gateway)

    logger.info(f"Chat UI available at http://localhost:{server.port}/")
    logger.info(f"Backend: {gateway.base_url}")

    ui.run(
        title=server.title,
        favicon="🤖",
        host=server.host,
        port=server.port,
        reload=False,
        show=False,
    )


def run_check(gateway: BackendGateway) -> int:
    """Exercise /health and /chat once. Returns a process exit code."""
    ok = asyncio.run(run_connection_check(gateway))
    return 0 if ok else 1


def main() -> None:
    """Application entry point.

    Set RUN_MODE=check to test the backend connection and exit.
    Default mode serves the chat UI.
    """
    server = get_server_settings()
    configure_logging(server)

    mode = os.getenv("RUN_MODE", "ui").lower()
    gateway = BackendGateway(get_gateway_settings())

    logger.info(f"Starting Chatbot PSTI in {mode} mode")

    if mode == "check":
        sys.exit(run_check(gateway))
    run_ui(gateway, server)


if __name__ == "__main__":
    main()
