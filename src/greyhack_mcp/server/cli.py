import asyncio

from dotenv import load_dotenv

from greyhack_mcp.core import Settings, setup_logging
from greyhack_mcp.core.logger import get_logger
from .mcp_server import create_server

logger = get_logger(__name__)


def main() -> None:
    """
    Entry point of the ``greyhack-mcp`` command. Reads ``.env`` and the
    environment, then serves the Grey Hack tools over stdio.
    """
    load_dotenv()
    settings = Settings()
    setup_logging(settings.log_level)

    server = create_server(settings)
    try:
        asyncio.run(server.run_stdio())
    except KeyboardInterrupt:
        logger.info("Interrupted; shutting down.")


if __name__ == "__main__":
    main()
