"""Application entry point for the SAMARTHAA Legal backend server."""

import structlog

from samarthaa.app import App
from samarthaa.config import Config
from samarthaa.logging import setup_logging
from samarthaa.web.runner import run_server

logger = structlog.get_logger(__name__)


def main() -> None:
    config = Config()
    setup_logging(config.debug)
    if not config.llm_api_key:
        logger.warning("llm_api_key_missing")
    if not config.elevenlabs_api_key:
        logger.warning("tts_disabled", reason="elevenlabs_api_key not set")
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
