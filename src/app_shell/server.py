import argparse
import logging
import sys

import uvicorn

from src.api.main import create_app
from src.app_shell.config import ConfigError, configure_logging, get_settings, parse_port

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simple Category API server")
    parser.add_argument("--host", help="Bind address (overrides HOST)")
    parser.add_argument("--port", help="Listening port (overrides PORT)")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
        port = parse_port(args.port) if args.port is not None else settings.port
    except ConfigError as e:
        logging.basicConfig(level=logging.INFO)
        logger.critical(f"Configuration invalid: {e}")
        sys.exit(1)

    host = args.host or settings.host
    configure_logging(settings)

    app = create_app()
    logger.info(f"server running at : {port}")
    uvicorn.run(app, host=host, port=port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
