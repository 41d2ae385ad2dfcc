"""Запустить HTTP-сервер DocDB."""
from __future__ import annotations

import argparse
import logging

import uvicorn

from infrastructure.config import DocDBConfig, build_default_container
from ui.api.main import create_app
from ui.logging_utils import setup_logging

logger = logging.getLogger(__name__)


def parse_args(config: DocDBConfig) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--host",
        default=config.host,
        help=f"Адрес для прослушивания (по умолчанию: {config.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=config.port,
        help=f"Порт (по умолчанию: {config.port})",
    )
    return parser.parse_args()


def main() -> None:
    setup_logging()
    config = DocDBConfig.from_env()
    args = parse_args(config)
    app = create_app(build_default_container(config))
    logger.info("Start server on %s:%d", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port, log_config=None, timeout_graceful_shutdown=15)
    logger.info("Stop server")


if __name__ == "__main__":
    main()
