#!/usr/bin/env python3
import argparse
import asyncio
import sys
from typing import Any, Optional, Sequence

from es_connector.core.logger import logger, setup_logging
from es_connector.services.connector import Connector


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wait-for-es",
        description="Block until Elasticsearch answers.",
    )
    parser.add_argument("--hosts", help="comma separated hosts, e.g. es1,es2:9201")
    parser.add_argument("--port", type=int, help="port for hosts given without one")
    parser.add_argument("--max-retries", type=int)
    parser.add_argument("--retry-after", type=int, help="first backoff delay, ms")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> dict[str, Any]:
    user_config: dict[str, Any] = {}
    if args.hosts:
        user_config["hosts"] = args.hosts
        if args.port is not None:
            user_config["port"] = args.port
    if args.max_retries is not None:
        user_config["max_retries"] = args.max_retries
    if args.retry_after is not None:
        user_config["retry_after"] = args.retry_after
    return user_config


async def wait_for_es(user_config: dict[str, Any]) -> bool:
    client = await Connector(user_config).connect()
    if client is None:
        return False

    await client.close()
    logger.info("Elasticsearch is ready")
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    setup_logging()
    args = parse_args(argv)
    ready = asyncio.run(wait_for_es(build_config(args)))
    return 0 if ready else 1


if __name__ == "__main__":
    sys.exit(main())
