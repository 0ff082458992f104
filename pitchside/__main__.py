"""Entry point for pitchside package."""

import argparse
import asyncio
import logging

from pitchside.config import configure_logging, get_config

logger = logging.getLogger("pitchside")


def _log_update(update) -> None:
    """Log each event as it arrives on the feed."""
    if update.event is not None:
        minute = int(update.time // 60)
        logger.info(
            "%d' %s  [Home %d - %d Away]",
            minute, update.event.message, update.score.home, update.score.away,
        )


def main() -> None:
    """Main entry point for the Pitchside application."""
    config = get_config()

    parser = argparse.ArgumentParser(
        description="Pitchside - live football match simulation feed",
        prog="pitchside",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.log_level,
        help=f"Logging level (default: {config.log_level})",
    )
    subparsers = parser.add_subparsers(dest="command")

    serve = subparsers.add_parser("serve", help="Run the match feed server")
    serve.add_argument("--host", type=str, default=config.host, help=f"Bind address (default: {config.host})")
    serve.add_argument("--port", type=int, default=config.port, help=f"Port (default: {config.port})")
    serve.add_argument("--reload", action="store_true", help="Reload on code changes")

    watch = subparsers.add_parser("watch", help="Follow a match feed and log its events")
    watch.add_argument("--url", type=str, default=config.feed_url, help=f"Feed URL (default: {config.feed_url})")

    args = parser.parse_args()
    configure_logging(args.log_level)

    errors = config.validate()
    if errors:
        parser.error("; ".join(errors))

    if args.command == "watch":
        from pitchside.client import MatchFeedClient

        client = MatchFeedClient(
            args.url,
            on_update=_log_update,
            base_delay=config.reconnect_base_delay,
            max_delay=config.reconnect_max_delay,
            max_attempts=config.max_reconnect_attempts,
        )
        try:
            asyncio.run(client.run())
        except KeyboardInterrupt:
            pass
    else:
        from pitchside.api.main import run_api

        host = getattr(args, "host", config.host)
        port = getattr(args, "port", config.port)
        run_api(host=host, port=port, reload=getattr(args, "reload", False))


if __name__ == "__main__":
    main()
