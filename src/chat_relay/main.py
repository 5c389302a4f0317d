"""Command line entry point running the relay under uvicorn."""

from __future__ import annotations

import argparse
import logging

from dotenv import load_dotenv


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chat-relay",
        description="Run the multi-provider chat relay server",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=10000, help="Port to bind (default: 10000)")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload (development only)")
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["critical", "error", "warning", "info", "debug"],
        help="Log level for the server (default: info)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint.

    Examples:
      chat-relay --port 10000
      python -m chat_relay.main --host 0.0.0.0 --reload
    """
    args = build_arg_parser().parse_args(argv)

    load_dotenv()
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Imported lazily so that importing this module doesn't require uvicorn.
    import uvicorn

    uvicorn.run(
        "chat_relay.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
