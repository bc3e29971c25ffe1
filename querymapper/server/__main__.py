"""
Command-line entry point for the QueryMapper server.

Usage:
    python -m querymapper.server [OPTIONS]

Options:
    --host TEXT         Host to bind to (default: 0.0.0.0)
    --port INTEGER      Port to bind to (default: 8000)
    --config PATH       YAML settings file
    --strict            Reject malformed query segments with HTTP 400
    --reload            Enable auto-reload
    --workers INTEGER   Number of workers
    --log-level TEXT    Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
"""

import argparse
import os
import uvicorn

from config import load_config
from config.settings import LOG_LEVELS
from .app import create_app
from .config import ServerConfig, set_config


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="QueryMapper Server - query string filter inspection API"
    )

    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host to bind to (default: from settings, 0.0.0.0)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind to (default: from settings, 8000)"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a YAML settings file"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject malformed query segments instead of skipping them"
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Number of worker processes"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=list(LOG_LEVELS),
        help="Log level"
    )

    return parser


def config_from_args(args: argparse.Namespace) -> ServerConfig:
    """Merge the YAML settings with command-line overrides."""
    config = ServerConfig.from_settings(load_config(args.config))
    if args.host is not None:
        config.host = args.host
    if args.port is not None:
        config.port = args.port
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.strict:
        config.strict = True
    config.reload = args.reload
    config.workers = args.workers
    return config


def serve(config: ServerConfig) -> None:
    """
    Run uvicorn with the given configuration.

    A single in-process worker gets an app built from ``config`` directly.
    Reloading or multiple workers import the app in child processes, so the
    configuration travels through the environment to the ``create_app``
    factory.
    """
    set_config(config)

    if config.reload or config.workers > 1:
        os.environ.update(config.to_env())
        uvicorn.run(
            "querymapper.server.app:create_app",
            factory=True,
            host=config.host,
            port=config.port,
            reload=config.reload,
            workers=config.workers,
            log_level=config.log_level.lower(),
        )
        return

    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


def main():
    args = build_arg_parser().parse_args()
    config = config_from_args(args)

    print(f"""
QueryMapper Server
  Host:       {config.host}
  Port:       {config.port}
  Predefined: {', '.join(config.predefined_parameters)}
  Strict:     {config.strict}
  API Docs:   http://{config.host}:{config.port}/docs
    """)

    serve(config)


if __name__ == "__main__":
    main()
