"""Command line entry point for the preview server."""

import argparse
import sys
from pathlib import Path

import uvicorn

from .api.main import create_app
from .config import Config, PathConfig, ServerConfig, LOG_LEVELS
from .exceptions import ConfigurationError
from .loader import PageLoader
from .logging_config import setup_logging, logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Static HTML preview server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Serve on the default address (0.0.0.0:5000)
  python serve_preview.py

  # Serve pages from another directory on another port
  python serve_preview.py --pages-dir ./build --port 8080

  # Check that all page files are present
  python serve_preview.py --check
        """,
    )
    parser.add_argument(
        "--host",
        help="Interface to bind (default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port", "-p",
        type=int,
        help="Port to listen on (default: 5000)",
    )
    parser.add_argument(
        "--pages-dir", "-d",
        type=Path,
        help="Directory holding index.html, embed.html and dashboard.html",
    )
    parser.add_argument(
        "--log-level", "-l",
        choices=list(LOG_LEVELS),
        help="Log level (default: info)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Report missing page files and exit",
    )
    return parser


def load_config(args) -> Config:
    """Build configuration, letting command line flags override the environment."""
    # Only flags that were given; the rest come from the environment
    overrides = {}
    if args.host:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if args.log_level:
        overrides["log_level"] = args.log_level
    server = ServerConfig(**overrides)

    paths = PathConfig(pages_dir=args.pages_dir) if args.pages_dir else PathConfig()

    return Config(paths=paths, server=server)


def cmd_check(config: Config) -> int:
    """Report which page files are present."""
    loader = PageLoader(config)
    missing = loader.missing_pages()

    print(f"Pages directory: {loader.pages_dir}")
    for page in loader.routes.pages:
        status = "missing" if page in missing else "ok"
        print(f"  {page.filename:<16} {status}")

    return 1 if missing else 0


def cmd_serve(config: Config) -> int:
    """Run the server until interrupted."""
    app = create_app(config)

    uvicorn.run(
        app,
        host=config.server.host,
        port=config.server.port,
        log_level=config.server.log_level,
    )
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except ConfigurationError as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1

    if args.check:
        return cmd_check(config)

    setup_logging(config.paths.logs_dir, config.server.log_level)

    try:
        return cmd_serve(config)
    except KeyboardInterrupt:
        print("\nServer stopped.")
        return 0
    except Exception as e:
        logger.error(f"Server failed: {e}")
        print(f"\nError: {e}", file=sys.stderr)
        return 1
