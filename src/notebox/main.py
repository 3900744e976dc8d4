"""Command line entry point for Notebox."""

import argparse
from pathlib import Path


def main():
    """Parse options, open the note store and serve the API."""
    from notebox.core import config

    parser = argparse.ArgumentParser(
        description="Notebox - named text notes over HTTP",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  notebox                               # Serve on 0.0.0.0:8000
  notebox --port 8080                   # Serve on a custom port
  notebox --cache /var/lib/notes.json   # Use another notes file
""",
    )

    parser.add_argument(
        "-H",
        "--host",
        default=None,
        help=f"Host to bind the API server to (default: {config.NOTEBOX_HOST})",
    )

    parser.add_argument(
        "-p",
        "--port",
        type=int,
        default=None,
        help=f"Port for the API server (default: {config.NOTEBOX_PORT})",
    )

    parser.add_argument(
        "-c",
        "--cache",
        type=Path,
        default=None,
        help=f"Path of the JSON notes file (default: {config.NOTES_CACHE_PATH})",
    )

    args = parser.parse_args()

    logger = config.setup_logging()

    host = args.host if args.host is not None else config.NOTEBOX_HOST
    port = args.port if args.port is not None else config.NOTEBOX_PORT
    cache = args.cache if args.cache is not None else config.NOTES_CACHE_PATH

    import uvicorn

    from notebox.api.app import create_app
    from notebox.core.store import NoteStore

    cache.parent.mkdir(parents=True, exist_ok=True)
    store = NoteStore(cache)

    logger.info("Host: %s, Port: %s, Cache: %s", host, port, cache)
    uvicorn.run(create_app(store), host=host, port=port, reload=False)


if __name__ == "__main__":
    main()
