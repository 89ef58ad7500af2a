import argparse

import uvicorn

from .config import settings
from .logger import logger


def main(argv=None):
    parser = argparse.ArgumentParser(description="Serve the wine list.")
    parser.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Port (default: {settings.port})")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    args = parser.parse_args(argv)

    logger.info(f"Serving wine list from {settings.source} on http://{args.host}:{args.port}")
    uvicorn.run("cellar.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
