#!/usr/bin/env python3
"""Video Catalog - read-only video metadata API."""

import argparse
import asyncio
import logging
import random
import signal
import sys

import uvicorn

from config import load_config, Config
from data.catalog_store import CatalogLoadError, load_catalog
from data.query_engine import CatalogQueryEngine
from web.app import create_app

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("videocatalog")


class VideoCatalogServer:
    """Main orchestrator - loads the catalog once, then runs FastAPI."""

    def __init__(self, config: Config):
        self.config = config
        self.engine = None
        self.server = None
        self.running = False

    def setup(self) -> None:
        """Load the catalog and build the query engine.

        Raises CatalogLoadError; no partial catalog is ever served.
        """
        cat_cfg = self.config.catalog
        catalog = load_catalog(cat_cfg.path)
        if len(catalog) == 0:
            logger.warning("Catalog %s is empty; /random will return 500", cat_cfg.path)

        rng = random.Random(cat_cfg.seed) if cat_cfg.seed is not None else random.Random()
        if cat_cfg.seed is not None:
            logger.info("Using fixed shuffle seed %d", cat_cfg.seed)
        self.engine = CatalogQueryEngine(
            catalog, rng=rng, default_page_size=cat_cfg.default_page_size,
        )

    async def run(self) -> None:
        """Start everything."""
        self.running = True
        self.setup()

        app = create_app(self.engine, self.config.web, self.config.catalog)
        uv_config = uvicorn.Config(
            app,
            host=self.config.web.host,
            port=self.config.web.port,
            log_level="info",
        )
        self.server = uvicorn.Server(uv_config)

        logger.info(
            f"Video Catalog started - {len(self.engine)} videos on "
            f"http://{self.config.web.host}:{self.config.web.port}"
        )

        try:
            await self.server.serve()
        except asyncio.CancelledError:
            logger.info("Server cancelled")

    async def stop(self) -> None:
        """Stop all components."""
        self.running = False
        if self.server:
            self.server.should_exit = True
        logger.info("Video Catalog stopped")


async def main() -> None:
    parser = argparse.ArgumentParser(description="Video Catalog")
    parser.add_argument("-c", "--config", help="Path to config file", default=None)
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = load_config(args.config)
    app = VideoCatalogServer(config)

    loop = asyncio.get_running_loop()

    def signal_handler():
        asyncio.create_task(app.stop())

    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, signal_handler)
        except NotImplementedError:
            signal.signal(sig, lambda s, f: signal_handler())

    try:
        await app.run()
    except CatalogLoadError as e:
        logger.error("%s", e)
        sys.exit(1)
    except KeyboardInterrupt:
        await app.stop()


def run() -> None:
    """Console-script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
