#!/usr/bin/env python
"""
Hooked Sentiment API Server Runner.

Usage:
    python run_server.py

Or with PM2:
    pm2 start run_server.py --interpreter python
"""

import sys
import logging
import uvicorn

from sentiment import ServiceSettings

settings = ServiceSettings.from_env()

# Setup logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s | %(levelname)s | %(name)s | %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

logger = logging.getLogger(__name__)


def main():
    """Run the API server."""
    logger.info(f"Starting Hooked Sentiment API on {settings.host}:{settings.port}")
    logger.info(f"Hook configuration: {settings.hooks_path}")

    try:
        uvicorn.run(
            "api.main:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
            access_log=True,
        )
    except Exception as e:
        logger.error(f"Failed to start server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
