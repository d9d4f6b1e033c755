#!/usr/bin/env python3
# scripts/update_site.py
import os
import sys
import logging

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from src.config.settings import Settings
from src.publish.updater import build_components, update_site

logger = logging.getLogger("update_site")


def main() -> int:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = Settings()
    try:
        source, predictor, renderer, patcher = build_components(settings)
        count = update_site(settings.index_path, source, predictor, renderer, patcher, settings=settings)
    except Exception:
        logger.exception("Update failed")
        return 1
    logger.info("✅ Updated %s with %d matches from target leagues", settings.index_path, count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
