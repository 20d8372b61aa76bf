from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module

from .container import build_container
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


def main() -> int:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "WARNING"))
    logger.debug("settings=%s", settings_module)

    container = build_container(settings=settings)
    return container.menu.run()
