from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .common.logging_config import configure_logging
from .config import get_settings_module
from .container import Container, build_container
from .gateway.connection import ApiConfig
from .pages.controller import register as register_pages

logger = logging.getLogger(__name__)


def create_app(*, settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    api_config = ApiConfig(
        base_url=str(getattr(settings, "API_BASE_URL")),
        timeout=int(getattr(settings, "REQUEST_TIMEOUT", 30)),
        notification_timeout=float(getattr(settings, "NOTIFICATION_TIMEOUT", 5)),
    )
    if not api_config.base_url:
        logger.warning("API_BASE_URL is empty; every page load will fail")
    logger.info("settings=%s api=%s", settings_module, api_config.base_url)

    container = container or build_container(api_config=api_config)
    app.extensions["school_admin"] = container

    register_pages(app, container)

    return app
