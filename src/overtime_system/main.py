from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from loguru import logger

from .common.http import register_error_handlers
from .common.logging import configure_logging
from .config import get_settings_module
from .container import Container, build_container
from .database.bootstrap import apply_schema
from .employees.controller import register as register_employees
from .overtime.controller import register as register_overtime
from .payroll.controller import register as register_payroll


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["CONFIDENTIAL_DEFAULT"] = bool(getattr(settings, "CONFIDENTIAL_DEFAULT", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info(
        f"settings={settings_module} db={db_config.get('user')}@{db_config.get('host')}:"
        f"{db_config.get('port', 3306)}/{db_config.get('database')}"
    )

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
        container = build_container(db_config=db_config)

    register_error_handlers(app)
    register_employees(app, container)
    register_overtime(app, container)
    register_payroll(app, container)

    return app
