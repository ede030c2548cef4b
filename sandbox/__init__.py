"""
Sandbox replica of the admin panel and storefront.

The sandbox serves the same DOM contract (roles, labels, CSS markers) as the
live application so the uiflows helpers can be exercised offline. It is
built with the application factory pattern.
"""

import logging
import os
from typing import Any

from flask import Flask
from flask_sqlalchemy import SQLAlchemy

from sandbox.config import get_config

# Initialize SQLAlchemy without binding to app
db = SQLAlchemy()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(config_name: str | None = None, overrides: dict[str, Any] | None = None) -> Flask:
    """
    Create and configure the sandbox application.

    Args:
        config_name: Configuration environment name.
        overrides: Config values applied after the configuration class
                   (database URI, admin credentials).

    Returns:
        Configured Flask application with freshly seeded data.
    """
    app = Flask(__name__, instance_relative_config=True)

    config_class = get_config(config_name)
    app.config.from_object(config_class)
    if overrides:
        app.config.update(overrides)

    logger.info(f"Creating sandbox with config: {config_class.__name__}")

    os.makedirs(app.instance_path, exist_ok=True)

    db.init_app(app)

    from sandbox.routes.api import api_bp
    from sandbox.routes.views import views_bp

    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(views_bp)

    from sandbox.models import seed_categories

    with app.app_context():
        db.drop_all()
        db.create_all()
        seed_categories(app.config["SEED"])
        logger.info("Sandbox database reset and seeded")

    return app
