# LenderPortal/app.py

import os
import importlib
import logging

from flask import Flask, Blueprint, redirect, url_for

from LenderPortal.config import Config
from LenderPortal.extensions import db, login_manager, migrate, csrf
from LenderPortal.html import get_bootstrap_form
from LenderPortal.models import User

logger = logging.getLogger(__name__)


# ---------------------------------------------------------
# App Factory
# ---------------------------------------------------------
def create_app(config_object=Config):
    base_dir = os.path.abspath(os.path.dirname(__file__))

    app = Flask(
        __name__,
        template_folder=os.path.join(base_dir, "templates"),
        static_folder=os.path.join(base_dir, "static"),
        instance_relative_config=True,
    )

    # Core configuration
    app.config.from_object(config_object)
    configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    csrf.init_app(app)

    # Login manager settings
    login_manager.login_view = None
    login_manager.login_message = "Please log in to continue."

    @login_manager.user_loader
    def load_user(user_id):
        try:
            return db.session.get(User, int(user_id))
        except (TypeError, ValueError):
            logger.warning("Rejected malformed user id in session: %r", user_id)
            return None

    # Register all route blueprints dynamically
    register_blueprints(app)

    @app.route("/")
    def home_redirect():
        return redirect(url_for("lender.edit_profile"))

    # Context processors
    @app.context_processor
    def inject_form_builder():
        return dict(bootstrap_form=get_bootstrap_form())

    return app


def configure_logging(app):
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.setLevel(level)


# ---------------------------------------------------------
# Dynamic Blueprint Registration
# ---------------------------------------------------------
def register_blueprints(app):
    routes_dir = os.path.join(os.path.dirname(__file__), "routes")
    if not os.path.exists(routes_dir):
        logger.warning("No routes folder found.")
        return

    for file in sorted(os.listdir(routes_dir)):
        if file.endswith(".py") and not file.startswith("__"):
            mod = importlib.import_module(f"LenderPortal.routes.{file[:-3]}")
            for attr in dir(mod):
                obj = getattr(mod, attr)
                if isinstance(obj, Blueprint) and obj.name not in app.blueprints:
                    app.register_blueprint(obj)
                    logger.debug("Registered blueprint: %s -> %s", obj.name, obj.url_prefix)
