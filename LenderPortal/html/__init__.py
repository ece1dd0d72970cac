# LenderPortal/html/__init__.py
from flask import current_app, g, request, url_for
from flask_wtf.csrf import generate_csrf

from LenderPortal.html.builders import HtmlBuilder, FormBuilder
from LenderPortal.html.bootstrap_form import BootstrapFormBuilder
from LenderPortal.html.message_bag import (
    MessageBag,
    flash_message_bag,
    get_flashed_message_bag,
    flash_old_input,
    get_old_input,
)
from LenderPortal.i18n import get_translator


def _csrf_token():
    if not current_app.config.get("WTF_CSRF_ENABLED", True):
        return None
    return generate_csrf()


def get_bootstrap_form():
    """One builder per request; its translation domain never outlives it."""
    if "bootstrap_form" not in g:
        html = HtmlBuilder()
        form = FormBuilder(
            html,
            url_for=url_for,
            csrf_token=_csrf_token,
            old_input=get_old_input,
            current_url=lambda: request.path,
        )
        g.bootstrap_form = BootstrapFormBuilder(
            html,
            form,
            current_app.config,
            errors=get_flashed_message_bag,
            translator=get_translator(),
        )
    return g.bootstrap_form


__all__ = [
    "HtmlBuilder",
    "FormBuilder",
    "BootstrapFormBuilder",
    "MessageBag",
    "flash_message_bag",
    "get_flashed_message_bag",
    "flash_old_input",
    "get_old_input",
    "get_bootstrap_form",
]
