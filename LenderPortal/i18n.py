# LenderPortal/i18n.py

import json
import logging
import os

from flask import current_app, g

logger = logging.getLogger(__name__)


class Translator:
    """Dotted-key message lookup.

    ``get("lender.profile.save")`` walks ``messages["lender"]["profile"]["save"]``.
    Keys without a message come back unchanged so an untranslated label still
    renders something readable.
    """

    def __init__(self, messages=None, locale="en"):
        self.messages = messages or {}
        self.locale = locale

    def has(self, key):
        return isinstance(self._lookup(key), str)

    def get(self, key):
        if not key:
            return ""

        found = self._lookup(key)
        if isinstance(found, str):
            return found
        return key

    def _lookup(self, key):
        node = self.messages
        for part in str(key).split("."):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node


def load_messages(folder, locale):
    path = os.path.join(folder, f"{locale}.json")
    if not os.path.exists(path):
        logger.warning("No translation file for locale %r at %s", locale, path)
        return {}

    with open(path, encoding="utf-8") as f:
        return json.load(f)


def build_translator(config):
    folder = config.get("TRANSLATION_FOLDER")
    locale = config.get("TRANSLATION_LOCALE") or "en"
    fallback = config.get("FALLBACK_LOCALE") or locale

    messages = load_messages(folder, locale)
    if not messages and fallback != locale:
        locale, messages = fallback, load_messages(folder, fallback)

    return Translator(messages, locale=locale)


def get_translator():
    """Per-request translator built from the current app config."""
    if "translator" not in g:
        g.translator = build_translator(current_app.config)
    return g.translator


def lang(key):
    return get_translator().get(key)
