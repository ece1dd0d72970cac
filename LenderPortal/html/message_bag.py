# LenderPortal/html/message_bag.py

import json

from flask import flash, get_flashed_messages
from markupsafe import Markup, escape

ERRORS_CATEGORY = "form-errors"
OLD_INPUT_CATEGORY = "form-old-input"


class MessageBag:
    """Validation messages keyed by field name."""

    def __init__(self, messages=None):
        self._messages = {}
        for key, values in (messages or {}).items():
            if isinstance(values, str):
                values = [values]
            for message in values:
                self.add(key, message)

    def add(self, key, message):
        bucket = self._messages.setdefault(key, [])
        if message not in bucket:
            bucket.append(message)
        return self

    def has(self, key):
        return bool(self._messages.get(key))

    def get(self, key, format=None):
        return [self._format(m, format) for m in self._messages.get(key, [])]

    def first(self, key, format=None):
        messages = self._messages.get(key)
        if not messages:
            return ""
        return self._format(messages[0], format)

    def all(self, format=None):
        return [self._format(m, format) for values in self._messages.values() for m in values]

    def keys(self):
        return list(self._messages)

    def any(self):
        return any(self._messages.values())

    def to_dict(self):
        return {key: list(values) for key, values in self._messages.items()}

    def __bool__(self):
        return self.any()

    def __len__(self):
        return sum(len(values) for values in self._messages.values())

    def __contains__(self, key):
        return self.has(key)

    def __repr__(self):
        return f"<MessageBag {self.to_dict()!r}>"

    @staticmethod
    def _format(message, format):
        if format is None:
            return message
        return Markup(format).format(message=escape(message))


# =========================================================
# 📨 Session transport (visible for exactly one request)
# =========================================================

def _flashed_payload(category):
    payloads = get_flashed_messages(category_filter=[category])
    if not payloads:
        return {}
    try:
        data = json.loads(payloads[-1])
    except (TypeError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def flash_message_bag(bag):
    flash(json.dumps(bag.to_dict()), ERRORS_CATEGORY)


def get_flashed_message_bag():
    """Errors flashed by the previous request, or ``None`` on a clean load."""
    data = _flashed_payload(ERRORS_CATEGORY)
    if not data:
        return None
    return MessageBag(data)


def flash_old_input(data):
    flash(json.dumps(data), OLD_INPUT_CATEGORY)


def get_old_input():
    return _flashed_payload(OLD_INPUT_CATEGORY)
