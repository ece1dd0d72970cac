# LenderPortal/forms/base.py

from abc import ABC, abstractmethod

from werkzeug.datastructures import FileStorage

from LenderPortal.forms.validation import CONFIRMATION_SUFFIX, validate
from LenderPortal.html.message_bag import (
    MessageBag,
    flash_message_bag,
    flash_old_input,
    get_old_input,
)

# Never echoed back into a re-rendered form.
OLD_INPUT_EXCLUDED = ("password", "csrf_token")


class AbstractForm(ABC):
    """Rule-declared form: request data in, validated data or errors out.

    Subclasses declare ``get_rules`` and ``get_default_data``; they may widen
    ``get_data_from_request`` for fields that are not plain scalars (uploads).
    """

    def __init__(self):
        self.data = {}
        self.message_bag = MessageBag()
        self.validated = False

    @abstractmethod
    def get_rules(self, data):
        """Field name -> rule expression, e.g. ``{"email": "required|email"}``."""

    @abstractmethod
    def get_default_data(self):
        """Field values used to pre-fill the form on first display."""

    def get_field_names(self, data=None):
        names = []
        for name, expression in self.get_rules(data or {}).items():
            names.append(name)
            if "confirmed" in (expression or "").split("|"):
                names.append(name + CONFIRMATION_SUFFIX)
        return names

    def get_data_from_request(self, request):
        return {
            name: request.form.get(name)
            for name in self.get_field_names()
            if name in request.form
        }

    def handle_request(self, request):
        self.data = self.get_data_from_request(request)
        self.message_bag = validate(self.data, self.get_rules(self.data))
        self.validated = True

        return self.is_valid()

    def is_valid(self):
        return self.validated and not self.message_bag

    def get_data(self):
        return self.data

    def get_message_bag(self):
        return self.message_bag

    def get_old_input(self):
        return {
            key: value
            for key, value in self.data.items()
            if not isinstance(value, FileStorage)
            and not any(key.startswith(prefix) for prefix in OLD_INPUT_EXCLUDED)
        }

    def flash_errors(self):
        """Carry errors and submitted input over the redirect to the next page."""
        flash_message_bag(self.message_bag)
        flash_old_input(self.get_old_input())

    def get_template_data(self):
        return {**self.get_default_data(), **get_old_input()}
