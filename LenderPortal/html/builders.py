# LenderPortal/html/builders.py

from markupsafe import Markup, escape
from wtforms.widgets import html_params


class HtmlBuilder:
    """Attribute rendering shared by every builder."""

    def attributes(self, attributes=None):
        cleaned = {k: v for k, v in (attributes or {}).items() if v is not None}
        return Markup(html_params(**cleaned))


class FormBuilder:
    """Plain HTML form elements with model binding and old input.

    ``url_for``, ``csrf_token``, ``old_input`` and ``current_url`` are
    callables so the builder can be used with or without a Flask request.
    """

    reserved = ("method", "url", "route", "action", "files")
    skip_value_types = ("file", "password", "checkbox", "radio")

    def __init__(self, html, url_for=None, csrf_token=None, old_input=None, current_url=None):
        self.html = html
        self.url_for = url_for
        self.csrf_token = csrf_token
        self.old_input = old_input
        self.current_url = current_url
        self.model_data = None
        self.labels = set()

    # ---------------------------------------------------------
    # <form> open / close
    # ---------------------------------------------------------
    def open(self, **options):
        method = str(options.get("method", "post")).upper()

        attributes = {
            "method": "GET" if method == "GET" else "POST",
            "action": self.get_action(options),
            "accept-charset": "UTF-8",
        }
        if options.get("files"):
            options["enctype"] = "multipart/form-data"

        for key in self.reserved:
            options.pop(key, None)
        attributes.update(options)

        append = ""
        token = self.csrf_token() if self.csrf_token and method != "GET" else None
        if token:
            append = self.hidden("csrf_token", token)

        return Markup("<form %s>%s") % (self.html.attributes(attributes), append)

    def model(self, model, **options):
        self.model_data = model
        return self.open(**options)

    def close(self):
        self.labels = set()
        self.model_data = None
        return Markup("</form>")

    def get_action(self, options):
        if options.get("url"):
            return options["url"]

        route = options.get("route") or options.get("action")
        if route:
            if self.url_for is None:
                raise RuntimeError("Routing a form requires a url_for callable.")
            if isinstance(route, (list, tuple)):
                endpoint, params = route[0], dict(route[1]) if len(route) > 1 else {}
                return self.url_for(endpoint, **params)
            return self.url_for(route)

        return self.current_url() if self.current_url else ""

    # ---------------------------------------------------------
    # Elements
    # ---------------------------------------------------------
    def label(self, name, value=None, options=None):
        self.labels.add(name)

        attributes = {"for": name}
        attributes.update(options or {})
        value = value if value else self.format_label(name)

        return Markup("<label %s>%s</label>") % (self.html.attributes(attributes), value)

    def input(self, type, name, value=None, options=None):
        options = dict(options or {})
        if "name" not in options:
            options["name"] = name

        element_id = self.get_id_attribute(name, options)
        if type not in self.skip_value_types:
            value = self.get_value_attribute(name, value)

        options.update({"type": type, "value": value, "id": element_id})

        return Markup("<input %s>") % self.html.attributes(options)

    def text(self, name, value=None, options=None):
        return self.input("text", name, value, options)

    def email(self, name, value=None, options=None):
        return self.input("email", name, value, options)

    def password(self, name, options=None):
        return self.input("password", name, "", options)

    def hidden(self, name, value=None, options=None):
        return self.input("hidden", name, value, options)

    def file(self, name, options=None):
        return self.input("file", name, None, options)

    def submit(self, value=None, options=None):
        return self.input("submit", None, value, options)

    def textarea(self, name, value=None, options=None):
        options = dict(options or {})
        if "name" not in options:
            options["name"] = name

        options = self.set_text_area_size(options)
        options["id"] = self.get_id_attribute(name, options)
        value = self.get_value_attribute(name, value)

        return Markup("<textarea %s>%s</textarea>") % (
            self.html.attributes(options),
            escape("" if value is None else value),
        )

    # ---------------------------------------------------------
    # Helpers
    # ---------------------------------------------------------
    @staticmethod
    def set_text_area_size(options):
        size = options.pop("size", None)
        if size:
            cols, _, rows = str(size).partition("x")
            options["cols"], options["rows"] = cols, rows
        else:
            options.setdefault("cols", 50)
            options.setdefault("rows", 10)
        return options

    @staticmethod
    def format_label(name):
        words = str(name).replace("_", " ").split(" ")
        return " ".join(w[:1].upper() + w[1:] for w in words)

    def get_id_attribute(self, name, attributes):
        if attributes.get("id"):
            return attributes["id"]
        if name in self.labels:
            return name
        return None

    def get_value_attribute(self, name, value=None):
        if name is None:
            return value

        old = self.old(name)
        if old is not None:
            return old
        if value is not None:
            return value
        if self.model_data is not None:
            return self.get_model_value_attribute(name)
        return None

    def get_model_value_attribute(self, name):
        if isinstance(self.model_data, dict):
            return self.model_data.get(name)
        return getattr(self.model_data, name, None)

    def old(self, name):
        if self.old_input is None:
            return None
        return (self.old_input() or {}).get(name)
