# LenderPortal/html/bootstrap_form.py

from markupsafe import Markup

from LenderPortal.html.message_bag import get_flashed_message_bag

HELP_BLOCK_FORMAT = '<span class="help-block">{message}</span>'
ERROR_CLASS = "has-error"


class BootstrapFormBuilder:
    """Bootstrap 3 horizontal-form markup around a :class:`FormBuilder`.

    Every field renders as a ``form-group`` holding a label in the left grid
    column and the input (plus its first validation error) in the right grid
    column. Labels and the submit button are translated; when the form was
    opened with a ``translation_domain`` the keys are prefixed with it.
    """

    def __init__(self, html, form, config, errors=None, translator=None):
        self.html = html
        self.form = form
        self.config = config
        # callable returning the active MessageBag (or None)
        self.errors = errors or get_flashed_message_bag
        self.translator = translator
        self.translation_domain = ""

    # ---------------------------------------------------------
    # Form open / close
    # ---------------------------------------------------------
    def open(self, **options):
        """Open a form. ``translation_domain`` applies until the next open."""
        self.translation_domain = options.pop("translation_domain", "") or ""
        options.pop("name", None)

        return self.form.open(**options)

    def model(self, model, **options):
        """Open a form bound to ``model`` (mapping or object) for field values."""
        self.translation_domain = options.pop("translation_domain", "") or ""
        options.pop("name", None)

        return self.form.model(model, **options)

    def close(self):
        return self.form.close()

    # ---------------------------------------------------------
    # Fields
    # ---------------------------------------------------------
    def text(self, name, value=None, **options):
        return self.input("text", name, value, options)

    def email(self, name="email", value=None, **options):
        return self.input("email", name, value, options)

    def textarea(self, name, value=None, **options):
        return self.input("textarea", name, value, options)

    def password(self, name, **options):
        return self.input("password", name, None, options)

    def file(self, name, **options):
        return self.input("file", name, None, options)

    def label(self, name, value=None, **options):
        options = self.get_label_options(options)

        return self.form.label(name, self.translate(value), options)

    def submit(self, value=None, **options):
        value = self.domain_key(value) if value else value
        options = {"class": "btn btn-primary", **options}

        return self.form.submit(self.translate(value), options)

    # ---------------------------------------------------------
    # Group assembly
    # ---------------------------------------------------------
    def input(self, type, name, value=None, options=None):
        options = dict(options or {})
        label = options.pop("label", self.domain_key(name))

        # The label is rendered first so the input picks up ``id=name``.
        label_element = self.label(name, label) if label else ""

        options = self.get_field_options(type, options)
        wrapper_options = {"class": self.get_right_column_class()}

        if type == "password":
            input_element = self.form.password(name, options)
        elif type == "file":
            input_element = self.form.file(name, options)
        else:
            input_element = getattr(self.form, type)(name, value, options)

        group_element = Markup("<div %s>%s%s</div>") % (
            self.html.attributes(wrapper_options),
            input_element,
            self.get_field_error(name),
        )

        return self.get_form_group(name, label_element, group_element)

    def get_form_group(self, name, label, element):
        options = self.get_form_group_options(name)

        return Markup("<div %s>%s%s</div>") % (self.html.attributes(options), label, element)

    def get_form_group_options(self, name, options=None):
        css_class = " ".join(filter(None, ["form-group", self.get_field_error_class(name)]))

        return {"class": css_class, **(options or {})}

    def get_field_options(self, type, options=None):
        if type == "file":
            return dict(options or {})
        return {"class": "form-control", **(options or {})}

    def get_label_options(self, options=None):
        css_class = f"control-label {self.get_left_column_class()}".strip()

        return {"class": css_class, **(options or {})}

    # ---------------------------------------------------------
    # Config / errors / translation
    # ---------------------------------------------------------
    def get_left_column_class(self):
        return self.config.get("BOOTSTRAP_FORM_LEFT_COLUMN") or ""

    def get_right_column_class(self):
        return self.config.get("BOOTSTRAP_FORM_RIGHT_COLUMN") or ""

    def get_errors(self):
        return self.errors()

    def get_field_error(self, field, format=HELP_BLOCK_FORMAT):
        errors = self.get_errors()
        if not errors:
            return ""

        return errors.first(field, format)

    def get_field_error_class(self, field, css_class=ERROR_CLASS):
        return css_class if self.get_field_error(field) else None

    def domain_key(self, key):
        if self.translation_domain:
            return f"{self.translation_domain}.{key}"
        return key

    def translate(self, key):
        if self.translator is None or key is None:
            return key
        return self.translator.get(key)
