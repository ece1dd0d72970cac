# LenderPortal/forms/validation.py
"""Pipe-delimited rule strings ("required|alpha_num") checked with WTForms.

Each rule set is compiled into a throwaway ``wtforms.Form`` class whose
fields carry the matching validators, so the messages and the upload checks
are the same ones the rest of the app gets from WTForms / Flask-WTF.
"""

import logging

from flask_wtf.file import FileAllowed, FileField, FileRequired, FileSize
from werkzeug.datastructures import FileStorage, MultiDict
from wtforms import Form, StringField
from wtforms.validators import Email, EqualTo, InputRequired, Length, Optional, Regexp

from LenderPortal.html.message_bag import MessageBag

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = ("jpg", "jpeg", "png", "gif", "bmp", "svg")
FILE_RULES = ("image", "file", "mimes")
KNOWN_RULES = ("required", "alpha_num", "email", "confirmed", "max", "min") + FILE_RULES
CONFIRMATION_SUFFIX = "_confirmation"


def parse_rules(expression):
    """``"image|max:2048"`` -> ``[("image", []), ("max", ["2048"])]``."""
    parsed = []
    for chunk in (expression or "").split("|"):
        chunk = chunk.strip()
        if not chunk:
            continue
        rule, _, params = chunk.partition(":")
        if rule not in KNOWN_RULES:
            raise ValueError(f"Unknown validation rule {rule!r} in {expression!r}")
        parsed.append((rule, [p.strip() for p in params.split(",")] if params else []))
    return parsed


def is_file_rule_set(parsed):
    return any(rule in FILE_RULES for rule, _ in parsed)


def display_name(field):
    return field.replace("_", " ")


def _int_param(rule, params):
    try:
        return int(params[0])
    except (IndexError, ValueError):
        raise ValueError(f"Rule {rule!r} needs a numeric parameter") from None


def build_validators(field, parsed):
    label = display_name(field)
    is_file = is_file_rule_set(parsed)
    rules = [rule for rule, _ in parsed]

    validators = []
    if "required" in rules:
        message = f"The {label} field is required."
        validators.append(FileRequired(message) if is_file else InputRequired(message))
    else:
        validators.append(Optional())

    for rule, params in parsed:
        if rule == "required":
            continue

        if rule == "alpha_num":
            validators.append(
                Regexp(r"^[^\W_]+\Z", message=f"The {label} may only contain letters and numbers.")
            )
        elif rule == "email":
            validators.append(Email(message=f"The {label} must be a valid email address."))
        elif rule == "confirmed":
            validators.append(
                EqualTo(field + CONFIRMATION_SUFFIX, message=f"The {label} confirmation does not match.")
            )
        elif rule == "image":
            validators.append(FileAllowed(IMAGE_EXTENSIONS, f"The {label} must be an image."))
        elif rule == "mimes":
            validators.append(
                FileAllowed(params, f"The {label} must be a file of type: {', '.join(params)}.")
            )
        elif rule == "max":
            limit = _int_param(rule, params)
            if is_file:
                validators.append(
                    FileSize(max_size=limit * 1024, message=f"The {label} may not be greater than {limit} kilobytes.")
                )
            else:
                validators.append(
                    Length(max=limit, message=f"The {label} may not be greater than {limit} characters.")
                )
        elif rule == "min":
            limit = _int_param(rule, params)
            if is_file:
                validators.append(
                    FileSize(max_size=2 ** 63, min_size=limit * 1024,
                             message=f"The {label} must be at least {limit} kilobytes.")
                )
            else:
                validators.append(
                    Length(min=limit, message=f"The {label} must be at least {limit} characters.")
                )

    return validators


def build_form_class(rules):
    fields = {}
    for name, expression in rules.items():
        parsed = parse_rules(expression)
        field_cls = FileField if is_file_rule_set(parsed) else StringField
        fields[name] = field_cls(display_name(name), validators=build_validators(name, parsed))

        if any(rule == "confirmed" for rule, _ in parsed):
            fields[name + CONFIRMATION_SUFFIX] = StringField(display_name(name) + " confirmation")

    return type("RuleForm", (Form,), fields)


def to_formdata(data):
    formdata = MultiDict()
    for key, value in (data or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            for item in value:
                formdata.add(key, item)
        elif isinstance(value, FileStorage):
            formdata.add(key, value)
        else:
            formdata.add(key, str(value))
    return formdata


def validate(data, rules):
    """Check ``data`` against ``rules`` and return the failures as a MessageBag."""
    form = build_form_class(rules)(formdata=to_formdata(data))
    form.validate()

    bag = MessageBag()
    for field, messages in form.errors.items():
        for message in messages:
            bag.add(field, message)

    if bag:
        logger.debug("Validation failed for fields: %s", ", ".join(bag.keys()))
    return bag
