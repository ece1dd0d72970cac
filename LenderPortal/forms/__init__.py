# LenderPortal/forms/__init__.py
from .base import AbstractForm
from .lender_forms import EditProfileForm
from .validation import validate, parse_rules
