# LenderPortal/models/__init__.py
from LenderPortal.extensions import db

# 🧍 User & Authentication
from LenderPortal.models.user_model import User

# 🏦 Lenders
from LenderPortal.models.lender_model import Lender, Profile


__all__ = ["db", "User", "Lender", "Profile"]
