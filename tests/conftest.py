"""
Pytest fixtures for LenderPortal tests.

The app fixture does not keep an app context pushed: each test client request
gets its own context (and its own ``g``), exactly like production.
"""

from pathlib import Path

import pytest
from flask_login import FlaskLoginClient

from LenderPortal.app import create_app
from LenderPortal.config import TestConfig
from LenderPortal.extensions import db
from LenderPortal.models import Lender, Profile, User

# =============================================================================
# App Fixtures
# =============================================================================


@pytest.fixture
def upload_folder(tmp_path: Path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture
def app(upload_folder: Path):
    class Config(TestConfig):
        UPLOAD_FOLDER = str(upload_folder)

    app = create_app(Config)
    app.test_client_class = FlaskLoginClient

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


# =============================================================================
# Data Fixtures
# =============================================================================


@pytest.fixture
def lender_id(app) -> int:
    """Seeded lender: amara / Amara Okafor with a short bio."""
    with app.app_context():
        user = User(username="amara", email="amara@example.org", role="lender")
        user.set_password("old-secret")
        lender = Lender(user=user, first_name="Amara", last_name="Okafor", country_code="NG")
        lender.profile = Profile(about_me="I lend to smallholder farmers.")
        db.session.add_all([user, lender])
        db.session.commit()
        return lender.id


@pytest.fixture
def client(app, lender_id):
    """Test client logged in as the seeded lender's user."""
    with app.app_context():
        user = db.session.get(Lender, lender_id).user
        return app.test_client(user=user)


@pytest.fixture
def anonymous_client(app):
    return app.test_client()
