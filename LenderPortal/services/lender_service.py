# LenderPortal/services/lender_service.py

import logging
import os
import uuid

from sqlalchemy.exc import SQLAlchemyError
from werkzeug.utils import secure_filename

from LenderPortal.extensions import db
from LenderPortal.models import Profile

logger = logging.getLogger(__name__)

PICTURE_SUBFOLDER = "profile_pictures"


def save_profile_picture(lender, upload, upload_folder):
    """Store the upload and return its path relative to ``upload_folder``.

    Every upload gets a fresh name; the committed picture is never overwritten.
    """
    filename = secure_filename(upload.filename or "")
    if not filename:
        return None

    target_dir = os.path.join(upload_folder, PICTURE_SUBFOLDER)
    os.makedirs(target_dir, exist_ok=True)

    stored_name = f"{lender.id}_{uuid.uuid4().hex}_{filename}"
    upload.save(os.path.join(target_dir, stored_name))

    return f"{PICTURE_SUBFOLDER}/{stored_name}"


def discard_profile_picture(relative_path, upload_folder):
    path = os.path.join(upload_folder, relative_path)
    try:
        os.remove(path)
    except FileNotFoundError:
        logger.warning("Uploaded picture already gone: %s", path)


def update_profile(lender, data, upload_folder):
    """Write validated edit-profile data onto the lender, its user and profile."""
    user = lender.user
    lender_id = lender.id
    profile = lender.profile
    if profile is None:
        profile = Profile(lender=lender)
        db.session.add(profile)

    user.username = data.get("username", user.username)
    user.email = data.get("email", user.email)
    lender.first_name = data.get("first_name", lender.first_name)
    lender.last_name = data.get("last_name", lender.last_name)
    profile.about_me = data.get("about_me", profile.about_me)

    if data.get("password"):
        user.set_password(data["password"])

    saved_picture = None
    picture = data.get("picture")
    if picture:
        saved_picture = save_profile_picture(lender, picture, upload_folder)
        if saved_picture:
            profile.picture_path = saved_picture

    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        if saved_picture:
            discard_profile_picture(saved_picture, upload_folder)
        logger.exception("Could not update profile for lender %s", lender_id)
        raise

    logger.info("Updated profile for lender %s", lender_id)
    return profile
