# LenderPortal/routes/lender.py

import logging

from flask import (
    Blueprint,
    current_app,
    flash,
    redirect,
    render_template,
    request,
    url_for,
)
from flask_login import current_user, login_required
from sqlalchemy.exc import SQLAlchemyError

from LenderPortal.forms import EditProfileForm
from LenderPortal.i18n import lang
from LenderPortal.services.lender_service import update_profile

logger = logging.getLogger(__name__)

lender_bp = Blueprint("lender", __name__, url_prefix="/lender")


# =========================================================
# 📝 Edit Profile
# =========================================================

@lender_bp.route("/profile/edit", methods=["GET"])
@login_required
def edit_profile():
    form = EditProfileForm()

    return render_template(
        "lender/edit_profile.html",
        form_data=form.get_template_data(),
        lender=current_user.lender,
        title=lang("lender.profile.title"),
    )


@lender_bp.route("/profile/edit", methods=["POST"])
@login_required
def post_edit_profile():
    form = EditProfileForm()

    if not form.handle_request(request):
        form.flash_errors()
        flash(lang("lender.profile.invalid"), "danger")
        return redirect(url_for("lender.edit_profile"))

    try:
        update_profile(current_user.lender, form.get_data(), current_app.config["UPLOAD_FOLDER"])
    except SQLAlchemyError:
        flash(lang("lender.profile.save_failed"), "danger")
        return redirect(url_for("lender.edit_profile"))

    flash(lang("lender.profile.saved"), "success")
    return redirect(url_for("lender.edit_profile"))
