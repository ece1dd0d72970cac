from flask_login import current_user

from LenderPortal.forms.base import AbstractForm


class EditProfileForm(AbstractForm):

    def get_rules(self, data):
        return {
            "username": "required|alpha_num",
            "first_name": "required|alpha_num",
            "last_name": "required|alpha_num",
            "email": "required|email",
            "password": "confirmed",
            "about_me": "",
            "picture": "image|max:2048",
        }

    def get_data_from_request(self, request):
        data = super().get_data_from_request(request)
        data["picture"] = request.files.get("picture")

        return data

    def get_default_data(self):
        lender = current_user.lender

        return {
            "username": lender.user.username,
            "first_name": lender.first_name,
            "last_name": lender.last_name,
            "email": lender.user.email,
            "about_me": lender.profile.about_me if lender.profile else None,
        }
