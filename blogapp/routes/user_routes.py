import logging

from flask import Blueprint, flash, redirect, render_template, request, url_for

from blogapp.routes.helpers import fail_back
from blogapp.schemas.user_schema import StoreUserSchema
from blogapp.services import user_service, validation_service


logger = logging.getLogger(__name__)

SECRET_FIELDS = ("password", "password_confirmation")


def create_user_blueprint(users=user_service, validator=validation_service):
    user_bp = Blueprint("users", __name__)

    @user_bp.route("/users/create", methods=["GET"])
    def create():
        return render_template("user/create.html")

    @user_bp.route("/users", methods=["POST"])
    def store():
        result = validator.validate_all(StoreUserSchema(), request.form.to_dict())
        if result.fails():
            logger.info("Rejected registration: %s", result.failures)
            return fail_back(result, request.form, exclude=SECRET_FIELDS)

        users.register(
            request.form["username"],
            request.form["email"],
            request.form["password"],
        )

        flash("Account created.", "success")
        return redirect(url_for("posts.index"))

    return user_bp
