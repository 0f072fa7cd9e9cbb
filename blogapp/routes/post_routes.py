import logging

from flask import Blueprint, abort, flash, redirect, render_template, request, url_for
from markupsafe import Markup
from sqlalchemy.exc import SQLAlchemyError

from blogapp.errors import RecordNotFound
from blogapp.routes.helpers import fail_back, parse_id, parse_ids, redirect_back
from blogapp.schemas.post_schema import PostSchema
from blogapp.services import post_service, validation_service
from blogapp.services.post_service import PostUpdate


logger = logging.getLogger(__name__)


def create_post_blueprint(posts=post_service, validator=validation_service):
    post_bp = Blueprint("posts", __name__)

    @post_bp.route("/posts", methods=["GET"])
    def index():
        page = request.args.get("page", default=1, type=int)
        return render_template("post/index.html", **posts.list_posts(page))

    @post_bp.route("/posts/create", methods=["GET"])
    def create():
        return render_template("post/create.html", **posts.get_form_choices())

    @post_bp.route("/posts", methods=["POST"])
    def store():
        result = validator.validate_all(PostSchema(), request.form.to_dict())
        if result.fails():
            logger.info("Rejected new post: %s", result.failures)
            return fail_back(result, request.form)

        tag_ids = parse_ids(request.form.getlist("tags"))

        try:
            post = posts.create_post(
                user_id=parse_id(request.form.get("user_id")),
                title=request.form["title"],
                content=request.form["content"],
                tag_ids=tag_ids,
            )
        except RecordNotFound as e:
            abort(404, description=str(e))

        return redirect(url_for("posts.show", id=post.id))

    @post_bp.route("/posts/<int:id>", methods=["GET"])
    def show(id):
        try:
            details = posts.get_post_details(id)
        except RecordNotFound as e:
            abort(404, description=str(e))

        return render_template("post/show.html", **details)

    @post_bp.route("/posts/<int:id>/edit", methods=["GET"])
    def edit(id):
        try:
            form = posts.get_edit_form(id)
        except RecordNotFound as e:
            abort(404, description=str(e))

        return render_template("post/edit.html", **form)

    @post_bp.route("/posts/<int:id>", methods=["PUT", "PATCH"])
    def update(id):
        try:
            posts.get_post_or_fail(id)
        except RecordNotFound as e:
            abort(404, description=str(e))

        result = validator.validate_all(PostSchema(), request.form.to_dict())
        if result.fails():
            logger.info("Rejected update of post %s: %s", id, result.failures)
            return fail_back(result, request.form)

        changes = PostUpdate(
            title=request.form["title"],
            content=request.form["content"],
        )
        tag_ids = parse_ids(request.form.getlist("tags"))

        try:
            post = posts.update_post(
                id,
                changes,
                user_id=parse_id(request.form.get("user_id")),
                tag_ids=tag_ids,
            )
        except RecordNotFound as e:
            abort(404, description=str(e))

        preview_url = url_for("posts.show", id=post.id)
        flash(
            Markup(
                'Post updated. <a href="{}" class="alert-link">Preview Post.</a>'
            ).format(preview_url),
            "primary",
        )
        return redirect_back()

    @post_bp.route("/posts/<int:id>", methods=["DELETE"])
    def destroy(id):
        try:
            posts.delete_post(id)
        except SQLAlchemyError:
            logger.exception("Failed to delete post %s", id)
        return "success"

    return post_bp
