import logging

from flask import Flask, render_template

from blogapp.config import Config
from blogapp.db import db
from blogapp.extensions.extensions import ma
from blogapp.middleware import MethodOverrideMiddleware
from blogapp.routes.helpers import has_old_input, load_old_input, old, old_list
from blogapp.routes.main_routes import main_bp
from blogapp.routes.post_routes import create_post_blueprint
from blogapp.routes.user_routes import create_user_blueprint
from blogapp.services import post_service, user_service, validation_service


def _configure_logging(app):
    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.logger.setLevel(app.config["LOG_LEVEL"])


def _register_error_handlers(app):
    @app.errorhandler(400)
    def bad_request(error):
        return render_template("errors/error.html", error=error), 400

    @app.errorhandler(404)
    def not_found(error):
        return render_template("errors/error.html", error=error), 404


def create_app(config_overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    _configure_logging(app)

    db.init_app(app)
    ma.init_app(app)

    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)

    app.before_request(load_old_input)
    app.context_processor(
        lambda: {"old": old, "old_list": old_list, "has_old_input": has_old_input}
    )

    app.register_blueprint(main_bp)
    app.register_blueprint(
        create_post_blueprint(posts=post_service, validator=validation_service)
    )
    app.register_blueprint(
        create_user_blueprint(users=user_service, validator=validation_service)
    )
    _register_error_handlers(app)

    from blogapp.models import post_model, profile_model, tag_model, user_model  # noqa: F401

    with app.app_context():
        db.create_all()

    return app
