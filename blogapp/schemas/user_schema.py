from marshmallow import ValidationError, fields, validate, validates

from blogapp.repositories import user_repository
from blogapp.schemas.base_schema import REQUIRED_ERRORS, RuleSchema


USERNAME_PATTERN = r"^(?!_)(?!.*_\Z)[a-zA-Z0-9_\u4e00-\u9fa5]+\Z"


class StoreUserSchema(RuleSchema):
    messages = {
        "username.required": "Username can't be blank",
        "username.unique": "Username is already taken",
        "username.max": "Username is too long (maximum is 66 characters)",
        "username.regex": (
            "Username must be letters or numbers or chinese characters "
            "or underline (underline can't start and end)"
        ),
        "email.required": "Email can't be blank",
        "email.email": "Email is invalid",
        "email.unique": "Email is already taken",
        "password.required": "Password can't be blank",
        "password.min": "password is too short (minimum is 6 characters)",
        "password.max": "password is too long (maximum is 30 characters)",
    }

    username = fields.Str(
        required=True,
        error_messages=REQUIRED_ERRORS,
        validate=[
            validate.Length(max=66, error="max"),
            validate.Regexp(USERNAME_PATTERN, error="regex"),
        ],
    )
    email = fields.Str(
        required=True,
        error_messages=REQUIRED_ERRORS,
        validate=validate.Email(error="email"),
    )
    password = fields.Str(
        required=True,
        error_messages=REQUIRED_ERRORS,
        validate=[
            validate.Length(min=6, error="min"),
            validate.Length(max=30, error="max"),
        ],
    )

    def __init__(self, *args, value_taken=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.value_taken = value_taken or user_repository.value_taken

    @validates("username")
    def validate_username_unique(self, value, **kwargs):
        if self.value_taken("username", value):
            raise ValidationError("unique")

    @validates("email")
    def validate_email_unique(self, value, **kwargs):
        if self.value_taken("email", value):
            raise ValidationError("unique")
