from marshmallow import fields, validate

from blogapp.schemas.base_schema import REQUIRED_ERRORS, RuleSchema


class PostSchema(RuleSchema):
    messages = {
        "title.required": "Title can't be blank",
        "title.max": "Title is too long (maximum is 255 characters)",
        "content.required": "Content can't be blank",
    }

    title = fields.Str(
        required=True,
        error_messages=REQUIRED_ERRORS,
        validate=validate.Length(max=255, error="max"),
    )
    content = fields.Str(required=True, error_messages=REQUIRED_ERRORS)
