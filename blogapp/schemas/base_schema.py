from marshmallow import EXCLUDE, pre_load

from blogapp.extensions.extensions import ma


REQUIRED_ERRORS = {"required": "required", "null": "required"}


class RuleSchema(ma.Schema):
    """Schema whose error messages are rule names instead of prose.

    ``validate`` therefore yields ``{field: [rule, ...]}`` and the readable
    text is looked up in ``messages`` under ``"<field>.<rule>"``.
    """

    messages: dict[str, str] = {}

    class Meta:
        unknown = EXCLUDE

    @pre_load
    def drop_blank_values(self, data, **kwargs):
        return {
            key: value
            for key, value in data.items()
            if value is not None and not (isinstance(value, str) and not value.strip())
        }
