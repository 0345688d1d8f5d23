"""
Shared schema building blocks.

Every payload is a dataclass in ``mpesa.models``; its schema maps the
snake_case attributes onto the casing Daraja expects through ``data_key``.
"""

from marshmallow import EXCLUDE, Schema, fields, post_dump, post_load

from mpesa.errors import ResponseError


class Text(fields.String):
    """String field that also accepts numeric codes (``0`` -> ``"0"``)."""

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = str(value)
        return super()._deserialize(value, attr, data, **kwargs)


class Amount(fields.Number):
    """Numeric amount, dumped as an int when it has no fractional part."""
    num_type = float

    def _format_num(self, value):
        number = float(value)
        return int(number) if number.is_integer() else number


class ModelSchema(Schema):
    """Schema that loads into ``__model__`` and can drop unset keys on dump."""

    __model__ = None
    __skip_none__ = False

    class Meta:
        unknown = EXCLUDE

    @post_load
    def make_object(self, data, **kwargs):
        return self.__model__(**data)

    @post_dump
    def remove_none(self, data, **kwargs):
        if not self.__skip_none__:
            return data
        return {key: value for key, value in data.items() if value is not None}


class ResponseErrorSchema(ModelSchema):
    __model__ = ResponseError

    request_id = Text(data_key='requestId', load_default=None, allow_none=True)
    error_code = Text(data_key='errorCode', load_default=None, allow_none=True)
    error_message = Text(data_key='errorMessage', load_default=None, allow_none=True)
