import json

import pendulum
from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from ..exceptions import DecodeError


def from_timestamp_ms(value):
    "App Store timestamps are epoch milliseconds"
    return pendulum.from_timestamp(value / 1000) if value is not None else None


class Record(BaseModel):
    "Base for App Store wire records: all fields optional, unknown keys ignored"

    model_config = ConfigDict(extra='ignore', frozen=True, populate_by_name=True, coerce_numbers_to_str=True)

    @model_validator(mode='before')
    @classmethod
    def drop_nulls(cls, data):
        # a json null means the same as an absent field
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @classmethod
    def decode(cls, body, **extra):
        try:
            data = json.loads(body)
        except ValueError as err:
            raise DecodeError(f'Could not parse App Store json into {cls.__name__}: {err}', body=body) from err
        if not isinstance(data, dict):
            raise DecodeError(f'App Store json for {cls.__name__} is not an object', body=body)
        try:
            return cls.model_validate({**data, **extra})
        except ValidationError as err:
            raise DecodeError(f'App Store json does not match {cls.__name__}: {err}', body=body) from err
