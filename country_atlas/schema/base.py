import json
from typing import Annotated, Optional
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel


def blank_to_none(value):
    """Empty form inputs arrive as "" and mean "no value"."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def number_to_str(value):
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def decode_json_string(value):
    if isinstance(value, str):
        try:
            return json.loads(value)
        except json.JSONDecodeError as e:
            raise ValueError(f"must be valid JSON ({e.msg})")
    return value


# largest values the Integer and BigInteger columns hold
INT_MAX = 2 ** 31 - 1
BIGINT_MAX = 2 ** 63 - 1

OptionalNumber = Annotated[Optional[float], BeforeValidator(blank_to_none)]
OptionalInt = Annotated[Optional[Annotated[int, Field(le=INT_MAX)]], BeforeValidator(blank_to_none)]
OptionalText = Annotated[Optional[str], BeforeValidator(number_to_str)]
NonBlank = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
TextValue = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1), BeforeValidator(number_to_str)]
Percentage = Annotated[float, Field(ge=0, le=100)]
OptionalPercentage = Annotated[Optional[Percentage], BeforeValidator(blank_to_none)]


class AtlasModel(BaseModel):
    """Base for request payloads: camelCase on the wire, snake_case columns."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='ignore',
        allow_inf_nan=False,
    )

    def to_columns(self, partial=True):
        """Map the payload onto column names.

        With ``partial`` only the top-level fields the client actually sent
        are returned, which is what makes a PATCH a merge rather than a
        replace. Nested records are dumped whole under their wire names.
        """
        dumped = self.model_dump(by_alias=True)
        return {
            name: dumped[field.alias]
            for name, field in type(self).model_fields.items()
            if not partial or name in self.model_fields_set
        }
