from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """HTTP schema base: camelCase on the wire, snake_case accepted on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Pydantic serializes Decimal as a JSON string; money goes out as a number
JsonDecimal = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used='json')]

# Upper bound of the 32-bit Integer id, seat and duration columns
INT32_MAX = 2**31 - 1
DbInt = Annotated[int, Field(le=INT32_MAX)]
