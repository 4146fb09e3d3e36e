"""Type definitions for HTTP requests and responses."""

from typing import Any, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field


# JSON value type - using Any for the recursive case
# since pyright has trouble with recursive type aliases
JsonValue: TypeAlias = str | int | float | bool | dict[str, Any] | list[Any] | None


class HttpRequest(BaseModel):
    """A single outgoing HTTP exchange, independent of the client library."""

    method: Literal["GET", "POST"] = Field(..., description="HTTP method")
    url: str = Field(..., description="Absolute endpoint URL")
    params: dict[str, str] = Field(
        default_factory=dict, description="Query string parameters"
    )
    json_body: JsonValue = Field(default=None, description="JSON request body")

    model_config = ConfigDict(frozen=True)


__all__ = ["HttpRequest", "JsonValue"]
