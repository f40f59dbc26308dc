# src/connector_fixtures/validation.py
"""Structural checks for connector fixture objects.

The registry treats fixtures as opaque. This module is for authors of fixture
modules: it checks the conventional layout

    {payment_method_group: {scenario: {"Request": ..., "Response": {"status", "body"}}}}

and reports every problem at once instead of failing on the first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError


class ExpectedResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    status: int = Field(ge=100, le=599)
    body: dict[str, Any]


class FixtureScenario(BaseModel):
    model_config = ConfigDict(extra="allow")

    request: dict[str, Any] | None = Field(default=None, alias="Request")
    response: ExpectedResponse = Field(alias="Response")
    configs: dict[str, Any] | None = Field(default=None, alias="Configs")


ConnectorDetailsAdapter = TypeAdapter(dict[str, dict[str, FixtureScenario]])


@dataclass(frozen=True, slots=True)
class FixtureError:
    location: str
    message: str
    connector: str | None = None

    def __str__(self) -> str:
        prefix = f"[{self.connector}] " if self.connector else ""
        return f"{prefix}{self.location}: {self.message}"


def _format_loc(loc: tuple[int | str, ...]) -> str:
    if not loc:
        return "<root>"
    return ".".join(str(part) for part in loc)


def validate_connector_details(details: Any, connector: str | None = None) -> list[FixtureError]:
    """Validate a fixture object, returning one FixtureError per problem found."""
    try:
        ConnectorDetailsAdapter.validate_python(details)
    except ValidationError as e:
        return [
            FixtureError(location=_format_loc(err["loc"]), message=err["msg"], connector=connector)
            for err in e.errors()
        ]
    return []
