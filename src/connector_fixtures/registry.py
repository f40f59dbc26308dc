# src/connector_fixtures/registry.py
"""Connector fixture registry.

Maps a payment-connector identifier (lowercase, e.g. ``stripe``) to the fixture
object its e2e tests are driven by. The registry is built once and is read-only
afterwards, so parallel test workers can share it.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from .connectors import adyen, bankofamerica, bluesnap, cybersource, nmi, paypal, stripe, trustpay

FixtureObject = Any


def build_registry(entries: Iterable[tuple[str, FixtureObject]]) -> Mapping[str, FixtureObject]:
    """Build an immutable connector -> fixture mapping.

    Args:
        entries: (connector_id, fixture) pairs

    Returns:
        Read-only mapping; fixtures are stored as given, not copied

    Raises:
        TypeError: If a connector id is not a string
        ValueError: If a connector id is empty or registered twice
    """
    data: dict[str, FixtureObject] = {}

    for key, fixture in entries:
        if not isinstance(key, str):
            raise TypeError(f"Connector id must be a string, got: {type(key).__name__}")
        if not key:
            raise ValueError("Connector id must not be empty")
        if key in data:
            raise ValueError(f"Duplicate connector id: {key!r}")
        data[key] = fixture

    return MappingProxyType(data)


CONNECTOR_DETAILS: Mapping[str, FixtureObject] = build_registry(
    [
        ("adyen", adyen.connector_details),
        ("bankofamerica", bankofamerica.connector_details),
        ("bluesnap", bluesnap.connector_details),
        ("cybersource", cybersource.connector_details),
        ("nmi", nmi.connector_details),
        ("paypal", paypal.connector_details),
        ("stripe", stripe.connector_details),
        ("trustpay", trustpay.connector_details),
    ]
)


def resolve(identifier: Any, registry: Mapping[str, FixtureObject] | None = None) -> FixtureObject | None:
    """Look up a connector's fixture. Exact, case-sensitive match; None on miss."""
    if registry is None:
        registry = CONNECTOR_DETAILS

    if not isinstance(identifier, str):
        return None

    return registry.get(identifier)


def get_connector_details(connector_id: str) -> FixtureObject | None:
    return resolve(connector_id)


def connector_ids(registry: Mapping[str, FixtureObject] | None = None) -> list[str]:
    if registry is None:
        registry = CONNECTOR_DETAILS
    return sorted(registry)
