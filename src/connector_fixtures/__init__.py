# src/connector_fixtures/__init__.py
"""Per-connector fixtures for the payments e2e suite, keyed by connector id."""

from .registry import CONNECTOR_DETAILS, build_registry, connector_ids, get_connector_details, resolve

__all__ = [
    "CONNECTOR_DETAILS",
    "build_registry",
    "connector_ids",
    "get_connector_details",
    "resolve",
]
