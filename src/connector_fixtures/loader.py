# src/connector_fixtures/loader.py
"""Load connector fixtures that live outside this package.

Lets a test suite register extra connectors (a local sandbox, a connector still
in review) without editing the bundled fixture modules. Bundled ids cannot be
overridden.
"""

import importlib
import importlib.util
import sys
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from .registry import FixtureObject, build_registry


def load_fixture_source(source_spec: str) -> FixtureObject:
    """Load a fixture object from a module attribute.

    Args:
        source_spec: Either 'module.path:attr' or '/file/path.py:attr'

    Returns:
        The attribute, unchanged

    Raises:
        ValueError: If spec is invalid, the attribute is missing or not a mapping
        FileNotFoundError: If file path doesn't exist

    Examples:
        >>> details = load_fixture_source('suite.fixtures.sandbox:connector_details')
        >>> details = load_fixture_source('/e2e/fixtures/sandbox.py:connector_details')
    """
    if ":" not in source_spec:
        raise ValueError(f"Fixture source spec must be 'module:attr' or 'path.py:attr', " f"got: {source_spec}")

    module_or_path, attr_name = source_spec.rsplit(":", 1)

    if "/" in module_or_path or module_or_path.endswith(".py"):
        module = _load_module_from_file(module_or_path)
    else:
        try:
            module = importlib.import_module(module_or_path)
        except ImportError as e:
            raise ValueError(f"Could not import module '{module_or_path}': {e}") from e

    if not hasattr(module, attr_name):
        raise ValueError(f"Module '{module_or_path}' has no attribute '{attr_name}'")

    fixture = getattr(module, attr_name)

    if not isinstance(fixture, Mapping):
        raise ValueError(f"Fixture '{attr_name}' is not a mapping (type: {type(fixture).__name__})")

    return fixture


def _load_module_from_file(file_path: str) -> Any:
    """Load a Python module from a file path.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file is not a .py file
    """
    path = Path(file_path).resolve()

    if not path.exists():
        raise FileNotFoundError(f"Fixture file not found: {path}")

    if path.suffix != ".py":
        raise ValueError(f"Fixture file must be .py, got: {path.suffix}")

    module_name = f"connector_fixtures_source_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ValueError(f"Could not load spec from {path}")

    module = importlib.util.module_from_spec(spec)
    # sys.modules registration required before exec - allows relative imports within loaded module
    sys.modules[module_name] = module
    spec.loader.exec_module(module)

    return module


def parse_source_option(option: str) -> tuple[str, str]:
    """Split a 'key=spec' option into (connector_id, source_spec)."""
    if "=" not in option:
        raise ValueError(f"Fixture source must be 'connector=module:attr', got: {option}")

    key, source_spec = option.split("=", 1)
    key = key.strip()
    if not key:
        raise ValueError(f"Fixture source has an empty connector id: {option}")

    return key, source_spec.strip()


def extend_registry(
    base: Mapping[str, FixtureObject], sources: Iterable[tuple[str, str]]
) -> Mapping[str, FixtureObject]:
    """Return a new registry holding ``base`` plus every loaded (key, spec) source."""
    loaded = [(key, load_fixture_source(source_spec)) for key, source_spec in sources]
    return build_registry([*base.items(), *loaded])
