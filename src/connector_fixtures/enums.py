# src/connector_fixtures/enums.py
from enum import Enum


class OutputFormat(str, Enum):
    json = "json"
    yaml = "yaml"
