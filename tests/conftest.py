# tests/conftest.py

import os
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent.parent / "src"

# CLI tests run the package in a subprocess; make it importable without an install
os.environ["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), os.environ.get("PYTHONPATH")]))
