#!/usr/bin/env python3
# quickstart.py
"""
Quick start script for connector-fixtures development.
"""

import subprocess
import sys


def main():
    print("Connector Fixtures Quick Start\n")

    print(f"Using Python {sys.version}")

    print("Installing connector-fixtures in development mode...")
    subprocess.run([sys.executable, "-m", "pip", "install", "-e", ".[dev]"])

    print("Checking bundled fixtures...")
    subprocess.run([sys.executable, "-m", "connector_fixtures.cli", "validate"])

    print("\nTry these commands:")
    print("  connector-fixtures list                               # Registered connectors")
    print("  connector-fixtures show stripe --format yaml          # Dump one fixture")
    print("  connector-fixtures diagnose                           # Check environment")
    print("  pytest                                                # Run the tests")


if __name__ == "__main__":
    main()
