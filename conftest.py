"""
Root conftest - shared pytest configuration and fixtures.
Ensures the storefront package is importable when running pytest from the repo root.
"""
import os
import sys
from pathlib import Path

# Ensure repo root is in path for 'from storefront...' imports
_root = Path(__file__).resolve().parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

# Tests never talk to a real MongoDB unless they opt in
os.environ.setdefault("STORAGE_BACKEND", "memory")
