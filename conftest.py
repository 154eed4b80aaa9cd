"""
Root conftest - makes ``user_directory`` importable when pytest runs from a
source checkout without ``pip install -e .``.
"""
import sys
from pathlib import Path

_root = Path(__file__).resolve().parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))
