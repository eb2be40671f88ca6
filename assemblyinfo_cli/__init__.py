"""
Welcome to the AssemblyInfo CLI
"""
from pathlib import Path

PROGRAM_NAME = "AssemblyInfo CLI"
__version__ = "0.1"

MODULE_ROOT: str = Path(__file__).parent.name
PACKAGE_ROOT: Path = Path(__file__).parent.parent
