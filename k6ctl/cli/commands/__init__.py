"""CLI commands"""

from . import archive
from . import publish
from . import retract
from . import status
from . import run
from . import doctor

__all__ = [
    "archive",
    "publish",
    "retract",
    "status",
    "run",
    "doctor",
]
