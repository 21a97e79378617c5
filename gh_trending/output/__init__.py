"""
Presentation of trending repositories.
"""

from .generator import OutputGenerator
from .table_output import TableRenderer
from .json_output import JSONRenderer
from .browser import BrowserLauncher, LaunchOutcome

__all__ = [
    'OutputGenerator',
    'TableRenderer',
    'JSONRenderer',
    'BrowserLauncher',
    'LaunchOutcome',
]
