"""
MockMaster Common Utilities

Shared error types and logging helpers used across MockMaster modules.
"""

from .errors import (
    MockMasterError,
    ScenarioFormatError,
    OpenAPIParseError,
    ConfigError,
    UnknownTraitError,
)
from .logging_utils import setup_logging, resolve_log_level

__all__ = [
    'MockMasterError',
    'ScenarioFormatError',
    'OpenAPIParseError',
    'ConfigError',
    'UnknownTraitError',
    'setup_logging',
    'resolve_log_level',
]
