"""okerr: Ok/Err Result values and adapters for raising code.

Flat imports (preferred):
    from okerr import Result, Ok, Err
    from okerr import to_result, to_result_async, safe, safe_async

Submodule imports (for organization):
    from okerr.result import Ok, Err, Result
    from okerr.adapters import to_result_curried, to_result_async_curried
"""

# Configuration
from okerr._config import ResultConfig, get_config, init

# Logging
from okerr._logging import configure_logging, get_logger

# Adapters
from okerr.adapters import (
    safe,
    safe_async,
    to_result,
    to_result_async,
    to_result_async_curried,
    to_result_curried,
)

# Errors
from okerr.errors import UnwrapError

# Result types
from okerr.result import Err, Ok, Result

__all__ = [
    # Result types
    'Err',
    'Ok',
    'Result',
    # Configuration
    'ResultConfig',
    # Errors
    'UnwrapError',
    'configure_logging',
    'get_config',
    'get_logger',
    'init',
    # Adapters
    'safe',
    'safe_async',
    'to_result',
    'to_result_async',
    'to_result_async_curried',
    'to_result_curried',
]
