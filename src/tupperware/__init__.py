"""tupperware: Option, Result and Validation containers for Python 3.13+.

Flat imports (preferred):
    from tupperware import Option, Some, Nothing, of, some, none
    from tupperware import Result, Ok, Err, ok, err
    from tupperware import Validation, Success, Failure, success, failure

Submodule imports (for organization):
    from tupperware.types.option import Option
    from tupperware.errors import UnwrapOnNoneError
"""

# Settings
from tupperware._config import Settings, get_settings, init, load_settings, override_settings

# Logging
from tupperware._logging import (
    DiagnosticSink,
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_diagnostic_sink,
    get_logger,
    remove_log_hook,
    set_diagnostic_sink,
)

# Equality
from tupperware._internal.equality import same_value

# Errors
from tupperware.errors import (
    ForceUnwrapOnNoneError,
    InvalidArgumentError,
    TupperwareError,
    UncheckedUnwrapError,
    UnwrapError,
    UnwrapOnErrError,
    UnwrapOnNoneError,
    UnwrapOnOkError,
)

# Types
from tupperware.types import (
    Err,
    Failure,
    Nothing,
    Ok,
    Option,
    Result,
    Some,
    Success,
    Validation,
    assert_all,
    err,
    failure,
    from_nullable,
    none,
    of,
    ok,
    some,
    success,
)

__all__ = [
    # Types
    'Err',
    'Failure',
    'Nothing',
    'Ok',
    'Option',
    'Result',
    'Some',
    'Success',
    'Validation',
    'assert_all',
    'err',
    'failure',
    'from_nullable',
    'none',
    'of',
    'ok',
    'same_value',
    'some',
    'success',
    # Errors
    'ForceUnwrapOnNoneError',
    'InvalidArgumentError',
    'TupperwareError',
    'UncheckedUnwrapError',
    'UnwrapError',
    'UnwrapOnErrError',
    'UnwrapOnNoneError',
    'UnwrapOnOkError',
    # Settings
    'Settings',
    'get_settings',
    'init',
    'load_settings',
    'override_settings',
    # Logging
    'DiagnosticSink',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_diagnostic_sink',
    'get_logger',
    'remove_log_hook',
    'set_diagnostic_sink',
]
