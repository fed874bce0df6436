"""Core types: Option, Result and Validation with their variants and constructors."""

from tupperware.types.option import Nothing, Option, Some, from_nullable, none, of, some
from tupperware.types.result import Err, Ok, Result, err, ok
from tupperware.types.validation import Failure, Success, Validation, assert_all, failure, success

__all__ = [
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
    'some',
    'success',
]
