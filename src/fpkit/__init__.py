from . import array, guards, number, option, result, string
from ._core import Config, Pipeable, get_config, set_config
from ._functions import compose, pipe
from ._results import (
    NONE,
    Err,
    NoneOption,
    Ok,
    Option,
    OptionUnwrapError,
    Result,
    ResultUnwrapError,
    Some,
)

__all__ = [
    "NONE",
    "Config",
    "Err",
    "NoneOption",
    "Ok",
    "Option",
    "OptionUnwrapError",
    "Pipeable",
    "Result",
    "ResultUnwrapError",
    "Some",
    "array",
    "compose",
    "get_config",
    "guards",
    "number",
    "option",
    "pipe",
    "result",
    "set_config",
    "string",
]
