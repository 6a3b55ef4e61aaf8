from ._config import Config, get_config, set_config
from ._deprecation import deprecated
from ._dual import dual
from ._main import Pipeable

__all__ = [
    "Config",
    "Pipeable",
    "deprecated",
    "dual",
    "get_config",
    "set_config",
]
