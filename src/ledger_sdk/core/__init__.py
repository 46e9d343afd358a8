"""Core domain layer of ledger-sdk: value objects, entities, protocols and exceptions."""

from .exceptions import *  # noqa: F401,F403
from .value_objects import *  # noqa: F401,F403
from .entities import *  # noqa: F401,F403
from .protocols import *  # noqa: F401,F403
