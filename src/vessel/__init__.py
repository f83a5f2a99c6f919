"""vessel: immutable Option and Result containers with exhaustive matching.

Public API:
    - Option, Present(), Absent(): a value that may be absent
    - Result, Success(), Failure(): an outcome that may have failed
    - match(): free-function form of the containers' ``match`` dispatch
    - Settings, resolve_config(), config_scope(): library configuration
"""

from __future__ import annotations

import logging

from vessel.config import Settings, config_scope, resolve_config
from vessel.errors import (
    ConfigurationError,
    ContractViolationError,
    EmptyValueError,
    ExpectationError,
    FaultError,
    UnwrapErrOnSuccessError,
    UnwrapError,
    UnwrapOnFailureError,
    VesselError,
)
from vessel.match import match
from vessel.option import Absent, Option, Present
from vessel.result import Failure, Result, Success

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("vessel")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("vessel").addHandler(logging.NullHandler())

__all__ = [  # noqa: RUF022
    # Containers
    "Option",
    "Present",
    "Absent",
    "Result",
    "Success",
    "Failure",
    "match",
    # Configuration
    "Settings",
    "config_scope",
    "resolve_config",
    # Errors
    "VesselError",
    "ConfigurationError",
    "ContractViolationError",
    "UnwrapError",
    "EmptyValueError",
    "ExpectationError",
    "UnwrapOnFailureError",
    "UnwrapErrOnSuccessError",
    "FaultError",
    "__version__",
]
