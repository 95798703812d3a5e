"""
Data Share CLI - Azure Data Share subscription removal

Resolves a share subscription from fields, a resource id, or an object,
asks for confirmation, then deletes it (blocking or as a submitted job).
"""

from .confirmation import ConfirmationPolicy
from .context import DataShareConfig, DataShareContext
from .errors import DataShareCliError, InvalidArgumentError, MalformedResourceIdError
from .remove import ExecutionMode, RemoveShareSubscription
from .selectors import (
    FieldsSelector,
    HandleSelector,
    IdentityTriple,
    ResourceIdSelector,
    ShareSubscriptionHandle,
    resolve,
)
from .tools import DataShareClient

__version__ = "0.1.0"

__all__ = [
    "ConfirmationPolicy",
    "DataShareConfig",
    "DataShareContext",
    "DataShareCliError",
    "InvalidArgumentError",
    "MalformedResourceIdError",
    "ExecutionMode",
    "RemoveShareSubscription",
    "FieldsSelector",
    "HandleSelector",
    "IdentityTriple",
    "ResourceIdSelector",
    "ShareSubscriptionHandle",
    "resolve",
    "DataShareClient",
]
