"""
Data Share CLI errors

Argument problems detected before a remote call, and a failed subscription
lookup. Azure SDK exceptions are propagated as-is.
"""


class DataShareCliError(Exception):
    """Base class for errors raised by datashare_cli itself"""


class InvalidArgumentError(DataShareCliError, ValueError):
    """The selected way of naming the share subscription is missing data"""


class MalformedResourceIdError(InvalidArgumentError):
    """A resource id could not be decomposed into its named segments"""

    def __init__(self, resource_id: str, missing: str):
        self.resource_id = resource_id
        self.missing = missing
        super().__init__(f"Resource id '{resource_id}' has no {missing} segment")


class SubscriptionNotFoundError(DataShareCliError):
    """No Azure subscription could be determined for the management client"""
