"""
Remove a share subscription

resolve selector -> confirmation gate -> dispatch (blocking or submit-only).
"""

from enum import Enum
from typing import Any, Optional, Protocol

from loguru import logger

from .confirmation import ConfirmationPolicy
from .selectors import IdentityTriple, InputSelector, resolve

COMMAND_NAME = "Remove-DataShareSubscription"


class ShareSubscriptionDeleter(Protocol):
    def delete(self, resource_group: str, account_name: str, name: str) -> None: ...

    def begin_delete(self, resource_group: str, account_name: str, name: str) -> Any: ...


class ExecutionMode(Enum):
    """How the delete is carried out; the value is the client method used"""
    SYNC = "delete"
    ASYNC = "begin_delete"


def dispatch(client: ShareSubscriptionDeleter, mode: ExecutionMode, triple: IdentityTriple) -> Any:
    """Call the client entry point for `mode`; returns the job handle for ASYNC, None for SYNC"""
    operation = getattr(client, mode.value)
    return operation(triple.resource_group, triple.account_name, triple.subscription_name)


class RemoveShareSubscription:
    """
    Delete request resolver and executor

    Holds no state between calls apart from `last_job`, the job handle of the
    most recent ASYNC dispatch (never polled here).
    """

    def __init__(
        self,
        client: ShareSubscriptionDeleter,
        confirmation: Optional[ConfirmationPolicy] = None,
        command_name: str = COMMAND_NAME,
    ):
        self.client = client
        self.confirmation = confirmation or ConfirmationPolicy()
        self.command_name = command_name
        self.last_job: Any = None

    def execute(
        self,
        selector: InputSelector,
        mode: ExecutionMode = ExecutionMode.SYNC,
        pass_thru: bool = False,
    ) -> Optional[bool]:
        """
        Remove the share subscription named by `selector`

        Args:
            selector: Which share subscription to remove
            mode: SYNC waits for the delete, ASYNC only submits it
            pass_thru: Return True once the delete was issued

        Returns:
            True if pass_thru and the delete was issued, otherwise None.
            Declined confirmation returns None without any remote call.

        Raises:
            InvalidArgumentError: the selector is missing required data
            Errors from the client are propagated unchanged
        """
        self.last_job = None
        triple = resolve(selector)

        if not self.confirmation.confirm(triple.subscription_name, self.command_name):
            logger.info("Removal of share subscription {} not confirmed", triple.subscription_name)
            return None

        logger.info(
            "Removing share subscription {} (account {}, resource group {}, mode {})",
            triple.subscription_name,
            triple.account_name,
            triple.resource_group,
            mode.name,
        )
        job = dispatch(self.client, mode, triple)
        if mode is ExecutionMode.ASYNC:
            self.last_job = job
            logger.info("Submitted removal of share subscription {}", triple.subscription_name)

        if pass_thru:
            return True
        return None
