"""
Share subscription selectors

A share subscription can be named three ways: the resource group / account /
name fields, its ARM resource id, or a handle object as returned by a
"show" call. Each way is one selector class; resolve() turns any of them into
the IdentityTriple used for the remote call.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union

from loguru import logger

from .errors import InvalidArgumentError
from .resource_id import (
    extract_account_name,
    extract_resource_group,
    extract_share_subscription_name,
)


@dataclass(frozen=True)
class IdentityTriple:
    """Address of a share subscription"""
    resource_group: str
    account_name: str
    subscription_name: str

    def missing_fields(self) -> list[str]:
        """Return list of empty field names"""
        missing = []
        if not self.resource_group:
            missing.append("resource_group")
        if not self.account_name:
            missing.append("account_name")
        if not self.subscription_name:
            missing.append("subscription_name")
        return missing


@dataclass
class ShareSubscriptionHandle:
    """
    Share subscription object

    Mirrors the service representation closely enough to be built from the
    JSON printed by `show` (camelCase or snake_case keys).
    """
    id: Optional[str]
    name: Optional[str] = None
    share_name: Optional[str] = None
    provisioning_state: Optional[str] = None
    share_subscription_status: Optional[str] = None
    invitation_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShareSubscriptionHandle":
        properties = data.get("properties") or {}

        def pick(snake: str, camel: str) -> Optional[str]:
            for source in (data, properties):
                if source.get(snake) is not None:
                    return source[snake]
                if source.get(camel) is not None:
                    return source[camel]
            return None

        return cls(
            id=data.get("id"),
            name=data.get("name"),
            share_name=pick("share_name", "shareName"),
            provisioning_state=pick("provisioning_state", "provisioningState"),
            share_subscription_status=pick(
                "share_subscription_status", "shareSubscriptionStatus"
            ),
            invitation_id=pick("invitation_id", "invitationId"),
        )


@dataclass(frozen=True)
class FieldsSelector:
    resource_group: str
    account_name: str
    subscription_name: str


@dataclass(frozen=True)
class ResourceIdSelector:
    resource_id: str


@dataclass(frozen=True)
class HandleSelector:
    share_subscription: Optional[ShareSubscriptionHandle]


InputSelector = Union[FieldsSelector, ResourceIdSelector, HandleSelector]


def _from_resource_id(resource_id: str) -> IdentityTriple:
    if not resource_id:
        raise InvalidArgumentError("Resource id must not be empty")
    return IdentityTriple(
        resource_group=extract_resource_group(resource_id),
        account_name=extract_account_name(resource_id),
        subscription_name=extract_share_subscription_name(resource_id),
    )


def resolve(selector: InputSelector) -> IdentityTriple:
    """
    Resolve a selector to the share subscription it names

    Args:
        selector: One of FieldsSelector, ResourceIdSelector, HandleSelector

    Returns:
        IdentityTriple with all three parts non-empty

    Raises:
        InvalidArgumentError: if the selector is missing required data
        MalformedResourceIdError: if a resource id lacks the account or
            share subscription segment
    """
    if isinstance(selector, ResourceIdSelector):
        logger.debug("Resolving share subscription from resource id {}", selector.resource_id)
        return _from_resource_id(selector.resource_id)

    if isinstance(selector, HandleSelector):
        handle = selector.share_subscription
        if handle is None or not handle.id:
            raise InvalidArgumentError("Share subscription object is missing or has no id")
        logger.debug("Resolving share subscription from object id {}", handle.id)
        return _from_resource_id(handle.id)

    if isinstance(selector, FieldsSelector):
        triple = IdentityTriple(
            resource_group=selector.resource_group,
            account_name=selector.account_name,
            subscription_name=selector.subscription_name,
        )
        missing = triple.missing_fields()
        if missing:
            raise InvalidArgumentError(f"Missing required fields: {', '.join(missing)}")
        return triple

    raise InvalidArgumentError(f"Unsupported selector: {type(selector).__name__}")


def selector_from_options(
    resource_group: Optional[str] = None,
    account_name: Optional[str] = None,
    name: Optional[str] = None,
    resource_id: Optional[str] = None,
    share_subscription: Optional[ShareSubscriptionHandle] = None,
    use_handle: bool = False,
) -> InputSelector:
    """
    Build exactly one selector from loosely populated options

    Resource id wins over the handle, the handle wins over the fields.
    `use_handle` marks the handle path as chosen even when the handle is None,
    so resolve() reports it instead of silently falling back to the fields.
    """
    if resource_id:
        return ResourceIdSelector(resource_id)
    if use_handle or share_subscription is not None:
        return HandleSelector(share_subscription)
    return FieldsSelector(resource_group or "", account_name or "", name or "")
