"""
Share subscription resource id helpers

Resource ids look like:
    /subscriptions/{sub}/resourceGroups/{rg}/providers/Microsoft.DataShare
        /accounts/{account}/shareSubscriptions/{name}
"""

from typing import Dict, Optional

from azure.mgmt.core.tools import parse_resource_id

from .errors import InvalidArgumentError, MalformedResourceIdError

PROVIDER_NAMESPACE = "Microsoft.DataShare"
ACCOUNTS_TYPE = "accounts"
SHARE_SUBSCRIPTIONS_TYPE = "shareSubscriptions"


def _parse(resource_id: str) -> Dict[str, str]:
    if not resource_id:
        raise InvalidArgumentError("Resource id must not be empty")
    return parse_resource_id(resource_id)


def _segment(parts: Dict[str, str], resource_type: str) -> Optional[str]:
    """Name following a segment of the given type (ARM types are case-insensitive)"""
    wanted = resource_type.lower()
    if parts.get("type", "").lower() == wanted:
        return parts.get("name")
    for i in range(1, parts.get("last_child_num", 0) + 1):
        if parts.get(f"child_type_{i}", "").lower() == wanted:
            return parts.get(f"child_name_{i}")
    return None


def extract_resource_group(resource_id: str) -> str:
    group = _parse(resource_id).get("resource_group")
    if not group:
        raise MalformedResourceIdError(resource_id, "resourceGroups")
    return group


def extract_account_name(resource_id: str) -> str:
    name = _segment(_parse(resource_id), ACCOUNTS_TYPE)
    if not name:
        raise MalformedResourceIdError(resource_id, ACCOUNTS_TYPE)
    return name


def extract_share_subscription_name(resource_id: str) -> str:
    name = _segment(_parse(resource_id), SHARE_SUBSCRIPTIONS_TYPE)
    if not name:
        raise MalformedResourceIdError(resource_id, SHARE_SUBSCRIPTIONS_TYPE)
    return name


def share_subscription_resource_id(
    subscription_id: str,
    resource_group: str,
    account_name: str,
    share_subscription_name: str,
) -> str:
    """Build the ARM resource id of a share subscription"""
    return (
        f"/subscriptions/{subscription_id}"
        f"/resourceGroups/{resource_group}"
        f"/providers/{PROVIDER_NAMESPACE}"
        f"/{ACCOUNTS_TYPE}/{account_name}"
        f"/{SHARE_SUBSCRIPTIONS_TYPE}/{share_subscription_name}"
    )
