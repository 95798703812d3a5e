"""Constant values used for tests."""

SUBSCRIPTION_ID = "00000000-0000-0000-0000-000000000001"
RESOURCE_GROUP = "rg1"
ACCOUNT_NAME = "acct1"
SHARE_SUBSCRIPTION_NAME = "sub1"

SHARE_SUBSCRIPTION_ID = (
    f"/subscriptions/{SUBSCRIPTION_ID}/resourceGroups/{RESOURCE_GROUP}"
    f"/providers/Microsoft.DataShare/accounts/{ACCOUNT_NAME}"
    f"/shareSubscriptions/{SHARE_SUBSCRIPTION_NAME}"
)

RG2_SHARE_SUBSCRIPTION_ID = (
    f"/subscriptions/{SUBSCRIPTION_ID}/resourceGroups/rg2"
    f"/providers/Microsoft.DataShare/accounts/{ACCOUNT_NAME}"
    f"/shareSubscriptions/{SHARE_SUBSCRIPTION_NAME}"
)
