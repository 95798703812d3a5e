"""
Azure Data Share client

Thin wrapper over DataShareManagementClient, authenticated with
DefaultAzureCredential.
"""

import json
import os
import subprocess
from typing import Optional

from azure.core.polling import LROPoller
from azure.identity import DefaultAzureCredential
from azure.mgmt.datashare import DataShareManagementClient
from loguru import logger

from ..errors import SubscriptionNotFoundError
from ..resource_id import share_subscription_resource_id


class DataShareClient:
    """
    Azure Data Share client

    Exposes the share subscription operations used by the CLI.
    """

    def __init__(
        self,
        subscription_id: Optional[str] = None,
        credential: Optional[DefaultAzureCredential] = None,
    ):
        """
        Initialize the Data Share client

        Args:
            subscription_id: Azure subscription ID (optional, auto-detected)
            credential: Azure credential (optional, DefaultAzureCredential is created)
        """
        self.credential = credential or DefaultAzureCredential()

        if subscription_id:
            self.subscription_id = subscription_id
        else:
            self.subscription_id = self._get_subscription_id()

        self.client = DataShareManagementClient(
            credential=self.credential,
            subscription_id=self.subscription_id,
        )

    # === Share subscription operations ===

    def begin_delete(
        self, resource_group: str, account_name: str, name: str
    ) -> LROPoller:
        """
        Start deleting a share subscription

        Returns:
            Poller tracking the delete operation; it is not waited on
        """
        logger.debug(
            "begin_delete {}",
            share_subscription_resource_id(self.subscription_id, resource_group, account_name, name),
        )
        return self.client.share_subscriptions.begin_delete(
            resource_group_name=resource_group,
            account_name=account_name,
            share_subscription_name=name,
        )

    def delete(self, resource_group: str, account_name: str, name: str) -> None:
        """Delete a share subscription and wait for the operation to finish"""
        self.begin_delete(resource_group, account_name, name).result()

    # === Internal ===

    def _get_subscription_id(self) -> str:
        """Get subscription ID (environment first, then Azure CLI default, then SDK)"""
        sub_id = os.getenv("AZURE_SUBSCRIPTION_ID") or os.getenv("DATASHARE_SUBSCRIPTION_ID")
        if sub_id:
            return sub_id

        try:
            result = subprocess.run(
                ["az", "account", "show", "-o", "json"],
                capture_output=True,
                text=True,
                check=True,
            )
            sub_id = json.loads(result.stdout).get("id")
            if sub_id:
                return sub_id
        except (subprocess.CalledProcessError, FileNotFoundError, json.JSONDecodeError):
            logger.debug("Azure CLI default subscription not available")

        from azure.mgmt.resource import SubscriptionClient

        sub_client = SubscriptionClient(self.credential)
        for sub in sub_client.subscriptions.list():
            return sub.subscription_id
        raise SubscriptionNotFoundError(
            "No Azure subscription found; set AZURE_SUBSCRIPTION_ID or run az login"
        )
