"""
Data Share CLI Context

Configuration and lazily created Azure objects needed at command runtime.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from azure.identity import DefaultAzureCredential
from loguru import logger

from .tools.azure_datashare_client import DataShareClient

DEFAULT_LOG_LEVEL = "WARNING"


def _log_level(name: str) -> str:
    """Known loguru level name, or the default when the name is unknown"""
    level = name.strip().upper()
    try:
        logger.level(level)
    except ValueError:
        logger.warning("Unknown DATASHARE_LOG_LEVEL {!r}, using {}", name, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL
    return level


@dataclass
class DataShareConfig:
    """
    Data Share configuration - may be empty

    Loaded from environment variables. resource_group and account_name are
    only defaults for commands that name a share subscription by fields.
    """
    subscription_id: Optional[str] = None  # Optional, client auto-detects
    resource_group: Optional[str] = None
    account_name: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "DataShareConfig":
        return cls(
            subscription_id=os.getenv("AZURE_SUBSCRIPTION_ID") or os.getenv("DATASHARE_SUBSCRIPTION_ID"),
            resource_group=os.getenv("DATASHARE_RESOURCE_GROUP"),
            account_name=os.getenv("DATASHARE_ACCOUNT_NAME"),
            log_level=_log_level(os.getenv("DATASHARE_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
        )

    def missing_fields(self) -> list[str]:
        """Return list of missing default field names"""
        missing = []
        if not self.resource_group:
            missing.append("resource_group")
        if not self.account_name:
            missing.append("account_name")
        return missing


@dataclass
class DataShareContext:
    """
    Data Share CLI runtime context

    Credential and client are created on first use so that argument errors
    are reported without touching Azure.
    """
    config: DataShareConfig = field(default_factory=DataShareConfig)
    _credential: Optional[DefaultAzureCredential] = field(default=None, repr=False)
    _client: Optional[DataShareClient] = field(default=None, repr=False)

    @property
    def credential(self) -> DefaultAzureCredential:
        """Lazy-load DefaultAzureCredential"""
        if self._credential is None:
            self._credential = DefaultAzureCredential()
        return self._credential

    @property
    def client(self) -> DataShareClient:
        """Lazy-load the Data Share client"""
        if self._client is None:
            self._client = DataShareClient(
                subscription_id=self.config.subscription_id,
                credential=self.credential,
            )
        return self._client
