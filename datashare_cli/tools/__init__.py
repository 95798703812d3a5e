"""
Data Share CLI Azure tools

Exports the Azure Data Share client.
"""

from .azure_datashare_client import DataShareClient

__all__ = [
    "DataShareClient",
]
