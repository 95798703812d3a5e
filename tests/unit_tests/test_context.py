"""Unit tests for configuration and context."""

from unittest.mock import MagicMock
from unittest.mock import patch

from datashare_cli.context import DataShareConfig
from datashare_cli.context import DataShareContext


class TestDataShareConfig:
    """Tests for DataShareConfig."""

    def test_from_env(self, clean_env):
        """Test values are read from the environment."""
        clean_env.setenv("DATASHARE_SUBSCRIPTION_ID", "sub-id")
        clean_env.setenv("DATASHARE_RESOURCE_GROUP", "rg1")
        clean_env.setenv("DATASHARE_ACCOUNT_NAME", "acct1")
        clean_env.setenv("DATASHARE_LOG_LEVEL", "debug")

        config = DataShareConfig.from_env()

        assert config.subscription_id == "sub-id"
        assert config.resource_group == "rg1"
        assert config.account_name == "acct1"
        assert config.log_level == "DEBUG"
        assert config.missing_fields() == []

    def test_empty_env(self, clean_env):
        """Test defaults when nothing is configured."""
        config = DataShareConfig.from_env()

        assert config.subscription_id is None
        assert config.log_level == "WARNING"
        assert config.missing_fields() == ["resource_group", "account_name"]

    def test_unknown_log_level_falls_back(self, clean_env):
        """Test an unknown DATASHARE_LOG_LEVEL is replaced by WARNING."""
        clean_env.setenv("DATASHARE_LOG_LEVEL", "verbose")

        assert DataShareConfig.from_env().log_level == "WARNING"

    def test_log_level_is_normalized(self, clean_env):
        """Test a known level is upper-cased and trimmed."""
        clean_env.setenv("DATASHARE_LOG_LEVEL", " info ")

        assert DataShareConfig.from_env().log_level == "INFO"


class TestDataShareContext:
    """Tests for DataShareContext."""

    @patch("datashare_cli.context.DataShareClient")
    @patch("datashare_cli.context.DefaultAzureCredential")
    def test_client_is_lazy_and_cached(self, mock_credential_class, mock_client_class):
        """Test the client is built once, on first access."""
        mock_client_class.return_value = MagicMock()
        context = DataShareContext(config=DataShareConfig(subscription_id="sub-id"))

        mock_client_class.assert_not_called()
        first = context.client
        second = context.client

        assert first is second
        mock_client_class.assert_called_once_with(
            subscription_id="sub-id", credential=mock_credential_class.return_value
        )
