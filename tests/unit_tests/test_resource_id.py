"""Unit tests for resource id helpers."""

import pytest

from datashare_cli.errors import InvalidArgumentError
from datashare_cli.errors import MalformedResourceIdError
from datashare_cli.resource_id import extract_account_name
from datashare_cli.resource_id import extract_resource_group
from datashare_cli.resource_id import extract_share_subscription_name
from datashare_cli.resource_id import share_subscription_resource_id
from tests.consts import SHARE_SUBSCRIPTION_ID
from tests.consts import SUBSCRIPTION_ID


class TestExtractors:
    """Tests for the resource id extractors."""

    def test_extracts_all_segments(self):
        """Test group, account and share subscription are read from a full id."""
        assert extract_resource_group(SHARE_SUBSCRIPTION_ID) == "rg1"
        assert extract_account_name(SHARE_SUBSCRIPTION_ID) == "acct1"
        assert extract_share_subscription_name(SHARE_SUBSCRIPTION_ID) == "sub1"

    def test_segment_types_are_case_insensitive(self):
        """Test ARM ids in lower case are accepted."""
        resource_id = SHARE_SUBSCRIPTION_ID.lower()

        assert extract_account_name(resource_id) == "acct1"
        assert extract_share_subscription_name(resource_id) == "sub1"

    def test_missing_share_subscription_segment(self):
        """Test an account id has no share subscription name."""
        account_id = SHARE_SUBSCRIPTION_ID.rsplit("/shareSubscriptions/", 1)[0]

        assert extract_account_name(account_id) == "acct1"
        with pytest.raises(MalformedResourceIdError) as exc_info:
            extract_share_subscription_name(account_id)
        assert exc_info.value.missing == "shareSubscriptions"

    def test_not_an_arm_id(self):
        """Test a plain name cannot be decomposed."""
        with pytest.raises(MalformedResourceIdError):
            extract_account_name("sub1")
        with pytest.raises(MalformedResourceIdError):
            extract_resource_group("sub1")

    def test_other_resource_type(self):
        """Test an id of another resource type has no account segment."""
        storage_id = (
            f"/subscriptions/{SUBSCRIPTION_ID}/resourceGroups/rg1"
            "/providers/Microsoft.Storage/storageAccounts/store1"
        )

        with pytest.raises(MalformedResourceIdError):
            extract_account_name(storage_id)

    def test_empty_id(self):
        """Test an empty id is an invalid argument."""
        with pytest.raises(InvalidArgumentError):
            extract_account_name("")

    def test_malformed_is_invalid_argument(self):
        """Test MalformedResourceIdError can be handled as InvalidArgumentError."""
        assert issubclass(MalformedResourceIdError, InvalidArgumentError)
        assert issubclass(MalformedResourceIdError, ValueError)


class TestShareSubscriptionResourceId:
    """Tests for share_subscription_resource_id."""

    def test_builds_canonical_id(self):
        """Test the built id matches the canonical form."""
        assert share_subscription_resource_id(SUBSCRIPTION_ID, "rg1", "acct1", "sub1") == SHARE_SUBSCRIPTION_ID
