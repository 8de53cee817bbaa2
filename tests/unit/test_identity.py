from unittest.mock import Mock

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError, NoCredentialsError

from policyquery.errors import IdentityResolutionError
from policyquery.identity import get_account_number


def _session_with(sts_client):
    session = Mock()
    session.client.return_value = sts_client
    return session


class TestGetAccountNumber:
    def test_returns_account(self, mock_session):
        assert get_account_number(mock_session) == "596956765480"
        mock_session.client.assert_called_once_with("sts")

    def test_missing_account_field(self):
        sts_client = Mock()
        sts_client.get_caller_identity.return_value = {"UserId": "AIDAEXAMPLE"}

        with pytest.raises(IdentityResolutionError, match="No account number found"):
            get_account_number(_session_with(sts_client))

    def test_empty_account_field(self):
        sts_client = Mock()
        sts_client.get_caller_identity.return_value = {"Account": ""}

        with pytest.raises(IdentityResolutionError, match="No account number found"):
            get_account_number(_session_with(sts_client))

    def test_no_credentials(self):
        sts_client = Mock()
        sts_client.get_caller_identity.side_effect = NoCredentialsError()

        with pytest.raises(IdentityResolutionError, match="credentials not found"):
            get_account_number(_session_with(sts_client))

    def test_client_error(self):
        sts_client = Mock()
        sts_client.get_caller_identity.side_effect = ClientError(
            {"Error": {"Code": "ExpiredToken", "Message": "The security token has expired"}},
            "GetCallerIdentity",
        )

        with pytest.raises(IdentityResolutionError, match="ExpiredToken"):
            get_account_number(_session_with(sts_client))

    def test_connection_error(self):
        sts_client = Mock()
        sts_client.get_caller_identity.side_effect = EndpointConnectionError(
            endpoint_url="https://sts.amazonaws.com"
        )

        with pytest.raises(IdentityResolutionError, match="failed to get caller identity"):
            get_account_number(_session_with(sts_client))
