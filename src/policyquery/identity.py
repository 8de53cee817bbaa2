"""Resolve the AWS account the caller's credentials belong to."""

from botocore.exceptions import BotoCoreError, ClientError, NoCredentialsError

from .errors import IdentityResolutionError
from .utils import debug_print, get_client


def get_account_number(session=None) -> str:
    """Ask STS for the caller identity and return its account number"""
    try:
        sts_client = get_client("sts", session)
        response = sts_client.get_caller_identity()
    except NoCredentialsError:
        raise IdentityResolutionError(
            "failed to get caller identity, AWS credentials not found. Configure credentials first."
        )
    except (ClientError, BotoCoreError) as e:
        raise IdentityResolutionError(f"failed to get caller identity, {e}")

    account_number = response.get("Account")
    if not account_number:
        raise IdentityResolutionError("No account number found in the response")

    debug_print(f"Caller identity: account={account_number}, arn={response.get('Arn')}")
    return account_number
