"""Error types raised by the policy/quote query tool.

Every failure is fatal. Lower layers raise one of these and ``cli.main``
prints the message and exits non-zero.
"""


class PolicyQueryError(Exception):
    """Base class for all fatal tool errors."""


class InvalidArgumentError(PolicyQueryError):
    """Command-line input is missing or malformed."""


class ConfigurationError(PolicyQueryError):
    """The account-table mapping or AWS profile could not be loaded."""


class IdentityResolutionError(PolicyQueryError):
    """The caller's account number could not be determined."""


class UnknownAccountError(PolicyQueryError):
    """The caller's account has no configured tables."""

    def __init__(self, account_number):
        self.account_number = account_number
        super().__init__(f"Unknown account number {account_number}")


class DataAccessError(PolicyQueryError):
    """A DynamoDB request failed or its response could not be decoded."""


class NoItemsFoundError(DataAccessError):
    """A policy partition query returned no items."""

    def __init__(self, id_to_get, table_name):
        self.id_to_get = id_to_get
        self.table_name = table_name
        super().__init__(f"No items found for ID {id_to_get} in table {table_name}")


class SelectionError(PolicyQueryError):
    """The interactive sort-key selection failed or was aborted."""


class PresentationError(PolicyQueryError):
    """A record could not be rendered as JSON."""
