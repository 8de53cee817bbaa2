"""Map the caller's account number to the table to query."""

from typing import Mapping, Optional

from .config import DEFAULT_ACCOUNT_TABLES, AccountTables
from .errors import UnknownAccountError
from .utils import debug_print


def resolve_table_name(
    account_number: str,
    scan_for_policy: bool,
    account_tables: Optional[Mapping[str, AccountTables]] = None,
) -> str:
    """Return the policy or quote table deployed in the given account.

    Raises UnknownAccountError for accounts missing from the mapping.
    """
    if account_tables is None:
        account_tables = DEFAULT_ACCOUNT_TABLES

    tables = account_tables.get(account_number)
    if tables is None:
        raise UnknownAccountError(account_number)

    table_name = tables.policy_table if scan_for_policy else tables.quote_table
    debug_print(
        f"Account {account_number} ({tables.name}) resolved to "
        f"{'policy' if scan_for_policy else 'quote'} table {table_name}"
    )
    return table_name
