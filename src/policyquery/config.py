"""Account-to-table configuration for the policy/quote query tool."""

import json
import os
from typing import Dict, NamedTuple, Optional

from .errors import ConfigurationError
from .utils import debug_print

TABLES_FILE_ENV = "POLICYQUERY_TABLES_FILE"

PARTITION_KEY_ATTRIBUTE = "_pk"
SORT_KEY_ATTRIBUTE = "_sk"


class AccountTables(NamedTuple):
    """Named DynamoDB tables deployed in one AWS account."""

    name: str
    policy_table: str
    quote_table: str


DEFAULT_ACCOUNT_TABLES: Dict[str, AccountTables] = {
    "596956765480": AccountTables(
        name="testing",
        policy_table="policy-api-policyTable777C1DD9-V7ZQ8ZD0HHTM",
        quote_table="quote-api-quoteTableC29293A1-5EAYAUNFL0XD",
    ),
    "743702672182": AccountTables(
        name="staging",
        policy_table="policy-api-policyTable777C1DD9-1V1XGR44T8OX0",
        quote_table="quote-api-quoteTableC29293A1-NW27YUGPQXFP",
    ),
}


def parse_account_tables(document) -> Dict[str, AccountTables]:
    """Build an account mapping from a decoded JSON document.

    Expected shape::

        {
          "596956765480": {
            "name": "testing",
            "policy_table": "policy-api-...",
            "quote_table": "quote-api-..."
          }
        }
    """
    if not isinstance(document, dict):
        raise ConfigurationError("Tables file must contain a JSON object keyed by account number")

    account_tables = {}
    for account_number, entry in document.items():
        if not isinstance(entry, dict):
            raise ConfigurationError(f"Tables entry for account {account_number} must be an object")

        missing = [field for field in ("policy_table", "quote_table") if not entry.get(field)]
        if missing:
            raise ConfigurationError(
                f"Tables entry for account {account_number} is missing: {', '.join(missing)}"
            )

        account_tables[str(account_number)] = AccountTables(
            name=entry.get("name", str(account_number)),
            policy_table=entry["policy_table"],
            quote_table=entry["quote_table"],
        )

    return account_tables


def load_account_tables(path: Optional[str] = None) -> Dict[str, AccountTables]:
    """Load the account mapping from path, the environment, or the defaults"""
    path = path or os.environ.get(TABLES_FILE_ENV)
    if not path:
        debug_print(f"Using built-in tables for {len(DEFAULT_ACCOUNT_TABLES)} accounts")
        return dict(DEFAULT_ACCOUNT_TABLES)

    try:
        with open(path, "r") as f:
            document = json.load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Tables file {path} not found")
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not read tables file {path}: {e}")

    account_tables = parse_account_tables(document)
    debug_print(f"Loaded tables for accounts {sorted(account_tables)} from {path}")
    return account_tables
