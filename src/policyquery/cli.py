"""Command-line interface for the policy/quote query tool."""

import argparse
import sys
from typing import NamedTuple, Optional

import argcomplete
from botocore.exceptions import BotoCoreError

from .config import TABLES_FILE_ENV, load_account_tables
from .core import fetch_policy, fetch_quote
from .errors import ConfigurationError, PolicyQueryError
from .formatters import print_record
from .identity import get_account_number
from .selector import build_selector
from .tables import resolve_table_name
from .utils import create_session, debug_print, get_client, set_debug_enabled, validate_uuid


class QueryArguments(NamedTuple):
    """Validated command-line arguments."""

    scan_for_policy: bool
    id_to_get: str
    auto_select_latest_state: bool
    region: Optional[str] = None
    profile: Optional[str] = None
    tables_file: Optional[str] = None
    debug: bool = False


def build_parser():
    parser = argparse.ArgumentParser(
        prog="policyquery",
        description="Fetch a quote or policy record from DynamoDB and print it as colorized JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  policyquery 550e8400-e29b-41d4-a716-446655440000  (fetch a quote)
  policyquery --policy 550e8400-e29b-41d4-a716-446655440000  (pick a policy item)
  policyquery --policy --latest 550e8400-e29b-41d4-a716-446655440000  (policy STATE item)
  policyquery --profile staging --debug 550e8400-e29b-41d4-a716-446655440000

The table is chosen from the account of the active AWS credentials. Set
{TABLES_FILE_ENV} or pass --tables-file to override the built-in accounts.

Autocomplete Setup:
  Bash:
    eval "$(register-python-argcomplete policyquery)"
  Zsh:
    autoload -U bashcompinit && bashcompinit
    eval "$(register-python-argcomplete policyquery)"
  Fish:
    register-python-argcomplete --shell fish policyquery | source

  Add the appropriate command to your shell config (~/.bashrc, ~/.zshrc, ...)
        """,
    )

    parser.add_argument(
        "--policy",
        action="store_true",
        help="Query the policy table and choose which item of the policy to retrieve",
    )
    parser.add_argument(
        "--latest",
        action="store_true",
        help="With --policy, fetch the STATE item directly instead of prompting",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug output")
    parser.add_argument("--region", help="AWS region to use for requests")
    parser.add_argument("--profile", help="AWS profile to use for requests")
    parser.add_argument(
        "--tables-file",
        help=f"JSON file mapping account numbers to table names (default: ${TABLES_FILE_ENV})",
    )
    parser.add_argument("id", help="Quote or policy ID (UUID)")

    return parser


def parse_arguments(parser, argv=None) -> QueryArguments:
    """Parse argv and validate the trailing ID"""
    args = parser.parse_args(argv)
    return QueryArguments(
        scan_for_policy=args.policy,
        id_to_get=validate_uuid(args.id),
        auto_select_latest_state=args.latest,
        region=args.region,
        profile=args.profile,
        tables_file=args.tables_file,
        debug=args.debug,
    )


def run(query_args: QueryArguments, session=None, selector=None, console=None):
    """Resolve the table, fetch the requested record and print it"""
    if session is None:
        try:
            session = create_session(region=query_args.region, profile=query_args.profile)
        except BotoCoreError as e:
            raise ConfigurationError(f"failed to load configuration, {e}")
        debug_print(f"Created session with region={query_args.region}, profile={query_args.profile}")

    account_tables = load_account_tables(query_args.tables_file)
    account_number = get_account_number(session)
    table_name = resolve_table_name(account_number, query_args.scan_for_policy, account_tables)

    try:
        dynamodb_client = get_client("dynamodb", session)
    except BotoCoreError as e:
        raise ConfigurationError(f"failed to create DynamoDB client, {e}")

    if query_args.scan_for_policy:
        if selector is None:
            selector = build_selector(query_args.auto_select_latest_state)
        record = fetch_policy(dynamodb_client, table_name, query_args.id_to_get, selector)
    else:
        if query_args.auto_select_latest_state:
            debug_print("--latest only applies together with --policy, ignoring it")
        record = fetch_quote(dynamodb_client, table_name, query_args.id_to_get)

    print_record(record, console=console)
    return record


def main(argv=None):
    parser = build_parser()
    argcomplete.autocomplete(parser)

    try:
        query_args = parse_arguments(parser, argv)
        set_debug_enabled(query_args.debug)
        debug_print(f"Parsed arguments: {query_args}")
        run(query_args)
    except PolicyQueryError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
