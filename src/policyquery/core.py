"""DynamoDB operations for the policy/quote query tool."""

from typing import Any, Dict, List

from boto3.dynamodb.types import TypeDeserializer
from botocore.exceptions import BotoCoreError, ClientError, NoCredentialsError

from .config import PARTITION_KEY_ATTRIBUTE, SORT_KEY_ATTRIBUTE
from .errors import DataAccessError, NoItemsFoundError
from .sort_keys import order_policy_sort_keys
from .utils import debug_print

QUOTE_SORT_KEY = "quote"

_deserializer = TypeDeserializer()


def policy_partition_key(policy_id: str) -> str:
    return f"policy/{policy_id}"


def quote_partition_key(quote_id: str) -> str:
    return f"quote/{quote_id}"


def _describe_error(e: Exception) -> str:
    if isinstance(e, NoCredentialsError):
        return "AWS credentials not found. Configure credentials first."
    return str(e)


def deserialize_item(item) -> Dict[str, Any]:
    """Convert a low-level DynamoDB attribute map into plain Python values.

    A missing item (None) deserializes to an empty record.
    """
    if not item:
        return {}

    try:
        return {key: _deserializer.deserialize(value) for key, value in item.items()}
    except (TypeError, ValueError, AttributeError) as e:
        raise DataAccessError(f"Failed to unmarshal DynamoDB item: {e}")


def get_item(client, table_name: str, partition_key: str, sort_key: str) -> Dict[str, Any]:
    """Fetch exactly one item by its full composite key"""
    params = {
        "TableName": table_name,
        "Key": {
            PARTITION_KEY_ATTRIBUTE: {"S": partition_key},
            SORT_KEY_ATTRIBUTE: {"S": sort_key},
        },
    }
    debug_print(f"GetItem on {table_name} with key ({partition_key}, {sort_key})")

    try:
        response = client.get_item(**params)
    except (ClientError, BotoCoreError) as e:
        raise DataAccessError(f"GetItem API call failed: {_describe_error(e)}")

    item = response.get("Item")
    if item is None:
        debug_print(f"No item stored under ({partition_key}, {sort_key}), rendering empty record")

    return deserialize_item(item)


def query_sort_keys(client, table_name: str, partition_key: str) -> List[str]:
    """Return the sort keys of every item in a partition, in store order.

    Uses the query paginator so partitions spanning several result pages are
    read completely. Items without a string sort key are skipped.
    """
    params = {
        "TableName": table_name,
        "KeyConditionExpression": "#pk = :pkval",
        "ExpressionAttributeNames": {"#pk": PARTITION_KEY_ATTRIBUTE},
        "ExpressionAttributeValues": {":pkval": {"S": partition_key}},
    }
    debug_print(f"Query on {table_name} for partition {partition_key}")

    sort_keys = []
    try:
        paginator = client.get_paginator("query")
        for page_number, page in enumerate(paginator.paginate(**params), start=1):
            items = page.get("Items", [])
            debug_print(f"Query page {page_number} returned {len(items)} items")
            for item in items:
                sort_key = item.get(SORT_KEY_ATTRIBUTE, {})
                if isinstance(sort_key, dict) and "S" in sort_key:
                    sort_keys.append(sort_key["S"])
                else:
                    debug_print(f"Skipping item without string sort key: {sort_key!r}")
    except (ClientError, BotoCoreError) as e:
        raise DataAccessError(f"Query API call failed: {_describe_error(e)}")

    return sort_keys


def fetch_quote(client, table_name: str, quote_id: str) -> Dict[str, Any]:
    """Fetch the quote record for quote_id"""
    return get_item(client, table_name, quote_partition_key(quote_id), QUOTE_SORT_KEY)


def fetch_policy(client, table_name: str, policy_id: str, selector) -> Dict[str, Any]:
    """Enumerate a policy's sort keys, let selector pick one and fetch it.

    Raises NoItemsFoundError before any selection when the policy partition
    is empty.
    """
    partition_key = policy_partition_key(policy_id)

    sort_keys = query_sort_keys(client, table_name, partition_key)
    if not sort_keys:
        raise NoItemsFoundError(policy_id, table_name)
    debug_print(f"Found {len(sort_keys)} sort keys for policy {policy_id}")

    sort_key = selector.select(order_policy_sort_keys(sort_keys))
    debug_print(f"Selected sort key {sort_key}")

    return get_item(client, table_name, partition_key, sort_key)
