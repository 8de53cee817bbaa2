"""Shared fixtures for policyquery tests."""

from unittest.mock import Mock

import pytest

from policyquery import utils

VALID_UUID = "550e8400-e29b-41d4-a716-446655440000"
TESTING_ACCOUNT = "596956765480"


def make_query_pages(*pages):
    """Build Query paginator pages from lists of sort keys"""
    return [
        {"Items": [{"_pk": {"S": "policy/x"}, "_sk": {"S": sk}} for sk in sort_keys]}
        for sort_keys in pages
    ]


@pytest.fixture
def sts_client():
    client = Mock()
    client.get_caller_identity.return_value = {
        "UserId": "AIDAEXAMPLE",
        "Account": TESTING_ACCOUNT,
        "Arn": "arn:aws:iam::596956765480:user/operator",
    }
    return client


@pytest.fixture
def dynamodb_client():
    client = Mock()
    client.get_item.return_value = {
        "Item": {
            "_pk": {"S": f"quote/{VALID_UUID}"},
            "_sk": {"S": "quote"},
            "premium": {"N": "125.5"},
            "installments": {"N": "12"},
            "active": {"BOOL": True},
        }
    }
    paginator = Mock()
    paginator.paginate.return_value = make_query_pages(["STATE#2", "STATE#1", "v1", "v3", "v2"])
    client.get_paginator.return_value = paginator
    return client


@pytest.fixture
def mock_session(sts_client, dynamodb_client):
    session = Mock()
    clients = {"sts": sts_client, "dynamodb": dynamodb_client}
    session.client.side_effect = lambda service: clients[service]
    return session


@pytest.fixture(autouse=True)
def reset_debug_mode():
    utils.set_debug_enabled(False)
    yield
    utils.set_debug_enabled(False)
