"""Shared fixtures: a client and a mocked transport returning real Responses."""

import json
from unittest.mock import patch

import pytest
import requests

from robloxgroups import GroupClient


API_KEY = "test-api-key"
ROLES_URL = "https://apis.roblox.com/cloud/v2/groups/{group_id}/roles?maxPageSize=20"


def make_response(status=200, body=None, raw=None):
    """Build a requests.Response with a JSON body, or raw bytes when given."""
    response = requests.Response()
    response.status_code = status
    response.encoding = "utf-8"

    if raw is not None:
        response._content = raw
    elif body is not None:
        response._content = json.dumps(body).encode("utf-8")
    else:
        response._content = b""

    return response


def roles_page(roles, next_page_token=None):
    body = {"groupRoles": roles}

    if next_page_token is not None:
        body["nextPageToken"] = next_page_token

    return make_response(200, body)


@pytest.fixture
def client():
    return GroupClient(API_KEY)


@pytest.fixture
def mock_request():
    with patch("robloxgroups.modules.utils.requests.request") as mocked:
        yield mocked
