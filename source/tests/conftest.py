"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import typing
import pytest


PROD_ACCOUNT_ID = "222222222222"


@pytest.fixture
def prod_account_id() -> str:
    return PROD_ACCOUNT_ID


@pytest.fixture
def api_gateway_event() -> typing.Dict[str, typing.Any]:
    return {
        "resource": "/{proxy+}",
        "path": "/hello",
        "httpMethod": "GET",
        "headers": {"Accept": "*/*"},
        "queryStringParameters": None,
        "pathParameters": {"proxy": "hello"},
        "requestContext": {
            "resourcePath": "/{proxy+}",
            "httpMethod": "GET",
            "stage": "dev",
        },
        "body": None,
        "isBase64Encoded": False,
    }
