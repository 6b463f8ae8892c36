"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

from typing import TypedDict


class HelloResponse(TypedDict):
    statusCode: int
    body: str
