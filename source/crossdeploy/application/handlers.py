"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import logging
import os
from typing import TYPE_CHECKING, Any

from crossdeploy.application.model.responses import HelloResponse

if TYPE_CHECKING:
    from aws_lambda_powertools.utilities.data_classes.api_gateway_proxy_event import (
        APIGatewayProxyEvent,
    )
else:
    APIGatewayProxyEvent = object

STAGE_NAME_VARIABLE = "STAGE_NAME"

logger = logging.getLogger()
logger.setLevel(logging.INFO)


def hello_handler(_event: APIGatewayProxyEvent, _context: Any) -> HelloResponse:
    stage_name = os.environ[STAGE_NAME_VARIABLE]
    logger.info("Hello lambda has been invoked in the %s environment.", stage_name)
    return {
        "statusCode": 200,
        "body": f"Hello from {stage_name} environment!\n",
    }
