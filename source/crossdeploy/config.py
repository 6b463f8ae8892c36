"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import logging
import os
import re
from typing import Any, Optional

from aws_cdk import Token
from constructs import Construct

from crossdeploy.infrastructure.deployment_policy import ALL_AT_ONCE, DeploymentPolicy
from crossdeploy.util.exceptions import (
    InvalidAccountId,
    InvalidContextValue,
    ProdAccountNotConfigured,
)

logger = logging.getLogger()

ACCOUNT_ID_PATTERN = re.compile(r"^\d{12}$")
TRUE_VALUES = {"true", "1", "yes"}
FALSE_VALUES = {"false", "0", "no", ""}


class ContextKeys:
    PROD_ACCOUNT = "prod-account"
    DEPLOYMENT_STRATEGY = "deployment-strategy"
    ROLLBACK_ON_ALARM = "rollback-on-alarm"
    REQUIRE_PROD_APPROVAL = "require-prod-approval"
    VERSION_LABEL = "version-label"


PROD_ACCOUNT_ENVIRONMENT_VARIABLES = ["CDK_INTEG_ACCOUNT", "CDK_DEFAULT_ACCOUNT"]


class Settings:
    prod_account_id: str
    deployment_policy: DeploymentPolicy
    require_prod_approval: bool
    version_label: Optional[str]


def load_settings(scope: Construct) -> Settings:
    """
    Reads the deployment settings from CDK context.

    Values given with `cdk synth -c key=value` arrive as strings, values from
    cdk.json keep their JSON type, so booleans accept both.
    """
    node = scope.node
    settings = Settings()
    settings.prod_account_id = get_prod_account_id(scope)
    settings.deployment_policy = DeploymentPolicy(
        strategy=node.try_get_context(ContextKeys.DEPLOYMENT_STRATEGY) or ALL_AT_ONCE,
        rollback_on_alarm=to_bool(
            node.try_get_context(ContextKeys.ROLLBACK_ON_ALARM),
            ContextKeys.ROLLBACK_ON_ALARM,
        ),
    )
    settings.require_prod_approval = to_bool(
        node.try_get_context(ContextKeys.REQUIRE_PROD_APPROVAL),
        ContextKeys.REQUIRE_PROD_APPROVAL,
    )
    version_label = node.try_get_context(ContextKeys.VERSION_LABEL)
    settings.version_label = str(version_label) if version_label else None
    return settings


def get_prod_account_id(scope: Construct) -> str:
    account_id = scope.node.try_get_context(ContextKeys.PROD_ACCOUNT)
    if account_id:
        logger.info("Using prod account from context: %s", account_id)
    else:
        for variable in PROD_ACCOUNT_ENVIRONMENT_VARIABLES:
            account_id = os.environ.get(variable)
            if account_id:
                logger.warning(
                    "Context '%s' not set, using prod account from %s: %s",
                    ContextKeys.PROD_ACCOUNT,
                    variable,
                    account_id,
                )
                break
    if not account_id:
        raise ProdAccountNotConfigured(ContextKeys.PROD_ACCOUNT)

    account_id = str(account_id)
    if not Token.is_unresolved(account_id) and not ACCOUNT_ID_PATTERN.match(
        account_id
    ):
        raise InvalidAccountId(account_id)
    return account_id


def to_bool(value: Any, key: str) -> bool:
    if value is None or isinstance(value, bool):
        return bool(value)
    normalized = str(value).strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise InvalidContextValue(key, value)
