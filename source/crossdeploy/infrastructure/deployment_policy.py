"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

from aws_cdk import Duration
from aws_cdk import aws_cloudwatch as cloudwatch
from aws_cdk import aws_codedeploy as codedeploy
from aws_cdk import aws_lambda as lambda_
from constructs import Construct

from crossdeploy.util.exceptions import UnknownDeploymentStrategy

ALL_AT_ONCE = "all-at-once"

# Strategy names mapped to the predefined CodeDeploy Lambda configurations.
STRATEGIES = {
    ALL_AT_ONCE: "ALL_AT_ONCE",
    "canary-10-percent-5-minutes": "CANARY_10_PERCENT_5_MINUTES",
    "canary-10-percent-10-minutes": "CANARY_10_PERCENT_10_MINUTES",
    "canary-10-percent-15-minutes": "CANARY_10_PERCENT_15_MINUTES",
    "canary-10-percent-30-minutes": "CANARY_10_PERCENT_30_MINUTES",
    "linear-10-percent-every-1-minute": "LINEAR_10_PERCENT_EVERY_1_MINUTE",
    "linear-10-percent-every-2-minutes": "LINEAR_10_PERCENT_EVERY_2_MINUTES",
    "linear-10-percent-every-3-minutes": "LINEAR_10_PERCENT_EVERY_3_MINUTES",
    "linear-10-percent-every-10-minutes": "LINEAR_10_PERCENT_EVERY_10_MINUTES",
}


class DeploymentPolicy:
    """
    How traffic moves from the previous Lambda version to the new one.

    The default shifts all traffic at once and never rolls back on its own.
    Canary and linear strategies are selected by name. rollback_on_alarm adds
    an alarm on alias errors that stops and rolls back a deployment while
    traffic is shifting.
    """

    def __init__(
        self, strategy: str = ALL_AT_ONCE, rollback_on_alarm: bool = False
    ) -> None:
        if strategy not in STRATEGIES:
            raise UnknownDeploymentStrategy(strategy, list(STRATEGIES))
        self.strategy = strategy
        self.rollback_on_alarm = rollback_on_alarm

    @property
    def deployment_config(self) -> codedeploy.ILambdaDeploymentConfig:
        config: codedeploy.ILambdaDeploymentConfig = getattr(
            codedeploy.LambdaDeploymentConfig, STRATEGIES[self.strategy]
        )
        return config

    def create_deployment_group(
        self, scope: Construct, alias: lambda_.Alias
    ) -> codedeploy.LambdaDeploymentGroup:
        if not self.rollback_on_alarm:
            return codedeploy.LambdaDeploymentGroup(
                scope,
                "DeploymentGroup",
                alias=alias,
                deployment_config=self.deployment_config,
            )

        errors_alarm = cloudwatch.Alarm(
            scope,
            "LambdaAliasErrorsAlarm",
            metric=alias.metric_errors(period=Duration.minutes(1)),
            threshold=1,
            evaluation_periods=1,
            comparison_operator=cloudwatch.ComparisonOperator.GREATER_THAN_OR_EQUAL_TO_THRESHOLD,
            treat_missing_data=cloudwatch.TreatMissingData.NOT_BREACHING,
        )
        return codedeploy.LambdaDeploymentGroup(
            scope,
            "DeploymentGroup",
            alias=alias,
            deployment_config=self.deployment_config,
            alarms=[errors_alarm],
            auto_rollback=codedeploy.AutoRollbackConfig(
                failed_deployment=True,
                deployment_in_alarm=True,
            ),
        )
