"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

from datetime import datetime, timezone
from typing import Optional

from aws_cdk import (
    Stack,
    CfnOutput,
    RemovalPolicy,
)
from aws_cdk import aws_apigateway as apigateway
from aws_cdk import aws_lambda as lambda_
from constructs import Construct

from crossdeploy.infrastructure.deployment_policy import DeploymentPolicy
from crossdeploy.infrastructure.nag_suppressor import nagSuppressor, stackNagSuppressor
from crossdeploy.infrastructure.output_keys import ExportNames, OutputKeys


class ApplicationStack(Stack):
    """
    The hello function for one release stage.

    The function code is not packaged at synthesis. Its bucket and key are
    CloudFormation parameters, and the pipeline assigns them from the build
    artifact when it deploys the synthesized template.
    """

    lambda_code: lambda_.CfnParametersCode
    outputs: dict[str, CfnOutput]

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        stage_name: str,
        deployment_policy: Optional[DeploymentPolicy] = None,
        version_label: Optional[str] = None,
    ) -> None:
        super().__init__(scope, construct_id)

        self.outputs = {}
        deployment_policy = deployment_policy or DeploymentPolicy()
        version_label = version_label or datetime.now(timezone.utc).isoformat()

        self.lambda_code = lambda_.Code.from_cfn_parameters()

        hello_lambda = lambda_.Function(
            self,
            "Lambda",
            function_name="HelloLambda",
            handler="crossdeploy.application.handlers.hello_handler",
            code=self.lambda_code,
            runtime=lambda_.Runtime.PYTHON_3_12,
            environment={"STAGE_NAME": stage_name},
        )

        # Version replacement happens on description change, so each label
        # publishes the freshly deployed code as a new version.
        version = lambda_.Version(
            self,
            "LambdaVersion",
            lambda_=hello_lambda,
            description=version_label,
            removal_policy=RemovalPolicy.RETAIN,
        )
        alias = lambda_.Alias(
            self,
            "LambdaAlias",
            alias_name=stage_name,
            version=version,
        )

        apigateway.LambdaRestApi(
            self,
            "HelloLambdaRestApi",
            handler=alias,
            endpoint_export_name=ExportNames.REST_API_ENDPOINT,
            cloud_watch_role=False,
            deploy_options=apigateway.StageOptions(stage_name=stage_name),
        )

        deployment_group = deployment_policy.create_deployment_group(self, alias)

        self.outputs[OutputKeys.HELLO_LAMBDA_FUNCTION_NAME] = CfnOutput(
            self,
            OutputKeys.HELLO_LAMBDA_FUNCTION_NAME,
            value=hello_lambda.function_name,
        )

        self.outputs[OutputKeys.HELLO_LAMBDA_ALIAS_ARN] = CfnOutput(
            self,
            OutputKeys.HELLO_LAMBDA_ALIAS_ARN,
            value=alias.function_arn,
        )

        assert hello_lambda.role is not None
        nagSuppressor(
            hello_lambda.role,
            ["AwsSolutions-IAM4"],
            applies_to=["service-role/AWSLambdaBasicExecutionRole"],
        )
        nagSuppressor(hello_lambda, ["AwsSolutions-L1"])
        nagSuppressor(deployment_group.role, ["AwsSolutions-IAM4"])
        stackNagSuppressor(
            self,
            [
                "AwsSolutions-APIG1",
                "AwsSolutions-APIG2",
                "AwsSolutions-APIG3",
                "AwsSolutions-APIG4",
                "AwsSolutions-APIG6",
                "AwsSolutions-COG4",
            ],
        )
