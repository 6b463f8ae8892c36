"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

from typing import Any, Mapping

from aws_cdk import Stack, CfnOutput, RemovalPolicy
from aws_cdk import aws_codebuild as codebuild
from aws_cdk import aws_codecommit as codecommit
from aws_cdk import aws_codepipeline as codepipeline
from aws_cdk import aws_codepipeline_actions as codepipeline_actions
from aws_cdk import aws_iam as iam
from aws_cdk import aws_kms as kms
from aws_cdk import aws_s3 as s3
from constructs import Construct

from crossdeploy import naming
from crossdeploy.infrastructure.nag_suppressor import stackNagSuppressor
from crossdeploy.infrastructure.output_keys import ExportNames, OutputKeys
from crossdeploy.infrastructure.stack import ApplicationStack
from crossdeploy.pipeline.deploy import get_deploy_action

REPORT_FILE_NAME = "pytest-report.xml"
SYNTH_OUTPUT_DIRECTORY = "dist"


class PipelineStack(Stack):
    """
    This stack establishes a pipeline in the tooling account that builds the
    hello Lambda, deploys it to the dev stage in the same account and then
    promotes it to the prod stage in the prod account.

    The prod account must already contain the following roles:

       - CodePipelineCrossAccountRole
          - trusted by this account, assumed by the pipeline for the prod deploy
       - CloudFormationDeploymentRole
          - trusted by CloudFormation, used to manage the prod application stack

    The repository is created separately by the RepositoryStack and looked up
    here by name.
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        dev_application_stack: ApplicationStack,
        prod_application_stack: ApplicationStack,
        prod_account_id: str,
        require_prod_approval: bool = False,
    ) -> None:
        super().__init__(scope, construct_id)

        repository = codecommit.Repository.from_repository_name(
            self, "CodeCommitRepo", naming.repository_name(self.account)
        )

        prod_deployment_role = iam.Role.from_role_arn(
            self,
            "ProdDeploymentRole",
            naming.role_arn(prod_account_id, naming.DEPLOYMENT_ROLE_NAME),
            mutable=False,
        )
        prod_cross_account_role = iam.Role.from_role_arn(
            self,
            "ProdCrossAccountRole",
            naming.role_arn(prod_account_id, naming.CROSS_ACCOUNT_ROLE_NAME),
            mutable=False,
        )
        prod_account_root_principal = iam.AccountPrincipal(prod_account_id)

        # Prod must be able to read pipeline artifacts before its first deploy.
        key = kms.Key(
            self,
            "ArtifactKey",
            alias=naming.ARTIFACT_KEY_ALIAS,
            enable_key_rotation=True,
        )
        key.grant_decrypt(prod_account_root_principal)
        key.grant_decrypt(prod_cross_account_role)

        artifact_bucket = s3.Bucket(
            self,
            "ArtifactBucket",
            bucket_name=naming.artifact_bucket_name(self.account),
            block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
            encryption=s3.BucketEncryption.KMS,
            encryption_key=key,
            enforce_ssl=True,
            removal_policy=RemovalPolicy.DESTROY,
        )
        artifact_bucket.grant_put(prod_account_root_principal)
        artifact_bucket.grant_read(prod_account_root_principal)

        cdk_build = self.get_cdk_build_project(key, prod_account_id)
        lambda_build = self.get_lambda_build_project(key)

        source_output = codepipeline.Artifact()
        cdk_build_output = codepipeline.Artifact("CdkBuildOutput")
        lambda_build_output = codepipeline.Artifact("LambdaBuildOutput")

        prod_actions: list[codepipeline.IAction] = []
        if require_prod_approval:
            prod_actions.append(
                codepipeline_actions.ManualApprovalAction(
                    action_name="Promote_To_Prod",
                    additional_information="Approve to deploy the dev build to prod.",
                    run_order=1,
                )
            )
        prod_actions.append(
            get_deploy_action(
                prod_application_stack,
                template_output=cdk_build_output,
                lambda_build_output=lambda_build_output,
                stack_name=naming.PROD_DEPLOYMENT_STACK_NAME,
                deployment_role=prod_deployment_role,
                role=prod_cross_account_role,
                run_order=2 if require_prod_approval else None,
            )
        )

        self.pipeline = codepipeline.Pipeline(
            self,
            "Pipeline",
            pipeline_name=naming.PIPELINE_NAME,
            artifact_bucket=artifact_bucket,
            stages=[
                codepipeline.StageProps(
                    stage_name="Source",
                    actions=[
                        codepipeline_actions.CodeCommitSourceAction(
                            action_name="CodeCommit_Source",
                            repository=repository,
                            output=source_output,
                        ),
                    ],
                ),
                codepipeline.StageProps(
                    stage_name="Build",
                    actions=[
                        codepipeline_actions.CodeBuildAction(
                            action_name="Application_Build",
                            project=lambda_build,
                            input=source_output,
                            outputs=[lambda_build_output],
                        ),
                        codepipeline_actions.CodeBuildAction(
                            action_name="CDK_Synth",
                            project=cdk_build,
                            input=source_output,
                            outputs=[cdk_build_output],
                        ),
                    ],
                ),
                codepipeline.StageProps(
                    stage_name="Deploy_Dev",
                    actions=[
                        get_deploy_action(
                            dev_application_stack,
                            template_output=cdk_build_output,
                            lambda_build_output=lambda_build_output,
                            stack_name=naming.DEV_DEPLOYMENT_STACK_NAME,
                        ),
                    ],
                ),
                codepipeline.StageProps(
                    stage_name="Deploy_Prod",
                    actions=prod_actions,
                ),
            ],
        )

        self.pipeline.add_to_role_policy(
            iam.PolicyStatement(
                effect=iam.Effect.ALLOW,
                actions=["sts:AssumeRole"],
                resources=[naming.role_namespace_arn(prod_account_id)],
            )
        )

        CfnOutput(
            self,
            OutputKeys.ARTIFACT_BUCKET_ENCRYPTION_KEY_ARN,
            value=key.key_arn,
            export_name=ExportNames.ARTIFACT_BUCKET_ENCRYPTION_KEY,
        )

        stackNagSuppressor(self, ["AwsSolutions-S1", "AwsSolutions-IAM5"])

    def get_cdk_build_project(
        self, key: kms.IKey, prod_account_id: str
    ) -> codebuild.PipelineProject:
        return codebuild.PipelineProject(
            self,
            "CdkBuild",
            build_spec=codebuild.BuildSpec.from_object(
                {
                    "version": "0.2",
                    "phases": {
                        "install": {
                            "commands": [
                                "npm install -g aws-cdk",
                                'pip install ".[dev]"',
                            ],
                        },
                        "build": {
                            "commands": [
                                f"tox -- --junitxml={REPORT_FILE_NAME}",
                                f"npx cdk synth -c prod-account={prod_account_id} -o {SYNTH_OUTPUT_DIRECTORY}",
                            ],
                        },
                    },
                    "artifacts": {
                        "base-directory": SYNTH_OUTPUT_DIRECTORY,
                        "files": ["*ApplicationStack.template.json"],
                    },
                    **self.get_reports_partial_build_spec(REPORT_FILE_NAME),
                }
            ),
            environment=self.get_build_environment(),
            encryption_key=key,
        )

    def get_lambda_build_project(self, key: kms.IKey) -> codebuild.PipelineProject:
        return codebuild.PipelineProject(
            self,
            "LambdaBuild",
            build_spec=codebuild.BuildSpec.from_object(
                {
                    "version": "0.2",
                    "phases": {
                        "install": {
                            "commands": ["cd source"],
                        },
                        "build": {
                            "commands": ["python -m compileall -q crossdeploy/application"],
                        },
                    },
                    "artifacts": {
                        "base-directory": "source",
                        "files": ["crossdeploy/application/**/*"],
                    },
                }
            ),
            environment=self.get_build_environment(),
            encryption_key=key,
        )

    def get_build_environment(self) -> codebuild.BuildEnvironment:
        return codebuild.BuildEnvironment(
            build_image=codebuild.LinuxBuildImage.STANDARD_7_0,
        )

    def get_reports_partial_build_spec(self, filename: str) -> Mapping[str, Any]:
        return {
            "reports": {
                "pytest_reports": {
                    "files": [filename],
                    "file-format": "JUNITXML",
                }
            }
        }
