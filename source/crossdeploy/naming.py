"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

PIPELINE_NAME = "CrossAccountPipeline"
ARTIFACT_KEY_ALIAS = "key/artifact-key"
DEPLOYMENT_ROLE_NAME = "CloudFormationDeploymentRole"
CROSS_ACCOUNT_ROLE_NAME = "CodePipelineCrossAccountRole"
DEV_DEPLOYMENT_STACK_NAME = "DevApplicationDeploymentStack"
PROD_DEPLOYMENT_STACK_NAME = "ProdApplicationDeploymentStack"


def repository_name(account: str) -> str:
    return f"repo-{account}"


def artifact_bucket_name(account: str) -> str:
    return f"artifact-bucket-{account}"


def role_arn(account: str, role_name: str) -> str:
    return f"arn:aws:iam::{account}:role/{role_name}"


def role_namespace_arn(account: str) -> str:
    """Every role in the account, used when the pipeline may assume any of them."""
    return role_arn(account, "*")
