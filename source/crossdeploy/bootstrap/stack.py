"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

from aws_cdk import Stack, RemovalPolicy
from aws_cdk import aws_codecommit as codecommit
from constructs import Construct

from crossdeploy import naming


class RepositoryStack(Stack):
    """
    Creates the source repository once, ahead of the pipeline. The pipeline
    only looks the repository up by the same account-derived name, so
    redeploying the pipeline never recreates the source store.
    """

    def __init__(self, scope: Construct, construct_id: str) -> None:
        super().__init__(scope, construct_id)

        self.repository = codecommit.Repository(
            self,
            "CodeCommitRepo",
            repository_name=naming.repository_name(self.account),
            description="Source for the cross-account hello pipeline",
        )
        self.repository.apply_removal_policy(RemovalPolicy.RETAIN)
