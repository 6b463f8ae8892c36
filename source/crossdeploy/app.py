"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import aws_cdk as cdk

from crossdeploy.bootstrap.stack import RepositoryStack
from crossdeploy.config import load_settings
from crossdeploy.infrastructure.stack import ApplicationStack
from crossdeploy.pipeline.stack import PipelineStack


def main() -> None:
    app = cdk.App()
    settings = load_settings(app)

    RepositoryStack(app, "RepositoryStack")

    dev_application_stack = ApplicationStack(
        app,
        "DevApplicationStack",
        stage_name="dev",
        deployment_policy=settings.deployment_policy,
        version_label=settings.version_label,
    )
    prod_application_stack = ApplicationStack(
        app,
        "ProdApplicationStack",
        stage_name="prod",
        deployment_policy=settings.deployment_policy,
        version_label=settings.version_label,
    )
    PipelineStack(
        app,
        "CrossAccountPipelineStack",
        dev_application_stack=dev_application_stack,
        prod_application_stack=prod_application_stack,
        prod_account_id=settings.prod_account_id,
        require_prod_approval=settings.require_prod_approval,
    )
    app.synth()
