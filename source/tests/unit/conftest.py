"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import typing

import aws_cdk as core
import aws_cdk.assertions as assertions
import cdk_nag
import pytest

from crossdeploy.infrastructure.stack import ApplicationStack
from crossdeploy.pipeline.stack import PipelineStack

VERSION_LABEL = "test-build"


def add_nag_checks(stack: core.Stack) -> None:
    core.Aspects.of(stack).add(
        cdk_nag.AwsSolutionsChecks(log_ignores=True, verbose=True)
    )


@pytest.fixture
def app() -> core.App:
    return core.App()


@pytest.fixture
def dev_stack(app: core.App) -> ApplicationStack:
    stack = ApplicationStack(
        app, "DevApplicationStack", stage_name="dev", version_label=VERSION_LABEL
    )
    add_nag_checks(stack)
    return stack


@pytest.fixture
def prod_stack(app: core.App) -> ApplicationStack:
    return ApplicationStack(
        app, "ProdApplicationStack", stage_name="prod", version_label=VERSION_LABEL
    )


@pytest.fixture
def dev_template(dev_stack: ApplicationStack) -> assertions.Template:
    return assertions.Template.from_stack(dev_stack)


@pytest.fixture
def pipeline_stack(
    app: core.App,
    dev_stack: ApplicationStack,
    prod_stack: ApplicationStack,
    prod_account_id: str,
) -> PipelineStack:
    stack = PipelineStack(
        app,
        "CrossAccountPipelineStack",
        dev_application_stack=dev_stack,
        prod_application_stack=prod_stack,
        prod_account_id=prod_account_id,
    )
    add_nag_checks(stack)
    return stack


@pytest.fixture
def pipeline_template(pipeline_stack: PipelineStack) -> assertions.Template:
    return assertions.Template.from_stack(pipeline_stack)


@pytest.fixture
def pipeline_stages(
    pipeline_template: assertions.Template,
) -> typing.List[typing.Dict[str, typing.Any]]:
    pipelines = pipeline_template.find_resources("AWS::CodePipeline::Pipeline")
    assert 1 == len(pipelines)
    stages: typing.List[typing.Dict[str, typing.Any]] = next(
        iter(pipelines.values())
    )["Properties"]["Stages"]
    return stages

