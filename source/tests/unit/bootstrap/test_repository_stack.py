"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import aws_cdk as core
import aws_cdk.assertions as assertions
import cdk_nag
import pytest

from crossdeploy.bootstrap.stack import RepositoryStack


@pytest.fixture
def stack() -> RepositoryStack:
    app = core.App()
    stack = RepositoryStack(app, "RepositoryStack")
    core.Aspects.of(stack).add(
        cdk_nag.AwsSolutionsChecks(log_ignores=True, verbose=True)
    )
    return stack


@pytest.fixture
def template(stack: RepositoryStack) -> assertions.Template:
    return assertions.Template.from_stack(stack)


def test_cdk_nag(stack: RepositoryStack) -> None:
    nag_finding = assertions.Match.string_like_regexp("AwsSolutions-.*")
    assertions.Annotations.from_stack(stack).has_no_error("*", nag_finding)
    assertions.Annotations.from_stack(stack).has_no_warning("*", nag_finding)


def test_one_repository_created(template: assertions.Template) -> None:
    template.resource_count_is("AWS::CodeCommit::Repository", 1)


def test_repository_named_after_account(template: assertions.Template) -> None:
    template.has_resource_properties(
        "AWS::CodeCommit::Repository",
        {
            "RepositoryName": {
                "Fn::Join": ["", ["repo-", {"Ref": "AWS::AccountId"}]]
            },
        },
    )


def test_repository_retained_on_stack_deletion(template: assertions.Template) -> None:
    template.has_resource(
        "AWS::CodeCommit::Repository",
        {"DeletionPolicy": "Retain", "UpdateReplacePolicy": "Retain"},
    )
