"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

from typing import Optional

from aws_cdk import CfnCapabilities
from aws_cdk import aws_codepipeline as codepipeline
from aws_cdk import aws_codepipeline_actions as codepipeline_actions
from aws_cdk import aws_iam as iam

from crossdeploy.infrastructure.stack import ApplicationStack
from crossdeploy.util.exceptions import CrossAccountRoleMisconfigured


def get_deploy_action(
    application_stack: ApplicationStack,
    template_output: codepipeline.Artifact,
    lambda_build_output: codepipeline.Artifact,
    stack_name: str,
    deployment_role: Optional[iam.IRole] = None,
    role: Optional[iam.IRole] = None,
    run_order: Optional[int] = None,
) -> codepipeline_actions.CloudFormationCreateUpdateStackAction:
    """
    Deploys the synthesized template of application_stack as stack_name.

    The Lambda artifact location is always assigned to the stack's code
    parameters, never the template artifact.

    A deploy into another account takes two roles from that account:

       - role
          - assumed by the pipeline to start the action
       - deployment_role
          - passed to CloudFormation, which runs as it to manage the stack

    Both are required together and must be different roles. A same-account
    deploy takes neither.
    """
    cross_account = deployment_role is not None or role is not None
    if cross_account:
        if deployment_role is None or role is None:
            raise CrossAccountRoleMisconfigured(
                "both a deployment role and an action role are required"
            )
        if deployment_role is role or deployment_role.role_arn == role.role_arn:
            raise CrossAccountRoleMisconfigured(
                "deployment role and action role must be different roles"
            )

    location = lambda_build_output.s3_location
    return codepipeline_actions.CloudFormationCreateUpdateStackAction(
        action_name="Deploy",
        template_path=template_output.at_path(application_stack.template_file),
        stack_name=stack_name,
        admin_permissions=True,
        parameter_overrides={
            **application_stack.lambda_code.assign(
                bucket_name=location.bucket_name, object_key=location.object_key
            ),
        },
        extra_inputs=[lambda_build_output],
        deployment_role=deployment_role,
        role=role,
        cfn_capabilities=[CfnCapabilities.ANONYMOUS_IAM] if cross_account else None,
        run_order=run_order,
    )
