"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

from typing import List, Optional, Any

from aws_cdk import Stack
from cdk_nag import NagSuppressions

ID_REASON_MAP = {
    "AwsSolutions-S1": {
        "reason": "Artifact Bucket only holds short lived pipeline artifacts, server access logs are not required."
    },
    "AwsSolutions-IAM4": {
        "reason": "CDK grants AWS managed policies for Lambda basic execution and CodeDeploy by default. Replacing them with customer managed policies will be addressed later.",
        "applies_to": "Policy::arn:<AWS::Partition>:iam::aws:policy/{}",
    },
    "AwsSolutions-IAM5": {
        "reason": "Wildcards are generated by CDK grants on the artifact bucket and key, and by the cross-account role assumption which targets the prod account role namespace."
    },
    "AwsSolutions-L1": {
        "reason": "Lambda runtime is pinned so dev and prod run the same runtime across a promotion."
    },
    "AwsSolutions-APIG1": {
        "reason": "The hello endpoint carries no user data, access logging is not enabled."
    },
    "AwsSolutions-APIG2": {
        "reason": "The hello endpoint accepts any request and ignores its content."
    },
    "AwsSolutions-APIG3": {
        "reason": "WAF is not associated with the demo endpoint."
    },
    "AwsSolutions-APIG4": {
        "reason": "The hello endpoint is public by intent."
    },
    "AwsSolutions-APIG6": {
        "reason": "The hello endpoint carries no user data, stage logging is not enabled."
    },
    "AwsSolutions-COG4": {
        "reason": "The hello endpoint is public by intent, no Cognito authorizer is used."
    },
}


def nagSuppressor(
    nag_obj: Any,
    nag_id_list: List[str],
    applies_to: Optional[list[str]] = None,
) -> None:
    suppressions = []
    for nag_id in nag_id_list:
        suppression = {"id": nag_id, "reason": ID_REASON_MAP[nag_id]["reason"]}
        add_applies_to(suppression, nag_id, applies_to)
        suppressions.append(suppression)
    NagSuppressions.add_resource_suppressions(nag_obj, suppressions)


def stackNagSuppressor(stack: Stack, nag_id_list: List[str]) -> None:
    NagSuppressions.add_stack_suppressions(
        stack,
        [
            {"id": nag_id, "reason": ID_REASON_MAP[nag_id]["reason"]}
            for nag_id in nag_id_list
        ],
    )


def add_applies_to(
    suppression: Any, nag_id: str, applies_to: Optional[list[str]]
) -> None:
    if ID_REASON_MAP[nag_id].get("applies_to") and applies_to:
        suppression["appliesTo"] = []
        for apply_to in applies_to:
            applies_to_str = ID_REASON_MAP[nag_id]["applies_to"].format(apply_to)
            suppression["appliesTo"].append(applies_to_str)
