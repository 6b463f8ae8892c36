"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""


class OutputKeys:
    HELLO_LAMBDA_FUNCTION_NAME = "HelloLambdaFunctionName"
    HELLO_LAMBDA_ALIAS_ARN = "HelloLambdaAliasArn"
    ARTIFACT_BUCKET_ENCRYPTION_KEY_ARN = "ArtifactBucketEncryptionKeyArn"


class ExportNames:
    REST_API_ENDPOINT = "HelloLambdaRestApiEndpoint"
    ARTIFACT_BUCKET_ENCRYPTION_KEY = "ArtifactBucketEncryptionKey"
