"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""


class ProdAccountNotConfigured(Exception):
    def __init__(self, context_key: str) -> None:
        self.message = f"Production account id was not provided. Set the '{context_key}' context value or CDK_INTEG_ACCOUNT/CDK_DEFAULT_ACCOUNT."
        super().__init__(self.message)


class InvalidAccountId(Exception):
    def __init__(self, account_id: str) -> None:
        self.message = f"Account id: {account_id} is not a 12 digit AWS account id."
        super().__init__(self.message)


class UnknownDeploymentStrategy(Exception):
    def __init__(self, strategy: str, known: list[str]) -> None:
        self.message = f"Deployment strategy: {strategy} is not one of: {', '.join(known)}"
        super().__init__(self.message)


class CrossAccountRoleMisconfigured(Exception):
    def __init__(self, reason: str) -> None:
        self.message = f"Cross-account deploy action is misconfigured: {reason}"
        super().__init__(self.message)


class InvalidContextValue(Exception):
    def __init__(self, key: str, value: object) -> None:
        self.message = f"Context '{key}' must be a boolean, got: {value}"
        super().__init__(self.message)
