"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import typing

import pytest

from crossdeploy.application.handlers import hello_handler


@pytest.mark.parametrize(
    "stage_name", ["dev", "prod", "", "qa 2", "ünïcode", "{not-a-template}"]
)
def test_hello_handler_returns_stage_greeting(
    monkeypatch: pytest.MonkeyPatch,
    api_gateway_event: typing.Dict[str, typing.Any],
    stage_name: str,
) -> None:
    monkeypatch.setenv("STAGE_NAME", stage_name)

    response = hello_handler(api_gateway_event, None)

    assert 200 == response["statusCode"]
    assert f"Hello from {stage_name} environment!\n" == response["body"]


def test_hello_handler_ignores_request_content(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("STAGE_NAME", "dev")

    response = hello_handler({"httpMethod": "POST", "body": "anything"}, None)

    assert {"statusCode": 200, "body": "Hello from dev environment!\n"} == response


def test_hello_handler_requires_stage_name(
    monkeypatch: pytest.MonkeyPatch,
    api_gateway_event: typing.Dict[str, typing.Any],
) -> None:
    monkeypatch.delenv("STAGE_NAME", raising=False)

    with pytest.raises(KeyError):
        hello_handler(api_gateway_event, None)


def test_hello_handler_logs_invocation(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
    api_gateway_event: typing.Dict[str, typing.Any],
) -> None:
    monkeypatch.setenv("STAGE_NAME", "prod")

    hello_handler(api_gateway_event, None)

    assert "Hello lambda has been invoked in the prod environment." in caplog.text
