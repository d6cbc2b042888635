"""Shared test fixtures."""
import pytest
from unittest.mock import MagicMock, patch

from aws_client_factory.config import SdkConfig


@pytest.fixture(autouse=True)
def env_vars(monkeypatch):
    """Offline AWS environment for all tests."""
    monkeypatch.setenv("AWS_REGION", "us-east-1")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.delenv("AWS_PROFILE", raising=False)
    monkeypatch.delenv("USE_GLOBAL_CONFIG_CLOCK", raising=False)


@pytest.fixture
def sdk_config():
    """A fresh shared config so tests do not touch GLOBAL_CONFIG."""
    return SdkConfig()


@pytest.fixture
def mock_boto3():
    """Patch boto3 constructors to return a new MagicMock per call."""
    with patch("aws_client_factory.services.boto3") as boto3:
        boto3.client.side_effect = lambda *args, **kwargs: MagicMock()
        boto3.resource.side_effect = lambda *args, **kwargs: MagicMock()
        yield boto3
