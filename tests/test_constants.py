"""Tests for constants module."""
from aws_client_factory.constants import REGIONS, SERVICE_PRINCIPALS


class TestRegions:
    def test_no_duplicates(self):
        assert len(REGIONS) == len(set(REGIONS))

    def test_known_entries(self):
        assert "us-east-1" in REGIONS
        assert "amazonaws-us-gov" in REGIONS
        assert "cn-northwest-1" in REGIONS

    def test_order(self):
        assert REGIONS[0] == "us-east-1"
        assert REGIONS[-1] == "cn-northwest-1"
        assert len(REGIONS) == 19


class TestServicePrincipals:
    def test_sns(self):
        assert SERVICE_PRINCIPALS["sns"] == "sns.amazonaws.com"
