"""Tests for DynaQuerySettings."""

import pytest

from dynaquery.settings import DynaQuerySettings

ENV_KEYS = (
    "AWS_REGION",
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
    "DYNAMODB_ENDPOINT_URL",
    "DYNAMODB_TABLE_PREFIX",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    fresh = DynaQuerySettings(_env_file=None)
    assert fresh.AWS_REGION == "us-east-1"
    assert fresh.AWS_ACCESS_KEY_ID is None
    assert fresh.AWS_SECRET_ACCESS_KEY is None
    assert fresh.AWS_SESSION_TOKEN is None
    assert fresh.DYNAMODB_ENDPOINT_URL is None
    assert fresh.DYNAMODB_TABLE_PREFIX == ""
    assert fresh.LOG_LEVEL == "INFO"


def test_reads_environment(clean_env):
    clean_env.setenv("AWS_REGION", "eu-west-1")
    clean_env.setenv("AWS_ACCESS_KEY_ID", "AKIDEXAMPLE")
    clean_env.setenv("DYNAMODB_ENDPOINT_URL", "http://localhost:8000")
    clean_env.setenv("DYNAMODB_TABLE_PREFIX", "dev_")
    clean_env.setenv("LOG_LEVEL", "DEBUG")
    fresh = DynaQuerySettings(_env_file=None)
    assert fresh.AWS_REGION == "eu-west-1"
    assert fresh.AWS_ACCESS_KEY_ID == "AKIDEXAMPLE"
    assert fresh.DYNAMODB_ENDPOINT_URL == "http://localhost:8000"
    assert fresh.DYNAMODB_TABLE_PREFIX == "dev_"
    assert fresh.LOG_LEVEL == "DEBUG"


def test_reads_env_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("AWS_REGION=ap-south-1\nDYNAMODB_TABLE_PREFIX=test_\nUNRELATED=ignored\n")
    fresh = DynaQuerySettings(_env_file=env_file)
    assert fresh.AWS_REGION == "ap-south-1"
    assert fresh.DYNAMODB_TABLE_PREFIX == "test_"


def test_environment_wins_over_env_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("AWS_REGION=ap-south-1\n")
    clean_env.setenv("AWS_REGION", "eu-central-1")
    assert DynaQuerySettings(_env_file=env_file).AWS_REGION == "eu-central-1"
