"""Unit tests for the deployment settings.

"""

import pytest

from contracts import healthDiagnosisContract
from scripts import deploymentSettings

OWNER = "tz1g6JRCpsEnD2BLiAzPNK3GBD1fKicV9rCx"


@pytest.fixture
def env_file(tmp_path, monkeypatch):
    # Start every test from a clean environment. Setting the variables first
    # makes monkeypatch remove whatever the .env files load afterwards
    for name in ("HEALTH_DIAGNOSIS_OWNER", "HEALTH_DIAGNOSIS_FEE"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)

    return tmp_path / ".env"


def test_default_fee(env_file, monkeypatch):
    monkeypatch.setenv("HEALTH_DIAGNOSIS_OWNER", OWNER)

    settings = deploymentSettings.load_settings(env_file)

    assert settings.owner == OWNER
    assert settings.fee == deploymentSettings.DEFAULT_FEE_MUTEZ == 10000


def test_settings_from_env_file(env_file):
    env_file.write_text(
        "HEALTH_DIAGNOSIS_OWNER=%s\nHEALTH_DIAGNOSIS_FEE=20000\n" % OWNER)

    settings = deploymentSettings.load_settings(env_file)

    assert settings == (OWNER, 20000)


def test_environment_takes_precedence(env_file, monkeypatch):
    env_file.write_text("HEALTH_DIAGNOSIS_FEE=20000\n")
    monkeypatch.setenv("HEALTH_DIAGNOSIS_OWNER", OWNER)
    monkeypatch.setenv("HEALTH_DIAGNOSIS_FEE", "0")

    assert deploymentSettings.load_settings(env_file).fee == 0


def test_missing_owner(env_file):
    with pytest.raises(ValueError, match="HEALTH_DIAGNOSIS_OWNER is not set"):
        deploymentSettings.load_settings(env_file)


@pytest.mark.parametrize("owner", [
    "alice",
    "tz9g6JRCpsEnD2BLiAzPNK3GBD1fKicV9rCx",
    "tz1g6JRCpsEnD2BLiAzPNK3GBD1fKicV9rC"])
def test_invalid_owner(owner):
    with pytest.raises(ValueError, match="must be a Tezos address"):
        deploymentSettings.parse_owner(owner)


def test_owner_is_stripped():
    assert deploymentSettings.parse_owner(" %s\n" % OWNER) == OWNER


@pytest.mark.parametrize("value, fee", [
    (None, 10000),
    ("", 10000),
    ("  ", 10000),
    ("0", 0),
    ("250000", 250000)])
def test_parse_fee(value, fee):
    assert deploymentSettings.parse_fee(value) == fee


@pytest.mark.parametrize("value, message", [
    ("0.01", "must be an integer"),
    ("ten", "must be an integer"),
    ("-1", "cannot be negative")])
def test_invalid_fee(value, message):
    with pytest.raises(ValueError, match=message):
        deploymentSettings.parse_fee(value)


def test_default_fee_matches_contract():
    assert (deploymentSettings.DEFAULT_FEE_MUTEZ
            is healthDiagnosisContract.DEFAULT_FEE_MUTEZ)
    assert deploymentSettings.parse_fee(None) == 10000
