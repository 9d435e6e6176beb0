"""Origination parameters of the HealthDiagnosis contract.

The values are read from the environment after loading the .env file at the
repository root:

    HEALTH_DIAGNOSIS_OWNER  the deployer address that will own the contract
    HEALTH_DIAGNOSIS_FEE    the initial diagnosis fee in mutez (default 10000)

"""

import os
from collections import namedtuple
from pathlib import Path

from dotenv import load_dotenv

from contracts.healthDiagnosisContract import DEFAULT_FEE_MUTEZ

# The repository root, where the .env file is expected
PROJECT_ROOT = Path(__file__).resolve().parents[2]

# The valid Tezos address prefixes
ADDRESS_PREFIXES = ("tz1", "tz2", "tz3", "tz4", "KT1")

# The length of a base58 encoded Tezos address
ADDRESS_LENGTH = 36

DeploymentSettings = namedtuple("DeploymentSettings", ["owner", "fee"])


def parse_owner(value):
    """Validates the owner address.

    """
    if not value:
        raise ValueError(
            "HEALTH_DIAGNOSIS_OWNER is not set. Add the deployer address to "
            ".env or export it as an environment variable.")

    owner = value.strip()

    if not owner.startswith(ADDRESS_PREFIXES) or len(owner) != ADDRESS_LENGTH:
        raise ValueError(
            "HEALTH_DIAGNOSIS_OWNER must be a Tezos address, got %r." % value)

    return owner


def parse_fee(value):
    """Converts the fee setting to an amount of mutez.

    An empty or missing value selects the default fee.

    """
    if value is None or not value.strip():
        return DEFAULT_FEE_MUTEZ

    try:
        fee = int(value)
    except ValueError:
        raise ValueError(
            "HEALTH_DIAGNOSIS_FEE must be an integer number of mutez, "
            "got %r." % value) from None

    if fee < 0:
        raise ValueError("HEALTH_DIAGNOSIS_FEE cannot be negative.")

    return fee


def load_settings(env_file=None):
    """Loads the deployment settings.

    Variables already present in the environment take precedence over the
    ones defined in the .env file.

    """
    load_dotenv(env_file or PROJECT_ROOT / ".env")

    return DeploymentSettings(
        owner=parse_owner(os.getenv("HEALTH_DIAGNOSIS_OWNER")),
        fee=parse_fee(os.getenv("HEALTH_DIAGNOSIS_FEE")))
