"""Builds the HealthDiagnosis origination.

Run it with `python -m scripts.deploy` once the project is installed. SmartPy
writes the compiled Michelson code and the initial storage to the scenario
output directory, ready to be originated from the owner wallet.

"""

import smartpy as sp

from contracts import healthDiagnosisContract
from scripts.deploymentSettings import load_settings


@sp.add_test()
def deploy():
    # Load the origination parameters
    settings = load_settings()

    # Initialize the contract with the deployer as the owner
    scenario = sp.test_scenario("HealthDiagnosis", healthDiagnosisContract.main)
    scenario.h1("HealthDiagnosis origination")
    c = healthDiagnosisContract.main.HealthDiagnosis(
        sp.address(settings.owner), sp.mutez(settings.fee))
    scenario += c

    # Report the origination summary
    scenario.h2("Summary")
    scenario.p("Contract address:")
    scenario.show(c.address)
    scenario.p("Default fee: %s mutez" % settings.fee)
    scenario.p("Owner: %s" % settings.owner)
    scenario.show(c.data)
