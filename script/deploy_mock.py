import logging

from script.deployments import DeployContext, DeployOptions, context_from_active_network
from script.helper_config import (
    DEPLOY_ARGS,
    DEVELOPMENT_CHAINS,
    LOG_SEPARATOR,
    MOCK_CONTRACT_NAME,
)
from script.runner import tags

TAGS = ("all", "mocks")


@tags(*TAGS)
def deploy_mocks(context: DeployContext, network_name: str, development_chains=DEVELOPMENT_CHAINS) -> None:
    """Deploy the VRF coordinator mock when running on a development chain."""
    if network_name not in development_chains:
        return

    deployments = context.deployments
    deployer = context.get_named_accounts()["deployer"]

    deployments.log("Development Chain detected!, Deploying mocks...")
    deployments.deploy(
        MOCK_CONTRACT_NAME,
        DeployOptions(from_account=deployer, log=True, args=DEPLOY_ARGS),
    )
    deployments.log("Mocks Deployed")
    deployments.log(LOG_SEPARATOR)


def moccasin_main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    context, network_name = context_from_active_network()
    deploy_mocks(context, network_name)
