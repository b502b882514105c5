from typing import Callable

from ape.api import AccountAPI
from ape.contracts.base import ContractContainer, ContractInstance

from deployment.oracles import BTC_USD_ORACLES, NetworkName, OracleRegistry
from deployment.params import GUESS_TOKEN_DESCRIPTOR, DeploymentDescriptor
from deployment.proxy import UpgradeableDeploymentFacility
from deployment.utils import get_contract_container


def deploy_guess_token(
    facility: UpgradeableDeploymentFacility,
    network: NetworkName,
    deployer: AccountAPI,
    oracles: OracleRegistry = BTC_USD_ORACLES,
    descriptor: DeploymentDescriptor = GUESS_TOKEN_DESCRIPTOR,
    artifacts: Callable[[str], ContractContainer] = get_contract_container,
) -> ContractInstance:
    """
    Deploys the token behind an upgrade proxy, initialized with
    the price feed of the given network.

    Deployment failures are not handled here; they end the run.
    """
    price_feed = oracles.resolve(network)
    if network not in oracles:
        print(
            f"(i) No price feed registered for network '{network}'; "
            f"using the {oracles.default_network} price feed."
        )
    container = artifacts(descriptor.contract_name)

    instance = facility.deploy_upgradeable(
        container,
        [price_feed],
        deployer=deployer,
        initializer=descriptor.initializer,
    )

    print(f"{descriptor.contract_name} deployed at {instance.address}")
    return instance
