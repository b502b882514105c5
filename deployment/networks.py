from ape import networks
from ape.api import NetworkAPI

from deployment.constants import LOCAL_NETWORKS

NETWORK_NAME_SEPARATOR = "_"


def get_network_name(network: NetworkAPI) -> str:
    """
    Returns the deployment network name for an ape network,
    e.g. ecosystem 'linea' and network 'mainnet' -> 'linea_mainnet'.
    """
    ecosystem_name = network.ecosystem.name
    return f"{ecosystem_name}{NETWORK_NAME_SEPARATOR}{network.name}"


def is_local_network() -> bool:
    return networks.provider.network.name in LOCAL_NETWORKS
