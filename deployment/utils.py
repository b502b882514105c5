import json
import os
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from ape import networks, project
from ape.contracts import ContractContainer

from deployment.constants import (
    ARTIFACTS_DIR,
    OZ_DEPENDENCY_NAME,
    OZ_DEPENDENCY_VERSION,
    PROXY_NAME,
)
from deployment.networks import is_local_network


def _load_yaml(filepath: Path) -> dict:
    """Loads a YAML file."""
    with open(filepath, "r") as file:
        return yaml.safe_load(file)


def _load_json(filepath: Path) -> dict:
    """Loads a JSON file."""
    with open(filepath, "r") as file:
        return json.load(file)


def get_artifact_filepath(config: Dict) -> Optional[Path]:
    """Returns the filepath of the deployment artifact, if one is configured."""
    artifact_config = config.get("artifacts") or {}
    filename = artifact_config.get("filename")
    if not filename:
        return None
    artifact_dir = Path(artifact_config.get("dir", ARTIFACTS_DIR))
    return artifact_dir / filename


def check_etherscan_plugin() -> None:
    """
    Checks that the connected ecosystem has an ape-etherscan explorer and that
    its API key environment variable is set, before anything is sent.
    """
    if is_local_network():
        return
    try:
        from ape_etherscan.utils import API_KEY_ENV_KEY_MAP
    except ImportError:
        raise ImportError("Please install the ape-etherscan plugin to verify contracts.")
    network = networks.provider.network
    ecosystem_name = network.ecosystem.name
    explorer_envvar = API_KEY_ENV_KEY_MAP.get(ecosystem_name)
    if not explorer_envvar or network.explorer is None:
        raise ValueError(f"No block explorer available to verify contracts on {ecosystem_name}.")
    if not os.environ.get(explorer_envvar):
        raise ValueError(f"{explorer_envvar} is not set.")


def check_infura_plugin() -> None:
    """Checks that an Infura API key is available when connected through ape-infura."""
    if is_local_network() or networks.provider.name != "infura":
        return
    try:
        from ape_infura.provider import _ENVIRONMENT_VARIABLE_NAMES
    except ImportError:
        raise ImportError("Please install the ape-infura plugin to use this script.")
    if not any(os.environ.get(envvar) for envvar in _ENVIRONMENT_VARIABLE_NAMES):
        raise ValueError(
            "No Infura API key found in environment variables: "
            f"{', '.join(_ENVIRONMENT_VARIABLE_NAMES)}"
        )


def check_plugins(verify: bool) -> None:
    print("Checking plugins...")
    if verify:
        check_etherscan_plugin()
    check_infura_plugin()


def _get_dependency_contract_container(contract: str) -> ContractContainer:
    for dependency_name, dependency_versions in project.dependencies.items():
        if len(dependency_versions) > 1:
            raise ValueError(f"Ambiguous {dependency_name} dependency for {contract}")
        dependency_api = next(iter(dependency_versions.values()))
        if hasattr(dependency_api, contract):
            return getattr(dependency_api, contract)
    raise ValueError(f"No contract found with name '{contract}'.")


def get_contract_container(contract: str) -> ContractContainer:
    """Looks up a compiled contract by name in the project, then in its dependencies."""
    try:
        contract_container = getattr(project, contract)
    except AttributeError:
        contract_container = _get_dependency_contract_container(contract)

    return contract_container


def get_proxy_container() -> ContractContainer:
    """Returns the OpenZeppelin proxy that fronts upgradeable deployments."""
    oz_dependency = project.dependencies[OZ_DEPENDENCY_NAME][OZ_DEPENDENCY_VERSION]
    return getattr(oz_dependency, PROXY_NAME)
