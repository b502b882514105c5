import typing
from abc import ABC, abstractmethod
from typing import Any, List

from ape.api import AccountAPI
from ape.contracts.base import ContractContainer, ContractInstance
from ethpm_types import MethodABI
from web3.auto import w3

from deployment.confirm import _confirm_initializer
from deployment.constants import DEFAULT_INITIALIZER
from deployment.utils import get_proxy_container


def _validate_method_args(
    method_abis: List[MethodABI], args: typing.Sequence[Any]
) -> typing.Dict[str, Any]:
    """Validates the transaction arguments against the function ABI."""
    if len(method_abis) == 0:
        raise ValueError("No method abis provided for validation of args")

    abis_matching_args_length = [abi for abi in method_abis if len(abi.inputs) == len(args)]
    for abi in abis_matching_args_length:
        named_args = {}
        for arg, abi_input in zip(args, abi.inputs):
            if not w3.is_encodable(abi_input.type, arg):
                break
            named_args[abi_input.name] = arg
        else:
            return named_args
    raise ValueError(
        f"Could not find ABI for '{method_abis[0].name}' with {len(args)} arg(s) and given type(s)"
    )


class UpgradeableDeploymentFacility(ABC):
    """Deploys a contract behind an upgrade proxy and initializes it."""

    @abstractmethod
    def deploy_upgradeable(
        self,
        container: ContractContainer,
        args: List[Any],
        deployer: AccountAPI,
        initializer: str = DEFAULT_INITIALIZER,
    ) -> ContractInstance:
        """
        Deploys the implementation and a proxy pointed at it, calling `initializer`
        with `args` exactly once as part of the proxy construction.
        Returns the contract wrapped at the proxy address.
        """
        raise NotImplementedError


class ApeProxyFacility(UpgradeableDeploymentFacility):
    """
    Upgradeable deployments using ape accounts and the
    OpenZeppelin TransparentUpgradeableProxy.
    """

    def __init__(self, verify: bool = False, autosign: bool = False):
        self.verify = verify
        self.autosign = autosign

    def _get_kwargs(self) -> typing.Dict[str, Any]:
        """Returns the deployment kwargs."""
        return {"publish": self.verify}

    @staticmethod
    def _validate_initializer(
        container: ContractContainer, initializer: str, args: List[Any]
    ) -> None:
        contract_name = container.contract_type.name
        method_abis = [abi for abi in container.contract_type.methods if abi.name == initializer]
        if not method_abis:
            raise AttributeError(f"{contract_name} has no initializer named '{initializer}'.")
        _validate_method_args(method_abis=method_abis, args=args)

    def deploy_upgradeable(
        self,
        container: ContractContainer,
        args: List[Any],
        deployer: AccountAPI,
        initializer: str = DEFAULT_INITIALIZER,
    ) -> ContractInstance:
        contract_name = container.contract_type.name
        self._validate_initializer(container, initializer, args)
        if not self.autosign:
            _confirm_initializer(contract_name, initializer, args)

        print(f"\nDeploying {contract_name} implementation.")
        implementation = deployer.deploy(container, **self._get_kwargs())
        data = getattr(implementation, initializer).encode_input(*args)

        proxy_container = get_proxy_container()
        print(
            f"\nDeploying {proxy_container.contract_type.name} "
            f"contract to proxy {contract_name}."
        )
        proxy_contract = deployer.deploy(
            proxy_container,
            implementation.address,  # _logic
            deployer.address,  # initialOwner
            data,  # _data
            **self._get_kwargs(),
        )
        print(
            f"\nWrapping {contract_name} into {proxy_contract.contract_type.name} "
            f"at {proxy_contract.address}."
        )

        return container.at(proxy_contract.address)
