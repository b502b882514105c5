import typing
from pathlib import Path
from typing import Optional

from deployment.constants import DEFAULT_INITIALIZER, GUESS_TOKEN
from deployment.utils import _load_yaml, get_artifact_filepath


class DeploymentDescriptor(typing.NamedTuple):
    """The contract to deploy behind a proxy and the initializer to run."""

    contract_name: str
    initializer: str = DEFAULT_INITIALIZER


GUESS_TOKEN_DESCRIPTOR = DeploymentDescriptor(contract_name=GUESS_TOKEN)


def validate_config(config: typing.Dict) -> None:
    """Checks that a deployment params file has the required sections."""
    print("Validating parameters YAML...")

    if not isinstance(config, dict):
        raise DeploymentParameters.Invalid("Malformed deployment parameters YAML.")

    deployment = config.get("deployment")
    if not deployment or not deployment.get("name"):
        raise DeploymentParameters.Invalid("deployment name is not set in params file.")

    contract = config.get("contract")
    if not contract or not contract.get("name"):
        raise DeploymentParameters.Invalid("contract name is not set in params file.")

    initializer = contract.get("initializer", DEFAULT_INITIALIZER)
    if not isinstance(initializer, str) or not initializer:
        raise DeploymentParameters.Invalid(
            f"Malformed initializer '{initializer}' for {contract['name']}."
        )


class DeploymentParameters:
    """Represents the parameters of a single upgradeable deployment."""

    class Invalid(ValueError):
        """Raised when the deployment parameters are invalid"""

    def __init__(self, config: typing.Dict, path: Optional[Path] = None):
        validate_config(config)
        self.config = config
        self.path = path

    @classmethod
    def from_yaml(cls, filepath: Path) -> "DeploymentParameters":
        config = _load_yaml(filepath)
        return cls(config=config, path=filepath)

    @property
    def name(self) -> str:
        return self.config["deployment"]["name"]

    @property
    def descriptor(self) -> DeploymentDescriptor:
        contract = self.config["contract"]
        return DeploymentDescriptor(
            contract_name=contract["name"],
            initializer=contract.get("initializer", DEFAULT_INITIALIZER),
        )

    @property
    def artifact_filepath(self) -> Optional[Path]:
        return get_artifact_filepath(config=self.config)
