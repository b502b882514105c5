import json
from pathlib import Path
from typing import List, NamedTuple

from ape import chain
from ape.contracts import ContractInstance
from ape.utils import EMPTY_BYTES32
from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address

from deployment.constants import EIP1967_ADMIN_SLOT, EIP1967_IMPLEMENTATION_SLOT
from deployment.utils import _load_json

ChainId = int

STANDARD_REGISTRY_JSON_FORMAT = {"indent": 4, "separators": (",", ": ")}


class DeploymentRecord(NamedTuple):
    """A single upgradeable deployment, as written to the deployment artifact."""

    chain_id: ChainId
    network: str
    name: str
    address: ChecksumAddress
    implementation: ChecksumAddress
    admin: ChecksumAddress
    price_feed: str
    initializer: str
    deployer: str


def read_proxy_slot(proxy_address: str, slot: int) -> ChecksumAddress:
    """Reads an address out of an EIP1967 proxy storage slot."""
    value = chain.provider.get_storage_at(address=proxy_address, slot=slot)
    if value == EMPTY_BYTES32:
        raise ValueError(
            f"Slot {hex(slot)} for contract at {proxy_address} is empty. "
            "Are you sure this is an EIP1967-compatible proxy?"
        )
    return to_checksum_address(value[-20:])


def create_record(
    instance: ContractInstance,
    network: str,
    price_feed: str,
    initializer: str,
    deployer: str,
) -> DeploymentRecord:
    return DeploymentRecord(
        chain_id=chain.chain_id,
        network=network,
        name=instance.contract_type.name,
        address=to_checksum_address(instance.address),
        implementation=read_proxy_slot(instance.address, EIP1967_IMPLEMENTATION_SLOT),
        admin=read_proxy_slot(instance.address, EIP1967_ADMIN_SLOT),
        price_feed=price_feed,
        initializer=initializer,
        deployer=deployer,
    )


def read_records(filepath: Path) -> List[DeploymentRecord]:
    data = _load_json(filepath)
    records = list()
    for chain_id, entries in data.items():
        for name, entry in entries.items():
            records.append(DeploymentRecord(chain_id=int(chain_id), name=name, **entry))
    return records


def check_not_published(filepath: Path, chain_id: ChainId) -> None:
    """Checks that the deployment artifact has no record yet for chain_id."""
    if not filepath.exists():
        return
    for record in read_records(filepath):
        if record.chain_id == chain_id:
            raise ValueError(
                f"Deployment is already published for chain_id {chain_id}: "
                f"{record.name} at {record.address}."
            )


def write_record(record: DeploymentRecord, filepath: Path) -> Path:
    """
    Adds a deployment record to the artifact at filepath. A chain id that is
    already published is never overwritten; the record goes to a sibling
    '.unmerged.json' file instead.
    """
    entry = record._asdict()
    chain_id, name = str(entry.pop("chain_id")), entry.pop("name")
    data = {chain_id: {name: entry}}

    filepath.parent.mkdir(parents=True, exist_ok=True)

    if filepath.exists():
        existing_data = _load_json(filepath)
        if chain_id in existing_data:
            filepath = filepath.with_suffix(".unmerged.json")
            print(
                f"Deployment is already published for chain_id {chain_id}.\n"
                f"Writing to {filepath} to avoid overwriting existing data."
            )
        else:
            print(f"Updating existing deployment artifact at {filepath}.")
            existing_data.update(data)
            data = existing_data
    else:
        print(f"Creating new deployment artifact at {filepath}.")

    with open(filepath, "w") as file:
        json.dump(data, file, **STANDARD_REGISTRY_JSON_FORMAT)

    print(f"(i) Deployment artifact written to {filepath}!")
    return filepath
