#!/usr/bin/python3
from typing import Optional

import click
from ape import accounts
from ape.api import AccountAPI, NetworkAPI
from ape.cli import ConnectedProviderCommand
from ape.cli.choices import select_account

from deployment.confirm import _continue
from deployment.guess_token import deploy_guess_token
from deployment.networks import get_network_name, is_local_network
from deployment.options import autosign_option, params_option, verify_option
from deployment.oracles import BTC_USD_ORACLES
from deployment.params import DeploymentParameters
from deployment.proxy import ApeProxyFacility
from deployment.registry import check_not_published, create_record, write_record
from deployment.utils import check_plugins


def get_deployer(account_alias: Optional[str], autosign: bool) -> AccountAPI:
    if is_local_network():
        account = accounts.test_accounts[0]
    elif account_alias:
        account = accounts.load(account_alias)
    else:
        account = select_account()
    if autosign:
        click.secho("WARNING: Autosign is enabled. Transactions will be signed automatically.")
    account.set_autosign(autosign)
    return account


def _print_deployment_info(
    deployer: AccountAPI, params: DeploymentParameters, network: NetworkAPI, verify: bool
) -> None:
    network_name = get_network_name(network)
    click.secho(
        "\n".join(
            [
                f"Account: {deployer.address}",
                f"Config: {params.path}",
                f"Artifact: {params.artifact_filepath}",
                f"Verify: {verify}",
                f"Network: {network_name}",
                f"Chain ID: {network.chain_id}",
                f"Price Feed: {BTC_USD_ORACLES.resolve(network_name)}",
            ]
        ),
        fg="yellow",
    )


@click.command(cls=ConnectedProviderCommand)
@click.option(
    "--account",
    "-a",
    "account_alias",
    help="Alias of the ape account deploying the contracts.",
    default=None,
)
@params_option
@verify_option
@autosign_option
def cli(network, account_alias, params_filepath, verify, autosign):
    """
    Deploys GuessToken behind a TransparentUpgradeableProxy,
    initialized with the BTC/USD price feed of the connected network.

    ape run deploy_guess_token --network linea:mainnet:infura --account <alias>
    """
    params = DeploymentParameters.from_yaml(filepath=params_filepath)
    check_plugins(verify=verify)

    artifact_filepath = params.artifact_filepath
    if artifact_filepath:
        check_not_published(filepath=artifact_filepath, chain_id=network.chain_id)

    deployer = get_deployer(account_alias=account_alias, autosign=autosign)
    _print_deployment_info(deployer=deployer, params=params, network=network, verify=verify)
    if not autosign:
        _continue()

    network_name = get_network_name(network)
    descriptor = params.descriptor
    guess_token = deploy_guess_token(
        facility=ApeProxyFacility(verify=verify, autosign=autosign),
        network=network_name,
        deployer=deployer,
        descriptor=descriptor,
    )

    if artifact_filepath:
        record = create_record(
            instance=guess_token,
            network=network_name,
            price_feed=BTC_USD_ORACLES.resolve(network_name),
            initializer=descriptor.initializer,
            deployer=deployer.address,
        )
        write_record(record=record, filepath=artifact_filepath)


if __name__ == "__main__":
    cli()
