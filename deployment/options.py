from pathlib import Path

import click

from deployment.constants import DEPLOYMENT_PARAMS_DIR

GUESS_TOKEN_PARAMS_FILEPATH = DEPLOYMENT_PARAMS_DIR / "guess-token.yml"

params_option = click.option(
    "--params",
    "-p",
    "params_filepath",
    help="Deployment parameters YAML file.",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=GUESS_TOKEN_PARAMS_FILEPATH,
    show_default=True,
)

verify_option = click.option(
    "--verify/--no-verify",
    help="Publish contract sources to the block explorer.",
    default=False,
)

autosign_option = click.option(
    "--autosign",
    help="Sign transactions without prompting for confirmation.",
    is_flag=True,
    default=False,
)
