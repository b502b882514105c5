from pathlib import Path

import pytest
import yaml

from deployment.constants import ARTIFACTS_DIR
from deployment.options import GUESS_TOKEN_PARAMS_FILEPATH
from deployment.params import GUESS_TOKEN_DESCRIPTOR, DeploymentDescriptor, DeploymentParameters


@pytest.fixture
def write_params(tmp_path):
    def write(config):
        filepath = tmp_path / "params.yml"
        with open(filepath, "w") as file:
            yaml.safe_dump(config, file)
        return filepath

    return write


def test_packaged_guess_token_params():
    params = DeploymentParameters.from_yaml(GUESS_TOKEN_PARAMS_FILEPATH)
    assert params.name == "guess-token"
    assert params.path == GUESS_TOKEN_PARAMS_FILEPATH
    assert params.descriptor == GUESS_TOKEN_DESCRIPTOR
    assert params.descriptor == DeploymentDescriptor("GuessToken", "initialize")
    assert params.artifact_filepath == Path("./deployment/artifacts/guess-token.json")


def test_initializer_defaults_to_initialize(write_params):
    filepath = write_params({"deployment": {"name": "test"}, "contract": {"name": "GuessToken"}})
    params = DeploymentParameters.from_yaml(filepath)
    assert params.descriptor.initializer == "initialize"


def test_artifact_is_optional(write_params):
    filepath = write_params({"deployment": {"name": "test"}, "contract": {"name": "GuessToken"}})
    assert DeploymentParameters.from_yaml(filepath).artifact_filepath is None


def test_artifact_default_dir(write_params):
    filepath = write_params(
        {
            "deployment": {"name": "test"},
            "contract": {"name": "GuessToken"},
            "artifacts": {"filename": "test.json"},
        }
    )
    params = DeploymentParameters.from_yaml(filepath)
    assert params.artifact_filepath == ARTIFACTS_DIR / "test.json"


@pytest.mark.parametrize(
    "config, message",
    [
        (None, "Malformed"),
        (["GuessToken"], "Malformed"),
        ({"contract": {"name": "GuessToken"}}, "deployment name"),
        ({"deployment": {}, "contract": {"name": "GuessToken"}}, "deployment name"),
        ({"deployment": {"name": "test"}}, "contract name"),
        ({"deployment": {"name": "test"}, "contract": {"initializer": "init"}}, "contract name"),
        (
            {"deployment": {"name": "test"}, "contract": {"name": "GuessToken", "initializer": ""}},
            "Malformed initializer",
        ),
        (
            {"deployment": {"name": "test"}, "contract": {"name": "GuessToken", "initializer": 1}},
            "Malformed initializer",
        ),
    ],
)
def test_invalid_params(write_params, config, message):
    filepath = write_params(config)
    with pytest.raises(DeploymentParameters.Invalid, match=message):
        DeploymentParameters.from_yaml(filepath)
