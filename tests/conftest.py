from types import SimpleNamespace

import pytest
from eth_utils import to_checksum_address

from deployment.proxy import UpgradeableDeploymentFacility

GUESS_TOKEN = "GuessToken"
PROXY = "TransparentUpgradeableProxy"


def make_address(seed: int) -> str:
    return to_checksum_address(seed.to_bytes(20, "big"))


class FakeMethod:
    """Stands in for an ape contract method handler."""

    def __init__(self, name, input_types):
        inputs = [
            SimpleNamespace(name=f"_arg{position}", type=input_type)
            for position, input_type in enumerate(input_types)
        ]
        self.abis = [SimpleNamespace(name=name, inputs=inputs)]
        self.encoded = list()

    def encode_input(self, *args):
        self.encoded.append(args)
        return b"\x81\x29\xfc\x1c" + b"".join(str(arg).encode() for arg in args)


class FakeInstance:
    def __init__(self, name, address):
        self.contract_type = SimpleNamespace(name=name)
        self.address = address
        self.initialize = FakeMethod("initialize", ["address"])


class FakeContainer:
    def __init__(self, name):
        initialize = FakeMethod("initialize", ["address"])
        self.contract_type = SimpleNamespace(name=name, methods=initialize.abis)

    def at(self, address):
        return FakeInstance(self.contract_type.name, address)


class FakeAccount:
    """Records deployments instead of sending transactions."""

    def __init__(self, address):
        self.address = address
        self.deployments = list()
        self._nonce = 0

    def deploy(self, container, *args, **kwargs):
        self._nonce += 1
        instance = container.at(make_address(0x1000 + self._nonce))
        self.deployments.append((container.contract_type.name, args, kwargs, instance))
        return instance

    def set_autosign(self, enabled):
        self.autosign = enabled


class RecordingFacility(UpgradeableDeploymentFacility):
    def __init__(self, proxy_address):
        self.proxy_address = proxy_address
        self.calls = list()

    def deploy_upgradeable(self, container, args, deployer, initializer="initialize"):
        self.calls.append((container, args, deployer, initializer))
        return container.at(self.proxy_address)


class FailingFacility(UpgradeableDeploymentFacility):
    class Unauthorized(Exception):
        pass

    def __init__(self):
        self.calls = 0

    def deploy_upgradeable(self, container, args, deployer, initializer="initialize"):
        self.calls += 1
        raise self.Unauthorized("sender is not authorized to deploy")


@pytest.fixture
def deployer():
    return FakeAccount(make_address(0xDE9))


@pytest.fixture
def proxy_address():
    return make_address(0x9A0)


@pytest.fixture
def guess_token_container():
    return FakeContainer(GUESS_TOKEN)


@pytest.fixture
def artifacts(guess_token_container):
    containers = {GUESS_TOKEN: guess_token_container}
    return containers.__getitem__


@pytest.fixture
def facility(proxy_address):
    return RecordingFacility(proxy_address)


@pytest.fixture
def failing_facility():
    return FailingFacility()


@pytest.fixture
def proxy_container(monkeypatch):
    container = FakeContainer(PROXY)
    monkeypatch.setattr("deployment.proxy.get_proxy_container", lambda: container)
    return container
