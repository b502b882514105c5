from typing import Any, List

from ape.utils import ZERO_ADDRESS


def _abort() -> None:
    print("Aborting deployment!")
    exit(-1)


def _continue() -> None:
    """Asks the user to continue."""
    answer = input("Continue Y/N? ")
    if answer.lower().strip() == "n":
        _abort()


def _confirm_deployment(contract_name: str) -> None:
    """Asks the user to confirm the upgradeable deployment of a single contract."""
    answer = input(f"Deploy {contract_name} behind a proxy Y/N? ")
    if answer.lower().strip() == "n":
        _abort()


def _confirm_zero_address() -> None:
    answer = input("Zero Address detected for initializer argument; Continue? Y/N? ")
    if answer.lower().strip() == "n":
        _abort()


def _confirm_initializer(contract_name: str, initializer: str, args: List[Any]) -> None:
    """Asks the user to confirm the initializer call made at proxy construction."""
    if not args:
        print(f"\n(i) No initializer arguments for {contract_name}.{initializer}")
        _confirm_deployment(contract_name)
        return

    print(f"\nInitializer arguments for {contract_name}.{initializer}")
    for position, value in enumerate(args):
        print(f"\t[{position}]={value}")
    _confirm_deployment(contract_name)
    if ZERO_ADDRESS in args:
        _confirm_zero_address()
