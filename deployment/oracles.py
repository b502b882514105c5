import typing
from types import MappingProxyType

from eth_utils import is_hex_address

from deployment.constants import BTC_USD_PRICE_FEEDS, DEFAULT_PRICE_FEED_NETWORK

NetworkName = str


class OracleRegistry:
    """
    Read-only mapping of network names to price feed addresses.

    Lookups never fail: any network without an entry resolves to the
    price feed registered for the default network.
    """

    class Invalid(ValueError):
        """Raised when the registry entries are invalid"""

    def __init__(
        self,
        price_feeds: typing.Mapping[NetworkName, str],
        default_network: NetworkName = DEFAULT_PRICE_FEED_NETWORK,
    ):
        if default_network not in price_feeds:
            raise self.Invalid(
                f"Default network '{default_network}' has no registered price feed."
            )
        for network, address in price_feeds.items():
            if not is_hex_address(address):
                raise self.Invalid(
                    f"Price feed address '{address}' for network '{network}' "
                    "is not a valid address."
                )

        self._price_feeds = MappingProxyType(dict(price_feeds))
        self.default_network = default_network

    @property
    def price_feeds(self) -> typing.Mapping[NetworkName, str]:
        return self._price_feeds

    @property
    def networks(self) -> typing.List[NetworkName]:
        return sorted(self._price_feeds)

    def __contains__(self, network: NetworkName) -> bool:
        return network in self._price_feeds

    def resolve(self, network: NetworkName) -> str:
        """Returns the price feed for the network, falling back to the default network's."""
        address = self._price_feeds.get(network)
        if address is None:
            address = self._price_feeds[self.default_network]
        return address


BTC_USD_ORACLES = OracleRegistry(price_feeds=BTC_USD_PRICE_FEEDS)
