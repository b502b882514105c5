from pathlib import Path

import deployment

#
# Filesystem
#

DEPLOYMENT_DIR = Path(deployment.__file__).parent
DEPLOYMENT_PARAMS_DIR = DEPLOYMENT_DIR / "deployment_params"
ARTIFACTS_DIR = DEPLOYMENT_DIR / "artifacts"

#
# Networks
#

LINEA_MAINNET = "linea_mainnet"
LINEA_TESTNET = "linea_testnet"

LOCAL_NETWORKS = ["local"]

#
# Price feeds
#

BTC_USD_PRICE_FEEDS = {
    # network -> BTC/USD aggregator
    LINEA_MAINNET: "0x7A99092816C8BD5ec8ba229e3a6E6Da1E628E1F9",
    LINEA_TESTNET: "0x1b44F3514812d835EB1BDB0acB33d3fA3351Ee43",
}

# unknown networks deploy against this network's feed
DEFAULT_PRICE_FEED_NETWORK = LINEA_TESTNET

#
# Contracts
#

GUESS_TOKEN = "GuessToken"
DEFAULT_INITIALIZER = "initialize"

OZ_DEPENDENCY_NAME = "openzeppelin"
OZ_DEPENDENCY_VERSION = "5.0.0"
PROXY_NAME = "TransparentUpgradeableProxy"

# EIP1967 slots - https://eips.ethereum.org/EIPS/eip-1967
EIP1967_IMPLEMENTATION_SLOT = 0x360894A13BA1A3210667C828492DB98DCA3E2076CC3735A920A3CA505D382BBC
EIP1967_ADMIN_SLOT = 0xB53127684A568B3173AE13B9F8A6016E243E63B6E8EE1178D6A717850B5D6103
