# Networks where mocks get deployed instead of using live Chainlink contracts
DEVELOPMENT_CHAINS = ("hardhat", "localhost", "pyevm", "anvil")

MOCK_CONTRACT_NAME = "VRFCoordinatorV2Mock"

BASE_FEE = "250000000000000000"  # 0.25 LINK per request
GAS_PRICE_LINK = 10**9  # LINK per gas
DEPLOY_ARGS = (BASE_FEE, GAS_PRICE_LINK)

LOG_SEPARATOR = "-" * 58
