import pytest
import boa
from eth_account import Account

from script.deployments import BoaDeployments, DeployContext
from tests.fakes import RecordingDeployments


def pytest_configure(config):
    """Load moccasin's config and network as `mox test` does, so plain pytest works too"""
    from moccasin import config as mox_config
    from moccasin._sys_path_and_config_setup import _setup_network_and_account_from_config_and_cli

    if mox_config._config is None:
        mox_config.initialize_global_config()
        _setup_network_and_account_from_config_and_cli()


@pytest.fixture
def deployer():
    """A fresh deployer address"""
    return Account.create().address


@pytest.fixture
def recording_deployments():
    return RecordingDeployments()


@pytest.fixture
def context(deployer, recording_deployments):
    return DeployContext(
        get_named_accounts=lambda: {"deployer": deployer},
        deployments=recording_deployments,
    )


@pytest.fixture
def failing_context(deployer):
    """Context whose deploy call always rejects"""
    return DeployContext(
        get_named_accounts=lambda: {"deployer": deployer},
        deployments=RecordingDeployments(error=ConnectionError("network unreachable")),
    )


@pytest.fixture
def boa_env():
    """Roll the pyevm state back after each test"""
    with boa.env.anchor():
        yield boa.env


@pytest.fixture
def boa_deployments(boa_env):
    return BoaDeployments()


@pytest.fixture
def funded_deployer(boa_env):
    acct = boa_env.generate_address()
    boa_env.set_balance(acct, 10**18)  # 1 ETH initial funding
    return acct
