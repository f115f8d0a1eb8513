import logging
from contextlib import nullcontext
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Mapping, Protocol

import boa
from moccasin.config import get_active_network

logger = logging.getLogger(__name__)

CONTRACTS_DIR = Path(__file__).resolve().parent.parent / "src" / "mocks"


class ContractNotFoundError(LookupError):
    def __init__(self, name: str, path: Path):
        super().__init__(f'No contract source for "{name}" at {path}')
        self.name = name
        self.path = path


class NoDefaultAccountError(LookupError):
    def __init__(self, network_name: str):
        super().__init__(f'Network "{network_name}" has no default account to deploy from')
        self.network_name = network_name


@dataclass(frozen=True)
class DeployOptions:
    from_account: Any = None
    log: bool = False
    args: tuple = ()


@dataclass(frozen=True)
class DeploymentRecord:
    name: str
    address: str
    args: tuple
    deployer: Any = None
    contract: Any = field(default=None, compare=False, repr=False)


class Deployments(Protocol):
    def deploy(self, name: str, options: DeployOptions) -> Any: ...

    def log(self, message: str) -> None: ...


@dataclass
class DeployContext:
    get_named_accounts: Callable[[], Mapping[str, Any]]
    deployments: Deployments


def _coerce_arg(value):
    # Decimal strings are accepted for uint arguments, like ethers does
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    return value


class BoaDeployments:
    """Deploys Vyper sources from ``contracts_dir`` into the active boa env.

    Deployments are recorded by name; deploying a name again with the same
    constructor args from the same account returns the existing record
    instead of redeploying.
    """

    def __init__(self, contracts_dir: Path = CONTRACTS_DIR):
        self.contracts_dir = Path(contracts_dir)
        self.records: dict[str, DeploymentRecord] = {}

    def log(self, message: str) -> None:
        logger.info(message)

    def deploy(self, name: str, options: DeployOptions) -> DeploymentRecord:
        path = self.contracts_dir / f"{name}.vy"
        if not path.exists():
            raise ContractNotFoundError(name, path)

        args = tuple(options.args)
        previous = self.records.get(name)
        if previous is not None and previous.args == args and previous.deployer == options.from_account:
            if options.log:
                self.log(f'reusing "{name}" at {previous.address}')
            return previous

        deployer = boa.load_partial(str(path))
        sender = boa.env.prank(options.from_account) if options.from_account else nullcontext()
        with sender:
            contract = deployer.deploy(*(_coerce_arg(arg) for arg in args))

        record = DeploymentRecord(
            name=name,
            address=str(contract.address),
            args=args,
            deployer=options.from_account,
            contract=contract,
        )
        self.records[name] = record
        if options.log:
            self.log(f'deployed "{name}" at {record.address}')
        return record


def context_from_active_network(deployments: Deployments | None = None) -> tuple[DeployContext, str]:
    """Build a DeployContext for moccasin's active network.

    Returns ``(context, network_name)``. Raises NoDefaultAccountError when
    the network has no default account configured.
    """
    network = get_active_network()
    account = network.get_default_account()
    if account is None:
        raise NoDefaultAccountError(network.name)

    def get_named_accounts():
        return {"deployer": account.address}

    context = DeployContext(
        get_named_accounts=get_named_accounts,
        deployments=deployments or BoaDeployments(),
    )
    return context, network.name
