import logging
import os

from script.deploy_mock import deploy_mocks
from script.deployments import context_from_active_network
from script.runner import parse_tags, run_deploy_scripts

# Run order matters: mocks must exist before anything that consumes them
DEPLOY_SCRIPTS = [deploy_mocks]


def deploy(selected_tags=None) -> list:
    context, network_name = context_from_active_network()
    ran = run_deploy_scripts(DEPLOY_SCRIPTS, context, network_name, selected_tags)
    print(f"Ran {len(ran)} deploy script(s) on {network_name}: {', '.join(ran) or 'none'}")
    return ran


def moccasin_main() -> list:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    return deploy(parse_tags(os.environ.get("DEPLOY_TAGS")))
