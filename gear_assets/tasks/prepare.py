from gear_assets.assets import dump_asset_file_paths
from gear_assets.commands import run_command_checked
from gear_assets.config import PREPARE_SCRIPT, PrepareAssetsConfig
from gear_assets.messages import info
from gear_assets.package_json import npm_script_available
from gear_assets.package_manager import audit_vulnerability, install_packages


def prepare_assets(config: PrepareAssetsConfig) -> bool:
    """
    Install, audit and build the front-end assets of a gear, then list them.

    Returns False when the gear has no asset preparation configured, in which
    case nothing is run. Any failing step raises and aborts the rest.
    """
    root = config.root

    if not npm_script_available(root):
        info("Skipping. Asset preparation is not configured.")
        info(f"Define `{PREPARE_SCRIPT}` npm-script if you want antikythera to prepare assets for your gear.")
        return False

    install_packages(root, config.compile_env, config.previous_commit)
    audit_vulnerability(root, config.compile_env)
    build_assets(config)
    dump_asset_file_paths(root)
    return True


def build_assets(config: PrepareAssetsConfig) -> None:
    run_command_checked('npm', ['run', PREPARE_SCRIPT], config.compile_env, config.root)
