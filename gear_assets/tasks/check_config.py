from gear_assets.config import PREPARE_SCRIPT, PrepareAssetsConfig
from gear_assets.messages import info, success, warning
from gear_assets.package_json import npm_script_available
from gear_assets.package_manager import PackageManager


def check_config(config: PrepareAssetsConfig) -> bool:
    root = config.root

    if not config.package_json.exists():
        warning(f"No package.json in {root}, asset preparation will be skipped")
        return False

    if not npm_script_available(root):
        warning(f"package.json in {root} does not define the `{PREPARE_SCRIPT}` npm-script, asset preparation will be skipped")
        return False

    manager = PackageManager.detect(root)
    lock_files = config.lock_files

    info(f"Package manager: {manager.value}")
    info(f"Compile environment: {config.compile_env}")
    if lock_files:
        info(f"Lock files: {', '.join(lock_files)}")
    else:
        warning("No lock file found, `npm audit` will fail")

    success("Asset preparation is configured")
    return True
