from typing import Mapping, Optional, Tuple
from dataclasses import dataclass
from pathlib import Path
import os

################################################################################
# Constants
################################################################################

# npm-script that builds the assets of a gear
PREPARE_SCRIPT = 'antikythera_prepare_assets'

# Passed to every tool so scripts can tell which environment they build for
COMPILE_ENV_VAR = 'ANTIKYTHERA_COMPILE_ENV'
DEFAULT_COMPILE_ENV = 'undefined'

# Set by Jenkins to the last commit that was built successfully
PREVIOUS_COMMIT_VAR = 'GIT_PREVIOUS_SUCCESSFUL_COMMIT'

PACKAGE_JSON = 'package.json'
YARN_LOCK = 'yarn.lock'
NPM_LOCK_FILES: Tuple[str, ...] = ('package-lock.json', 'npm-shrinkwrap.json')
DEPENDENCY_FILES: Tuple[str, ...] = ('package.json', 'npm-shrinkwrap.json', 'package-lock.json')
NODE_MODULES = 'node_modules'

STATIC_DIR = Path('priv') / 'static'

################################################################################
# Config
################################################################################

@dataclass(frozen=True)
class PrepareAssetsConfig:
    root: Path
    compile_env: str = DEFAULT_COMPILE_ENV
    previous_commit: Optional[str] = None

    @property
    def package_json(self) -> Path:
        return self.root / PACKAGE_JSON

    @property
    def static_dir(self) -> Path:
        return self.root / STATIC_DIR

    @property
    def uses_yarn(self) -> bool:
        return (self.root / YARN_LOCK).exists()

    @property
    def lock_files(self) -> Tuple[str, ...]:
        names = (YARN_LOCK,) + NPM_LOCK_FILES
        return tuple(name for name in names if (self.root / name).exists())


def load_config(
        root: Path | str = '.',
        compile_env: Optional[str] = None,
        environ: Mapping[str, str] | None = None) -> PrepareAssetsConfig:
    if environ is None:
        environ = os.environ

    root = Path(root)
    if not root.is_dir():
        raise ValueError(f"Gear directory {root} does not exist or is not a directory")

    previous_commit = environ.get(PREVIOUS_COMMIT_VAR) or None

    return PrepareAssetsConfig(
        root=root,
        compile_env=compile_env or DEFAULT_COMPILE_ENV,
        previous_commit=previous_commit)
