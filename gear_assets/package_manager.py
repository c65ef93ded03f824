from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional
import logging
import os

from git import Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from gear_assets.commands import run_command, run_command_checked
from gear_assets.config import (
    DEPENDENCY_FILES,
    NODE_MODULES,
    NPM_LOCK_FILES,
    YARN_LOCK,
)
from gear_assets.errors import MissingLockFileError, VulnerabilityError
from gear_assets.messages import info
import gear_assets.io

# `yarn audit` exits with a mask of the severities found, CRITICAL being 16
# https://classic.yarnpkg.com/lang/en/docs/cli/audit/
YARN_AUDIT_CRITICAL = 16


class PackageManager(Enum):
    YARN = 'yarn'
    NPM = 'npm'

    @classmethod
    def detect(cls, root: Path) -> 'PackageManager':
        if (root / YARN_LOCK).exists():
            return cls.YARN
        return cls.NPM


################################################################################
# Installation
################################################################################

def install_packages(root: Path, compile_env: str, previous_commit: Optional[str] = None) -> None:
    match PackageManager.detect(root):
        case PackageManager.YARN:
            run_command_checked('yarn', [], compile_env, root)
        case PackageManager.NPM:
            remove_node_modules_if_dependencies_changed(root, previous_commit)
            run_command_checked('npm', ['install'], compile_env, root)


def dependencies_changed_since(root: Path, commit: str) -> bool:
    """
    Whether any npm dependency manifest in ``root`` differs from ``commit``.

    Mirrors ``git diff --quiet <commit> -- <files>``: only exit status 1
    means "changed"; any other failure is treated as unchanged.
    """
    try:
        repo = Repo(root, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        logging.warning(f"{root} is not inside a git repository, keeping {NODE_MODULES}/")
        return False

    # git resolves pathspecs against the top of the working tree
    paths = [
        Path(os.path.relpath(root.resolve() / name, Path(repo.working_tree_dir).resolve())).as_posix()
        for name in DEPENDENCY_FILES
    ]

    try:
        repo.git.diff('--quiet', commit, '--', *paths)
    except GitCommandError as e:
        if e.status == 1:
            return True
        logging.warning(f"Could not compare dependencies with {commit}: {e}")
        return False

    return False


def remove_node_modules_if_dependencies_changed(root: Path, previous_commit: Optional[str]) -> None:
    if previous_commit is None:
        return

    if dependencies_changed_since(root, previous_commit):
        info("Removing node_modules/ in order to avoid potential issues in npm's dependency resolution.")
        gear_assets.io.delete_if_exists(root / NODE_MODULES)


################################################################################
# Auditing
################################################################################

def audit_vulnerability(root: Path, compile_env: str) -> None:
    match PackageManager.detect(root):
        case PackageManager.YARN:
            audit_vulnerability_with_yarn(root, compile_env)
        case PackageManager.NPM:
            audit_vulnerability_with_npm(root, compile_env)


def audit_vulnerability_with_yarn(root: Path, compile_env: str) -> None:
    result = run_command('yarn', ['audit', '--level', 'critical'], compile_env, root)
    if result.status >= YARN_AUDIT_CRITICAL:
        raise VulnerabilityError(result.status)


def audit_vulnerability_with_npm(root: Path, compile_env: str) -> None:
    result = run_command('npm', ['audit', '--audit-level', 'critical'], compile_env, root)
    if result.status == 0:
        return

    if any((root / name).exists() for name in NPM_LOCK_FILES):
        raise VulnerabilityError(result.status)

    # npm audit also fails when there is nothing to audit against
    raise MissingLockFileError()
