from typing import Dict, List, Tuple
from pathlib import Path
import json
import subprocess

import pytest


class FakeTools:
    """Stands in for ``subprocess.run`` and answers by invocation string."""

    def __init__(self) -> None:
        self.calls: List[Tuple[List[str], Path, Dict[str, str]]] = []
        self.results: Dict[str, Tuple[int, str]] = {}
        self.missing: set[str] = set()

    def respond(self, invocation: str, status: int = 0, output: str = '') -> None:
        self.results[invocation] = (status, output)

    @property
    def invocations(self) -> List[str]:
        return [' '.join(args) for args, _, _ in self.calls]

    def __call__(self, args, cwd=None, env=None, **kwargs):
        if args[0] in self.missing:
            raise FileNotFoundError(args[0])
        self.calls.append((list(args), Path(cwd), dict(env or {})))
        status, output = self.results.get(' '.join(args), (0, ''))
        return subprocess.CompletedProcess(args, status, stdout=output)


@pytest.fixture
def tools(monkeypatch):
    fake = FakeTools()
    monkeypatch.setattr('gear_assets.commands.subprocess.run', fake)
    return fake


def make_package_json(root: Path, scripts: Dict[str, object] | None = None) -> Path:
    data = {"name": "gear", "version": "0.0.1"}
    if scripts is not None:
        data["scripts"] = scripts
    path = root / 'package.json'
    path.write_text(json.dumps(data), encoding='utf-8')
    return path


@pytest.fixture
def gear(tmp_path):
    """A gear directory whose package.json defines the preparation script."""
    make_package_json(tmp_path, {"antikythera_prepare_assets": "webpack"})
    return tmp_path


@pytest.fixture
def write_package_json():
    """Writes ``package.json`` into a directory, optionally with ``scripts``."""
    return make_package_json
