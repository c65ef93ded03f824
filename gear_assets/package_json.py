from pathlib import Path
import json
import logging

from gear_assets.config import PACKAGE_JSON, PREPARE_SCRIPT
import gear_assets.io


def npm_script_available(root: Path, script: str = PREPARE_SCRIPT) -> bool:
    """
    Whether ``package.json`` in ``root`` defines ``script`` as an npm-script.

    Anything short of a well-formed ``scripts`` entry with a string command
    counts as "not configured".
    """
    path = root / PACKAGE_JSON
    if not path.is_file():
        return False

    try:
        data = json.loads(gear_assets.io.read_text_file(path))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logging.debug(f"Cannot read {path}: {e}")
        return False

    if not isinstance(data, dict):
        return False

    scripts = data.get('scripts')
    if not isinstance(scripts, dict):
        return False

    return isinstance(scripts.get(script), str)
