from pathlib import Path
from typing import List

from gear_assets.config import STATIC_DIR
from gear_assets.messages import bullets, success
import gear_assets.io


def list_asset_file_paths(root: Path) -> List[str]:
    """
    List the asset files of a gear relative to its static directory.

    Dot-files and anything inside dot-directories are not assets.
    """
    static_dir = root / STATIC_DIR
    if not static_dir.is_dir():
        return []

    paths = [
        path.relative_to(static_dir).as_posix()
        for path in gear_assets.io.walk_files(
            static_dir,
            predicate=lambda p: p == static_dir or not gear_assets.io.is_hidden(p))
    ]
    return sorted(paths)


def dump_asset_file_paths(root: Path) -> None:
    success(f"Done. Current assets under {STATIC_DIR.as_posix()}/ directory:")
    bullets(list_asset_file_paths(root), empty="(No asset files exist)")
