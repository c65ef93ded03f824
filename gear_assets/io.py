from typing import Callable, Generator

import os
import shutil
from pathlib import Path

from gear_assets.messages import info

##################################################################################################
# File Reading/Deleting
##################################################################################################

def read_text_file(path: Path) -> str:
    assert isinstance(path, Path), f"Expected Path, got {type(path)}"
    assert path.exists(), f"File {path} does not exist"
    with open(path, 'rt', encoding='utf-8') as f:
        return f.read()


def delete_if_exists(path: Path) -> None:
    if path.exists():
        info(f"Deleting {path}")
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()


def walk_files(path: Path, predicate: Callable[[Path], bool] | None = None) -> Generator[Path, None, None]:
    assert isinstance(path, Path), f"Expected Path, got {type(path)}"
    if predicate is not None and not predicate(path):
        return

    if os.path.isfile(path):
        yield path

    elif os.path.isdir(path):
        for subfile in sorted(os.listdir(path)):
            child = path / subfile
            # Symlinked directories can loop back into the tree
            if child.is_symlink() and child.is_dir():
                continue
            yield from walk_files(child, predicate=predicate)

    # Broken symlinks, sockets and the like are not assets


def is_hidden(path: Path) -> bool:
    return path.name.startswith('.')
