"""Filesystem access used by the collision check and provisioning steps."""

import os
import shutil
from pathlib import Path
from typing import Protocol


class FileSink(Protocol):
    """Every filesystem operation provisioning performs goes through here."""

    def write_file(self, path: Path, content: str) -> None: ...

    def read_file(self, path: Path) -> str: ...

    def ensure_directory(self, path: Path) -> None: ...

    def path_exists(self, path: Path) -> bool: ...

    def is_directory(self, path: Path) -> bool: ...

    def is_symlink(self, path: Path) -> bool: ...

    def list_directory(self, path: Path) -> list[str]: ...

    def copy_tree(self, source: Path, destination: Path) -> None: ...


class LocalFileSink:
    """FileSink backed by the real filesystem."""

    def write_file(self, path: Path, content: str) -> None:
        """Write text, creating parent directories as needed."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)

    def read_file(self, path: Path) -> str:
        with open(path, encoding="utf-8") as f:
            return f.read()

    def ensure_directory(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def path_exists(self, path: Path) -> bool:
        # lexists so dangling symlinks still count as present
        return os.path.lexists(path)

    def is_directory(self, path: Path) -> bool:
        return Path(path).is_dir()

    def is_symlink(self, path: Path) -> bool:
        return Path(path).is_symlink()

    def list_directory(self, path: Path) -> list[str]:
        return sorted(os.listdir(path))

    def copy_tree(self, source: Path, destination: Path) -> None:
        """Copy the contents of `source` into `destination`, merging directories."""
        shutil.copytree(source, destination, dirs_exist_ok=True)
