"""Canonical command text per package manager."""

from dataclasses import dataclass

from .types import PackageManager


@dataclass(frozen=True)
class PackageManagerCommands:
    init: str
    dev_install: str
    build: str


PACKAGE_MANAGER_COMMANDS: dict[PackageManager, PackageManagerCommands] = {
    PackageManager.NPM: PackageManagerCommands(
        init="npm init -y",
        dev_install="npm install --silent -D",
        build="npm run build",
    ),
    PackageManager.YARN: PackageManagerCommands(
        init="yarn init -y",
        dev_install="yarn add --silent -D",
        build="yarn run build",
    ),
    PackageManager.PNPM: PackageManagerCommands(
        init="pnpm init",
        dev_install="pnpm install --silent -D",
        build="pnpm run build",
    ),
}


def commands_for(manager: PackageManager) -> PackageManagerCommands:
    """Look up command text; an unknown selector raises KeyError."""
    return PACKAGE_MANAGER_COMMANDS[manager]
