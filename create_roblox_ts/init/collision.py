"""Pre-flight check that provisioning will not overwrite existing files."""

import os
from pathlib import Path

from ..cli.errors import CollisionError, NotADirectoryTargetError
from ..scaffold_logging import get_logger
from .filesystem import FileSink
from .templates import TemplateRepository
from .types import PathInventory, ResolvedConfiguration

logger = get_logger()

# Written by provisioning regardless of which tools are enabled
GENERATED_PATHS: tuple[tuple[str, ...], ...] = (
    ("package.json",),
    ("package-lock.json",),
    ("tsconfig.json",),
    (".gitignore",),
    (".eslintrc",),
    (".prettierrc",),
    (".vscode", "settings.json"),
    (".vscode", "extensions.json"),
)


class CollisionGuard:
    """Enumerates the paths a run writes to and refuses to clobber any of them.

    A path collides when it is a file, a symlink or a non-empty directory.
    An empty directory does not collide. Even a non-empty directory none of
    whose entries would be overwritten counts as a collision.
    """

    def __init__(
        self,
        file_sink: FileSink,
        templates: TemplateRepository,
        cwd: Path | None = None,
    ):
        self.file_sink = file_sink
        self.templates = templates
        self.cwd = Path(cwd) if cwd else Path.cwd()

    def inventory(self, configuration: ResolvedConfiguration) -> PathInventory:
        """All generated-config paths plus the template's top-level entries."""
        target = configuration.directory
        paths = [target.joinpath(*parts) for parts in GENERATED_PATHS]
        paths.extend(
            target / name for name in self.templates.list_entries(configuration.template)
        )
        return PathInventory.from_paths(paths)

    def prepare_target(self, configuration: ResolvedConfiguration) -> None:
        """Create the target directory if missing; reject non-directories."""
        target = configuration.directory
        if not self.file_sink.path_exists(target):
            logger.debug(f"Creating project directory {target}")
            self.file_sink.ensure_directory(target)
        if not self.file_sink.is_directory(target):
            raise NotADirectoryTargetError(str(target))

    def _collides(self, path: Path) -> bool:
        if not self.file_sink.path_exists(path):
            return False
        if self.file_sink.is_symlink(path):
            return True
        if self.file_sink.is_directory(path):
            return len(self.file_sink.list_directory(path)) > 0
        return True

    def find_collisions(self, inventory: PathInventory) -> list[str]:
        """Every colliding path, relative to the working directory.

        Read-only; checks the whole inventory before returning.
        """
        return [
            os.path.relpath(path, self.cwd) for path in inventory if self._collides(path)
        ]

    def check(
        self, configuration: ResolvedConfiguration, dry_run: bool = False
    ) -> PathInventory:
        """Prepare the target and raise CollisionError if anything would be overwritten.

        With `dry_run` a missing target is reported instead of created, and
        nothing at all is written.
        """
        target = configuration.directory
        # Listed before prepare_target: nothing is created if the template is missing
        inventory = self.inventory(configuration)
        if dry_run and not self.file_sink.path_exists(target):
            logger.info(f"{target} does not exist yet and would be created")
            return inventory
        if dry_run:
            if not self.file_sink.is_directory(target):
                raise NotADirectoryTargetError(str(target))
        else:
            self.prepare_target(configuration)

        collisions = self.find_collisions(inventory)
        if collisions:
            raise CollisionError(collisions)
        logger.debug(f"Collision check passed for {len(inventory)} paths")
        return inventory
