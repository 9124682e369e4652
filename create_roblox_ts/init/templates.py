"""Bundled template trees, one directory per template kind."""

from pathlib import Path

from ..cli.errors import ConfigurationError
from ..constants import TEMPLATES_DIR
from ..scaffold_logging import get_logger
from .filesystem import FileSink
from .types import TemplateKind

logger = get_logger()


class TemplateRepository:
    """Lists and copies template trees without reading their contents."""

    def __init__(self, file_sink: FileSink, templates_dir: Path = TEMPLATES_DIR):
        self.file_sink = file_sink
        self.templates_dir = Path(templates_dir)

    def template_dir(self, kind: TemplateKind) -> Path:
        """Directory of the template tree.

        Raises:
            ConfigurationError: No template tree exists for `kind`.
        """
        path = self.templates_dir / kind.value
        if not self.file_sink.is_directory(path):
            raise ConfigurationError(
                f"Template not found: {kind.value} (tried {path})",
                suggestion="Check CREATE_RBXTS_TEMPLATES_DIR points at the templates root",
            )
        return path

    def list_entries(self, kind: TemplateKind) -> list[str]:
        """Top-level entry names of the template tree."""
        return self.file_sink.list_directory(self.template_dir(kind))

    def copy_to(self, kind: TemplateKind, destination: Path) -> None:
        source = self.template_dir(kind)
        logger.debug(f"Copying template {source} -> {destination}")
        self.file_sink.copy_tree(source, destination)
