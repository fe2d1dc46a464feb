"""XMI renderer placeholder."""

import logging
from typing import TYPE_CHECKING

from rich.console import Console

from .framework import GraphRenderer

if TYPE_CHECKING:
    from .diagram import DiagramGraph

logger = logging.getLogger(__name__)
err_console = Console(stderr=True, highlight=False)


class XmiRenderer(GraphRenderer):
    """XMI export. Not implemented: always returns an empty document."""

    @property
    def format_name(self) -> str:
        return "xmi"

    def get_file_extension(self) -> str:
        return ".xmi"

    def render(self, diagram: "DiagramGraph", hop_limit: int | None = 0) -> str:
        err_console.print("Sorry. XMI output not yet implemented.\n", markup=False)
        logger.debug(f"Skipped XMI export of {len(diagram.nodes)} nodes")
        return ""
