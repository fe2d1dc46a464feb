"""Renderer framework and format registry."""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .diagram import DiagramGraph

logger = logging.getLogger(__name__)


class GraphRenderer(ABC):
    """Abstract base class for graph renderers."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Name of the output format."""
        pass

    @abstractmethod
    def render(self, diagram: "DiagramGraph", hop_limit: int | None = 0) -> str:
        """Render a diagram to string format."""
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """Get file extension for this format."""
        pass


_RENDERERS: dict[str, GraphRenderer] = {}


def register_renderer(renderer: GraphRenderer) -> None:
    """Add a graph renderer to the registry."""
    _RENDERERS[renderer.format_name] = renderer


def available_formats() -> list[str]:
    return sorted(_RENDERERS)


def get_renderer(format_name: str) -> GraphRenderer:
    """Look up a renderer by format name.

    Raises:
        ValueError: If no renderer is registered for ``format_name``
    """
    if format_name not in _RENDERERS:
        raise ValueError(f"Unknown format '{format_name}'. Available: {available_formats()}")
    renderer = _RENDERERS[format_name]
    logger.debug(f"Using {renderer.format_name} renderer")
    return renderer
