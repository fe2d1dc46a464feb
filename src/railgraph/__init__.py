"""railgraph - Diagram graph model and Graphviz DOT renderer.

railgraph turns already-extracted facts about models, classes and their
relations into DOT diagrams, optionally pruned around an origin node.
"""

__version__ = "0.5.0"
__author__ = "railgraph contributors"
__description__ = "Diagram graph model and Graphviz DOT renderer"

from railgraph.config import RailgraphConfig

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "RailgraphConfig",
]
