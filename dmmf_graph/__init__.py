"""
Builds an enriched, cross-linked graph from a DMMF model description.
"""

from dmmf_graph.config import GeneratorConfig, load_config
from dmmf_graph.exceptions import (
    DMMFGraphError,
    ConfigurationError,
    SchemaInputError,
    DirectiveError,
    ActionResolutionError,
)
from dmmf_graph.graph import ExtendedDMMF, build_graph

__version__ = "0.1.0"

__all__ = [
    "GeneratorConfig",
    "load_config",
    "DMMFGraphError",
    "ConfigurationError",
    "SchemaInputError",
    "DirectiveError",
    "ActionResolutionError",
    "ExtendedDMMF",
    "build_graph",
]
