"""
Root of the model graph.
"""

import logging
from typing import Optional, Tuple

from dmmf_graph.config import GeneratorConfig
from dmmf_graph.domain.descriptors import DatamodelDescriptor, EnumDescriptor
from dmmf_graph.domain.directives import DirectiveParserProtocol, default_directive_parser
from dmmf_graph.domain.models import ExtendedModel
from dmmf_graph.domain.naming import FormattedNames, format_names


logger = logging.getLogger(__name__)


class ExtendedEnum:
    """An enum of the datamodel with its value names."""

    def __init__(self, enum: EnumDescriptor):
        self.name: str = enum.name
        self.db_name: Optional[str] = enum.db_name
        self.documentation: Optional[str] = enum.documentation
        self.values: Tuple[str, ...] = tuple(value.name for value in enum.values)
        self.formatted_names: FormattedNames = format_names(enum.name)

    def __repr__(self) -> str:
        return f"ExtendedEnum({self.name!r})"


class ExtendedDatamodel:
    """Models and enums of the datamodel, in declaration order."""

    def __init__(
        self,
        datamodel: DatamodelDescriptor,
        config: GeneratorConfig,
        directive_parser: DirectiveParserProtocol = default_directive_parser,
    ):
        self.models: Tuple[ExtendedModel, ...] = tuple(
            ExtendedModel(model, config, directive_parser) for model in datamodel.models
        )
        self.enums: Tuple[ExtendedEnum, ...] = tuple(
            ExtendedEnum(enum) for enum in datamodel.enums
        )
        logger.debug(f"Datamodel built: {len(self.models)} models, {len(self.enums)} enums")

    def get_model(self, name: str) -> Optional[ExtendedModel]:
        """Get a model by exact name."""
        for model in self.models:
            if model.name == name:
                return model
        return None

    def get_enum(self, name: str) -> Optional[ExtendedEnum]:
        """Get an enum by exact name."""
        for enum in self.enums:
            if enum.name == name:
                return enum
        return None
