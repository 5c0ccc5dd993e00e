"""
Graph nodes for the models of the datamodel.

An ExtendedModel owns its classified fields, exposes them partitioned by
kind, and computes the import statements its generated schema needs: first
the ones requested through an ``@zod.import([...])`` directive in the model
documentation, then the ones derived from its field types.
"""

import logging
from typing import List, Optional, Tuple

from dmmf_graph.config import GeneratorConfig
from dmmf_graph.constants import FieldKinds, ImportTemplates, model_error_location
from dmmf_graph.domain.descriptors import (
    ModelDescriptor,
    PrimaryKeyDescriptor,
    UniqueIndexDescriptor,
)
from dmmf_graph.domain.directives import DirectiveParserProtocol, default_directive_parser
from dmmf_graph.domain.fields import ExtendedField
from dmmf_graph.domain.imports import ImportSet
from dmmf_graph.domain.naming import FormattedNames, format_names


logger = logging.getLogger(__name__)


class ExtendedModel:
    """
    A model of the datamodel enriched with field partitions, flags and imports.

    Attributes:
        fields: Classified fields in declaration order
        scalar_fields, relation_fields, enum_fields: Partitions of ``fields`` by kind
        has_relation_fields: True if the model has at least one relation field
        has_omit_fields: True if any field is omit-eligible
        imports: Directive statements followed by automatic statements, deduplicated
        cleared_documentation: Documentation without the directive, None when no directive
    """

    def __init__(
        self,
        model: ModelDescriptor,
        config: GeneratorConfig,
        directive_parser: DirectiveParserProtocol = default_directive_parser,
    ):
        self.config = config
        self.name: str = model.name
        self.db_name: Optional[str] = model.db_name
        self.documentation: Optional[str] = model.documentation
        self.unique_fields: Tuple[Tuple[str, ...], ...] = model.unique_fields
        self.unique_indexes: Tuple[UniqueIndexDescriptor, ...] = model.unique_indexes
        self.primary_key: Optional[PrimaryKeyDescriptor] = model.primary_key
        self.formatted_names: FormattedNames = format_names(model.name)
        self.error_location: str = model_error_location(model.name)

        self.fields: Tuple[ExtendedField, ...] = tuple(
            ExtendedField(field, self.name) for field in model.fields
        )
        self.scalar_fields, self.relation_fields, self.enum_fields = self._partition_fields()
        self.has_relation_fields: bool = len(self.relation_fields) > 0
        self.has_omit_fields: bool = any(field.is_omit_field() for field in self.fields)

        directive = directive_parser.parse(self.documentation, self.name)
        self.imports = ImportSet()
        if directive:
            self.imports.extend(directive.statements)
        self.imports.extend(self._get_automatic_imports())
        self.cleared_documentation: Optional[str] = (
            directive.cleared_documentation if directive else None
        )

        logger.debug(
            f"Model '{self.name}': {len(self.fields)} fields, "
            f"{len(self.imports)} imports"
        )

    def _partition_fields(
        self,
    ) -> Tuple[Tuple[ExtendedField, ...], Tuple[ExtendedField, ...], Tuple[ExtendedField, ...]]:
        partitions = {kind: [] for kind in FieldKinds.ALL}
        for field in self.fields:
            partitions[field.kind].append(field)
        return (
            tuple(partitions[FieldKinds.SCALAR]),
            tuple(partitions[FieldKinds.OBJECT]),
            tuple(partitions[FieldKinds.ENUM]),
        )

    def _get_automatic_imports(self) -> List[str]:
        """Import statements implied by the model's field types, in fixed order."""
        statements: List[str] = []

        if any(field.is_json_type and not field.is_required for field in self.fields):
            statements.append(
                ImportTemplates.NULLABLE_JSON_VALUE.format(helpers_path=self.config.helpers_path)
            )

        if any(field.is_json_type and field.is_required for field in self.fields):
            statements.append(
                ImportTemplates.INPUT_JSON_VALUE.format(helpers_path=self.config.helpers_path)
            )

        if any(field.is_decimal_type for field in self.fields):
            statements.append(
                ImportTemplates.PRISMA_CLIENT.format(
                    prisma_client_path=self.config.prisma_client_path
                )
            )

        for field in self.enum_fields:
            statements.append(
                ImportTemplates.ENUM_SCHEMA.format(
                    enum_path=self.config.enum_path, type_name=field.type
                )
            )

        return statements

    def get_field(self, name: str) -> Optional[ExtendedField]:
        """Get a field by name."""
        for field in self.fields:
            if field.name == name:
                return field
        return None

    def write_optional_default_values_types(self) -> bool:
        """True if an extra type with optional default-valued fields should be generated."""
        return (
            any(field.is_optional_default_field() for field in self.fields)
            and self.config.create_optional_default_values_types
        )

    def __repr__(self) -> str:
        return f"ExtendedModel({self.name!r})"
