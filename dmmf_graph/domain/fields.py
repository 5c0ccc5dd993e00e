"""
Classification of model fields.
"""

from typing import Optional, Tuple

from dmmf_graph.constants import FieldKinds, OmitTargets, SentinelTypes
from dmmf_graph.domain.descriptors import FieldDescriptor
from dmmf_graph.domain.naming import FormattedNames, format_names


class ExtendedField:
    """
    One field of a model, classified by kind and special-case type.

    The kind is taken from the descriptor as-is; JSON and decimal fields are
    recognised by their declared type name.
    """

    def __init__(self, field: FieldDescriptor, model_name: str):
        self.name: str = field.name
        self.model_name: str = model_name
        self.kind: str = field.kind
        self.type: str = field.type
        self.db_name: Optional[str] = field.db_name
        self.relation_name: Optional[str] = field.relation_name
        self.documentation: Optional[str] = field.documentation
        self.is_list: bool = field.is_list
        self.is_required: bool = field.is_required
        self.is_unique: bool = field.is_unique
        self.is_id: bool = field.is_id
        self.is_read_only: bool = field.is_read_only
        self.is_updated_at: bool = field.is_updated_at
        self.has_default_value: bool = field.has_default_value
        self.omit_targets: Tuple[str, ...] = field.omit
        self.formatted_names: FormattedNames = format_names(field.name)

        self.is_json_type: bool = self.type == SentinelTypes.JSON
        self.is_decimal_type: bool = self.type == SentinelTypes.DECIMAL

    @property
    def is_nullable(self) -> bool:
        return not self.is_required

    @property
    def is_scalar(self) -> bool:
        return self.kind == FieldKinds.SCALAR

    @property
    def is_relation(self) -> bool:
        return self.kind == FieldKinds.OBJECT

    @property
    def is_enum(self) -> bool:
        return self.kind == FieldKinds.ENUM

    @property
    def error_location(self) -> str:
        return f"[Error Location]: Model: '{self.model_name}', Field: '{self.name}'."

    def is_omit_field(self) -> bool:
        """True if upstream marked this field for omission from write-operation args."""
        return any(target in OmitTargets.WRITE_ARG_TARGETS for target in self.omit_targets)

    def is_optional_default_field(self) -> bool:
        """True if the database fills this field when it is left out."""
        return self.has_default_value or self.is_updated_at

    def __repr__(self) -> str:
        return f"ExtendedField({self.model_name}.{self.name}: {self.kind} {self.type})"
