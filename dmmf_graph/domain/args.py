"""
Arguments of generated actions.
"""

from typing import Optional, Tuple

from dmmf_graph.constants import ActionPatterns
from dmmf_graph.domain.descriptors import SchemaArgDescriptor, TypeReference
from dmmf_graph.domain.fields import ExtendedField


class ExtendedArg:
    """An action argument, optionally linked to the same-named field of the action's model."""

    def __init__(self, arg: SchemaArgDescriptor, linked_field: Optional[ExtendedField] = None):
        self.name: str = arg.name
        self.is_required: bool = arg.is_required
        self.is_nullable: bool = arg.is_nullable
        self.input_types: Tuple[TypeReference, ...] = arg.input_types
        self.deprecation = arg.deprecation
        self.linked_field: Optional[ExtendedField] = linked_field
        self.has_multiple_types: bool = len(self.input_types) > 1

    def rewrite_arg_with_new_type(self) -> bool:
        """True if the arg carries write data whose type must be regenerated without omitted fields."""
        return bool(ActionPatterns.REWRITE_ARG.search(self.name))

    def is_write_arg(self) -> bool:
        return bool(ActionPatterns.WRITE_ARG.search(self.name))

    def type_names(self) -> Tuple[str, ...]:
        return tuple(input_type.type for input_type in self.input_types)

    def __repr__(self) -> str:
        return f"ExtendedArg({self.name!r}, types={list(self.type_names())})"
