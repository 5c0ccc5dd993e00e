"""
Raw input descriptors.

These pydantic models mirror the DMMF document produced upstream by the
schema engine (camelCase keys). They are validated once, frozen, and only
read by the graph entities in ``dmmf_graph.domain``.
"""

from typing import Any, Dict, List, Literal, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from dmmf_graph.exceptions import SchemaInputError


class Descriptor(BaseModel):
    """Base for all raw descriptors: camelCase aliases, immutable, extra keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class FieldDescriptor(Descriptor):
    name: str
    kind: Literal["scalar", "object", "enum"]
    type: str
    is_list: bool = False
    is_required: bool = False
    is_unique: bool = False
    is_id: bool = False
    is_read_only: bool = False
    is_updated_at: bool = False
    has_default_value: bool = False
    db_name: Optional[str] = None
    relation_name: Optional[str] = None
    documentation: Optional[str] = None
    omit: Tuple[str, ...] = ()


class PrimaryKeyDescriptor(Descriptor):
    name: Optional[str] = None
    fields: Tuple[str, ...] = ()


class UniqueIndexDescriptor(Descriptor):
    name: Optional[str] = None
    fields: Tuple[str, ...] = ()


class ModelDescriptor(Descriptor):
    name: str
    db_name: Optional[str] = None
    fields: Tuple[FieldDescriptor, ...] = ()
    unique_fields: Tuple[Tuple[str, ...], ...] = ()
    unique_indexes: Tuple[UniqueIndexDescriptor, ...] = ()
    primary_key: Optional[PrimaryKeyDescriptor] = None
    documentation: Optional[str] = None


class EnumValueDescriptor(Descriptor):
    name: str
    db_name: Optional[str] = None


class EnumDescriptor(Descriptor):
    name: str
    values: Tuple[EnumValueDescriptor, ...] = ()
    db_name: Optional[str] = None
    documentation: Optional[str] = None


class TypeReference(Descriptor):
    """Reference to an input or output type of the client schema."""

    type: str
    location: str = "scalar"
    namespace: Optional[str] = None
    is_list: bool = False


class SchemaArgDescriptor(Descriptor):
    name: str
    is_required: bool = False
    is_nullable: bool = False
    input_types: Tuple[TypeReference, ...] = Field(..., min_length=1)
    deprecation: Optional[Dict[str, Any]] = None


class SchemaFieldDescriptor(Descriptor):
    name: str
    is_nullable: bool = False
    output_type: TypeReference
    args: Tuple[SchemaArgDescriptor, ...] = ()
    deprecation: Optional[Dict[str, Any]] = None
    documentation: Optional[str] = None


class OutputTypeDescriptor(Descriptor):
    name: str
    fields: Tuple[SchemaFieldDescriptor, ...] = ()


class OutputObjectTypesDescriptor(Descriptor):
    prisma: Tuple[OutputTypeDescriptor, ...] = ()
    model: Tuple[OutputTypeDescriptor, ...] = ()


class SchemaDescriptor(Descriptor):
    output_object_types: OutputObjectTypesDescriptor = OutputObjectTypesDescriptor()


class DatamodelDescriptor(Descriptor):
    models: Tuple[ModelDescriptor, ...] = ()
    enums: Tuple[EnumDescriptor, ...] = ()


class DMMFDocument(Descriptor):
    datamodel: DatamodelDescriptor
    prisma_schema: SchemaDescriptor = Field(SchemaDescriptor(), alias="schema")


def parse_document(raw: Mapping[str, Any]) -> DMMFDocument:
    """
    Validate a raw DMMF mapping.

    Raises:
        SchemaInputError: If the mapping does not have the expected shape
    """
    try:
        return DMMFDocument.model_validate(raw)
    except ValidationError as e:
        errors: List[str] = [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        ]
        raise SchemaInputError("Raw model description is malformed", errors=errors) from e
