"""
Domain module for the DMMF graph builder.

Graph entities built from the raw model description: models with their
classified fields, actions linked back to their models, and the ordered
import sets computed for each of them.
"""

from .descriptors import (
    DMMFDocument,
    DatamodelDescriptor,
    ModelDescriptor,
    FieldDescriptor,
    EnumDescriptor,
    SchemaFieldDescriptor,
    SchemaArgDescriptor,
    TypeReference,
    parse_document
)

from .naming import (
    FormattedNames,
    format_names,
    to_snake_case,
    to_pascal_case,
    to_camel_case,
    pluralize
)

from .imports import ImportSet

from .directives import (
    ImportDirective,
    DirectiveParserProtocol,
    RegexDirectiveParser
)

from .fields import ExtendedField
from .models import ExtendedModel
from .args import ExtendedArg

from .actions import (
    ExtendedAction,
    VerbMatcherProtocol,
    SubstringVerbMatcher,
    find_linked_model_index
)

from .datamodel import ExtendedDatamodel, ExtendedEnum

__all__ = [
    # Raw descriptors
    'DMMFDocument',
    'DatamodelDescriptor',
    'ModelDescriptor',
    'FieldDescriptor',
    'EnumDescriptor',
    'SchemaFieldDescriptor',
    'SchemaArgDescriptor',
    'TypeReference',
    'parse_document',

    # Naming
    'FormattedNames',
    'format_names',
    'to_snake_case',
    'to_pascal_case',
    'to_camel_case',
    'pluralize',

    # Imports and directives
    'ImportSet',
    'ImportDirective',
    'DirectiveParserProtocol',
    'RegexDirectiveParser',

    # Graph nodes
    'ExtendedField',
    'ExtendedModel',
    'ExtendedArg',
    'ExtendedAction',
    'VerbMatcherProtocol',
    'SubstringVerbMatcher',
    'find_linked_model_index',
    'ExtendedDatamodel',
    'ExtendedEnum'
]
