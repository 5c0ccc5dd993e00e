"""
Centralized constants for the DMMF graph builder.

Action verbs, argument-type labels, sentinel type names and the import
statement templates used when computing per-entity import sets live here so
that the domain classes never hard-code them.
"""

import re
from typing import Dict, Optional, Tuple


# =============================================================================
# FIELD CLASSIFICATION
# =============================================================================

class FieldKinds:
    """Kind tags carried by raw field descriptors."""

    SCALAR = "scalar"
    OBJECT = "object"
    ENUM = "enum"

    ALL = (SCALAR, OBJECT, ENUM)


class SentinelTypes:
    """Declared type names that need special handling in generated code."""

    JSON = "Json"
    DECIMAL = "Decimal"


class OmitTargets:
    """Omit targets that make a field excludable from write-operation args."""

    INPUT = "input"
    MODEL = "model"
    ALL = "all"

    WRITE_ARG_TARGETS = (INPUT, ALL)


# =============================================================================
# ACTIONS
# =============================================================================

# Ordered by specificity: a verb that contains another verb is listed first
# so that the substring scan picks the longer one.
ACTION_VERBS: Tuple[str, ...] = (
    "findUnique",
    "findFirst",
    "findMany",
    "findRaw",
    "createManyAndReturn",
    "createMany",
    "createOne",
    "updateManyAndReturn",
    "updateMany",
    "updateOne",
    "upsertOne",
    "deleteMany",
    "deleteOne",
    "aggregateRaw",
    "aggregate",
    "groupBy",
    "count",
    "executeRaw",
    "queryRaw",
    "runCommandRaw",
)

# Label used to rebuild the client's argument-type name. Verbs missing from
# this map have no conventional argument type.
ACTION_ARG_LABELS: Dict[str, str] = {
    "findUnique": "findUnique",
    "findFirst": "findFirst",
    "findMany": "findMany",
    "createOne": "create",
    "createMany": "createMany",
    "createManyAndReturn": "createManyAndReturn",
    "updateOne": "update",
    "updateMany": "updateMany",
    "updateManyAndReturn": "updateManyAndReturn",
    "upsertOne": "upsert",
    "deleteOne": "delete",
    "deleteMany": "deleteMany",
    "aggregate": "aggregate",
    "groupBy": "groupBy",
    "count": "count",
}

OR_THROW_SUFFIX = "OrThrow"

# Output object types whose fields are treated as actions.
ACTION_OUTPUT_TYPES: Tuple[str, ...] = ("Query", "Mutation")


class ActionPatterns:
    """Name patterns used by the action and argument predicates."""

    WRITE_ACTION = re.compile(r"create|upsert|update|delete")
    WRITE_ARG = re.compile(r"create|update|upsert|delete|data")
    REWRITE_ARG = re.compile(r"create|update|upsert|data")
    BULK_WRITE_ACTION = re.compile(r"createMany|updateMany|deleteMany")
    COUNT_FIELD = "_count"


class OutputTypeLocations:
    """Locations an action's output type can point at."""

    SCALAR = "scalar"
    ENUM_TYPES = "enumTypes"
    OUTPUT_OBJECT_TYPES = "outputObjectTypes"


# Schemas generated code never imports because it uses z.number()/z.boolean().
BUILTIN_SCHEMA_NAMES: Tuple[str, ...] = ("IntSchema", "BooleanSchema")


# =============================================================================
# DIRECTIVES
# =============================================================================

class DirectiveSyntax:
    """Regular expressions for the import directive embedded in documentation."""

    IMPORT_KEYWORD = "import"

    MARKER = re.compile(
        r"@zod\.(?P<type>\w+)\(\[(?P<imports>[\w \"'{}/,;.*@$\-]+)\]\)"
    )
    ELEMENT_SEPARATOR = re.compile(r",\s*(?=\")")
    STATEMENT = re.compile(r"\"(?P<statement>[\w \"'{}/,;.*@$\-]+)\"")
    QUOTES = re.compile(r"[\"']")


# =============================================================================
# IMPORT STATEMENT TEMPLATES
# =============================================================================

class ImportTemplates:
    """Templates for automatically derived import statements."""

    NULLABLE_JSON_VALUE = "import {{ NullableJsonValue }} from '../{helpers_path}'"
    INPUT_JSON_VALUE = "import {{ InputJsonValue }} from '../{helpers_path}'"
    PRISMA_CLIENT = "import * as PrismaClient from '{prisma_client_path}'"
    ENUM_SCHEMA = "import {{ {type_name}Schema }} from '../{enum_path}/{type_name}Schema'"
    INPUT_TYPE_SCHEMA = (
        "import {{ {type_name}Schema }} from '../{input_type_path}/{type_name}Schema'"
    )
    INCLUDE_SCHEMA = (
        "import {{ {model_type}IncludeSchema }} "
        "from '../{input_type_path}/{model_type}IncludeSchema'"
    )


def get_arg_label(verb: str) -> Optional[str]:
    """Return the argument-type label registered for a verb, if any."""
    return ACTION_ARG_LABELS.get(verb)


def model_error_location(model_name: str) -> str:
    """Location suffix appended to errors raised for a model."""
    return f"[Error Location]: Model: '{model_name}'."
