"""
Graph nodes for the actions of the client schema.

An action is a field of the ``Query`` or ``Mutation`` output type, named
``<verb><Model>`` with an optional ``OrThrow`` suffix (e.g. ``findManyUser``,
``findUniqueUserOrThrow``). From the name alone we derive the verb, the model
type and the argument-type name used by the client; the model type is then
matched against the datamodel to link the action to its model.
"""

import logging
from typing import List, Optional, Protocol, Sequence, Tuple

from dmmf_graph.config import GeneratorConfig
from dmmf_graph.constants import (
    ACTION_VERBS,
    BUILTIN_SCHEMA_NAMES,
    OR_THROW_SUFFIX,
    ActionPatterns,
    ImportTemplates,
    OutputTypeLocations,
    get_arg_label,
)
from dmmf_graph.domain.args import ExtendedArg
from dmmf_graph.domain.descriptors import SchemaFieldDescriptor, TypeReference
from dmmf_graph.domain.imports import ImportSet
from dmmf_graph.domain.models import ExtendedModel
from dmmf_graph.domain.naming import FormattedNames, format_names, to_pascal_case
from dmmf_graph.exceptions import ActionResolutionError


logger = logging.getLogger(__name__)

def references_builtin_schema(statement: str) -> bool:
    """True if the statement mentions a schema generated code never imports."""
    return any(name in statement for name in BUILTIN_SCHEMA_NAMES)


class VerbMatcherProtocol(Protocol):
    """Protocol for action verb matchers."""

    def match(self, action_name: str) -> Optional[str]:
        """Return the verb contained in ``action_name``, or None."""
        ...


class SubstringVerbMatcher:
    """Picks the first verb, in the given order, that occurs in the action name."""

    def __init__(self, verbs: Sequence[str] = ACTION_VERBS):
        self.verbs = tuple(verbs)

    def match(self, action_name: str) -> Optional[str]:
        for verb in self.verbs:
            if verb in action_name:
                return verb
        return None


default_verb_matcher = SubstringVerbMatcher()


def find_linked_model_index(model_type: str, models: Sequence[ExtendedModel]) -> Optional[int]:
    """
    Index of the first model whose name occurs in ``model_type``.

    Matching is by containment, not equality, and the first model in
    declaration order wins. With models ``User`` and ``UserProfile`` declared
    in that order, ``UserProfile`` actions link to ``User``.
    """
    for index, model in enumerate(models):
        if model.name in model_type:
            return index
    return None


class ExtendedAction:
    """
    An action of the client schema linked back to the model it operates on.

    Attributes:
        action: Matched verb, e.g. ``findMany``
        model_type: Action name without verb and ``OrThrow``, e.g. ``User``
        arg_name: Client argument-type name, e.g. ``UserFindManyArgs``; None if
            the verb has no conventional argument type
        linked_model_index: Position of the linked model in the datamodel, if any
        has_omit_fields: True for write actions whose linked model has omit fields
        arg_type_imports: Imports needed by the generated argument schema
    """

    def __init__(
        self,
        field: SchemaFieldDescriptor,
        models: Sequence[ExtendedModel],
        config: GeneratorConfig,
        verb_matcher: VerbMatcherProtocol = default_verb_matcher,
    ):
        self.config = config
        self.name: str = field.name
        self.is_nullable: bool = field.is_nullable
        self.output_type: TypeReference = field.output_type
        self.deprecation = field.deprecation
        self.documentation: Optional[str] = field.documentation
        self.formatted_names: FormattedNames = format_names(field.name)
        self._models: Tuple[ExtendedModel, ...] = tuple(models)

        self.action: str = self._match_action(verb_matcher)
        self.model_type: str = self._get_model_type()
        self.arg_name: Optional[str] = self._get_arg_name()
        self.linked_model_index: Optional[int] = find_linked_model_index(
            self.model_type, self._models
        )
        self.args: Tuple[ExtendedArg, ...] = self._get_args(field)
        self.has_omit_fields: bool = self._get_has_omit_fields()
        self.arg_type_imports: ImportSet = self._get_arg_type_imports()

        logger.debug(
            f"Action '{self.name}': verb={self.action}, model_type={self.model_type}, "
            f"linked_model={self.linked_model.name if self.linked_model else None}"
        )

    @property
    def linked_model(self) -> Optional[ExtendedModel]:
        if self.linked_model_index is None:
            return None
        return self._models[self.linked_model_index]

    def _match_action(self, verb_matcher: VerbMatcherProtocol) -> str:
        action = verb_matcher.match(self.name)
        if action is None:
            raise ActionResolutionError(
                f"Action '{self.name}' does not contain a known action verb",
                action=self.name,
            )
        return action

    def _get_model_type(self) -> str:
        """Strip the verb and the ``OrThrow`` suffix, e.g. "findManyUser" -> "User"."""
        return self.name.replace(self.action, "", 1).replace(OR_THROW_SUFFIX, "", 1)

    def _get_arg_name(self) -> Optional[str]:
        """Rebuild the argument-type name, e.g. "findManyUser" -> "UserFindManyArgs"."""
        label = get_arg_label(self.action)
        if label is None:
            return None

        label = to_pascal_case(label)
        if OR_THROW_SUFFIX in self.name:
            return f"{self.model_type}{label}{OR_THROW_SUFFIX}Args"
        return f"{self.model_type}{label}Args"

    def _get_args(self, field: SchemaFieldDescriptor) -> Tuple[ExtendedArg, ...]:
        linked_model = self.linked_model
        return tuple(
            ExtendedArg(arg, linked_model.get_field(arg.name) if linked_model else None)
            for arg in field.args
        )

    def _get_has_omit_fields(self) -> bool:
        if not ActionPatterns.WRITE_ACTION.search(self.name):
            return False
        linked_model = self.linked_model
        return bool(linked_model and linked_model.has_omit_fields)

    def _get_arg_type_imports(self) -> ImportSet:
        input_type_path = self.config.input_type_path
        imports = ImportSet()

        linked_model = self.linked_model
        if self.include_in_select_and_include_args() and linked_model and linked_model.has_relation_fields:
            imports.add(
                ImportTemplates.INCLUDE_SCHEMA.format(
                    model_type=self.model_type, input_type_path=input_type_path
                )
            )

        for arg in self.args:
            for input_type in arg.input_types:
                imports.add(
                    ImportTemplates.INPUT_TYPE_SCHEMA.format(
                        type_name=input_type.type, input_type_path=input_type_path
                    )
                )

        # Int and Boolean args are generated as z.number() and z.boolean()
        return imports.exclude(references_builtin_schema)

    def create_custom_omit_field_arg_type(self) -> bool:
        """True if the generated argument type must be rebuilt without the omitted fields."""
        return self.has_omit_fields and any(arg.is_write_arg() for arg in self.args)

    def get_omit_union_for_custom_arg_type(self) -> str:
        """Union of the write arg names to omit from the client type, e.g. '"data" | "create"'."""
        return " | ".join(f'"{arg.name}"' for arg in self.args if arg.is_write_arg())

    def get_type_for_custom_args_type(self) -> str:
        """Fields of the rebuilt argument type, e.g. 'data: z.infer<typeof UserCreateInputSchema>'."""
        fields: List[str] = []
        for arg in self.args:
            if not arg.rewrite_arg_with_new_type():
                continue

            arg_type = " | ".join(
                f"z.infer<typeof {input_type.type}Schema>{'[]' if input_type.is_list else ''}"
                for input_type in arg.input_types
            )
            fields.append(f"{arg.name}{'' if arg.is_required else '?'}: {arg_type}")

        return ", ".join(fields)

    def is_enum_output_type(self) -> bool:
        return self.output_type.location == OutputTypeLocations.ENUM_TYPES

    def is_list_output_type(self) -> bool:
        return self.output_type.is_list

    def is_object_output_type(self) -> bool:
        return self.output_type.location == OutputTypeLocations.OUTPUT_OBJECT_TYPES

    def is_scalar_output_type(self) -> bool:
        return self.output_type.location == OutputTypeLocations.SCALAR

    def is_count_field(self) -> bool:
        return ActionPatterns.COUNT_FIELD in self.name

    def include_in_select_and_include_args(self) -> bool:
        """False for bulk writes, which return a count instead of records."""
        return not ActionPatterns.BULK_WRITE_ACTION.search(self.name)

    def write_select_find_many_imports(self) -> bool:
        return self.is_object_output_type() and self.is_list_output_type()

    def write_select_imports(self) -> bool:
        return self.is_object_output_type()

    def __repr__(self) -> str:
        return f"ExtendedAction({self.name!r})"
