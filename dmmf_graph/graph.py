"""
Two-phase construction of the enriched DMMF graph.

Models are built first; actions are built afterwards because each action
looks its model up in the finished datamodel. Any error aborts the whole
build and no partial graph is returned.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Tuple

from dmmf_graph.colored_logging import log_progress, log_section, log_success
from dmmf_graph.config import GeneratorConfig
from dmmf_graph.constants import ACTION_OUTPUT_TYPES
from dmmf_graph.domain.actions import ExtendedAction, VerbMatcherProtocol, default_verb_matcher
from dmmf_graph.domain.datamodel import ExtendedDatamodel
from dmmf_graph.domain.descriptors import DMMFDocument, OutputTypeDescriptor, parse_document
from dmmf_graph.domain.directives import DirectiveParserProtocol, default_directive_parser


logger = logging.getLogger(__name__)


class ExtendedDMMF:
    """
    The enriched graph consumed by renderers.

    Attributes:
        datamodel: Models and enums
        query_actions: Actions of the ``Query`` output type
        mutation_actions: Actions of the ``Mutation`` output type
    """

    def __init__(
        self,
        document: DMMFDocument,
        config: GeneratorConfig,
        directive_parser: DirectiveParserProtocol = default_directive_parser,
        verb_matcher: VerbMatcherProtocol = default_verb_matcher,
    ):
        self.config = config

        log_progress(logger, "Building models...")
        self.datamodel = ExtendedDatamodel(document.datamodel, config, directive_parser)

        log_progress(logger, "Linking actions...")
        output_types = {
            output_type.name: output_type
            for output_type in document.prisma_schema.output_object_types.prisma
            if output_type.name in ACTION_OUTPUT_TYPES
        }
        self.query_actions = self._build_actions(output_types.get("Query"), verb_matcher)
        self.mutation_actions = self._build_actions(output_types.get("Mutation"), verb_matcher)

    def _build_actions(
        self,
        output_type: Optional[OutputTypeDescriptor],
        verb_matcher: VerbMatcherProtocol,
    ) -> Tuple[ExtendedAction, ...]:
        if output_type is None:
            return ()
        return tuple(
            ExtendedAction(field, self.datamodel.models, self.config, verb_matcher)
            for field in output_type.fields
        )

    @property
    def actions(self) -> Tuple[ExtendedAction, ...]:
        return self.query_actions + self.mutation_actions

    def get_action(self, name: str) -> Optional[ExtendedAction]:
        for action in self.actions:
            if action.name == name:
                return action
        return None

    def summary(self) -> Dict[str, int]:
        actions = self.actions
        return {
            "models": len(self.datamodel.models),
            "enums": len(self.datamodel.enums),
            "actions": len(actions),
            "linked_actions": sum(1 for action in actions if action.linked_model_index is not None),
        }


def build_graph(
    raw: Mapping[str, Any],
    config: Optional[GeneratorConfig] = None,
    directive_parser: DirectiveParserProtocol = default_directive_parser,
    verb_matcher: VerbMatcherProtocol = default_verb_matcher,
) -> ExtendedDMMF:
    """
    Build the enriched graph from a raw DMMF mapping.

    Args:
        raw: DMMF document with ``datamodel`` and ``schema`` keys
        config: Generator options; defaults apply when omitted

    Raises:
        SchemaInputError: If ``raw`` is malformed
        DirectiveError: If a model documentation carries an unknown directive
        ActionResolutionError: If an action name contains no known verb
    """
    log_section(logger, "Building DMMF graph")
    config = config or GeneratorConfig()
    document = parse_document(raw)
    graph = ExtendedDMMF(document, config, directive_parser, verb_matcher)

    summary = graph.summary()
    log_success(
        logger,
        f"Graph built: {summary['models']} models, {summary['enums']} enums, "
        f"{summary['actions']} actions ({summary['linked_actions']} linked)",
    )
    return graph
