"""
Extraction of import directives from model documentation.

A model's documentation may carry one marker of the form
``@zod.import(["import { x } from 'y'", ...])``. The statements it lists are
added to the model's import set and the marker is removed from the
documentation handed to later stages.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

from dmmf_graph.constants import DirectiveSyntax, model_error_location
from dmmf_graph.exceptions import DirectiveError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportDirective:
    """Statements found in a documentation string and the text left behind."""

    statements: Tuple[str, ...]
    cleared_documentation: str


class DirectiveParserProtocol(Protocol):
    """Protocol for documentation directive parsers."""

    def parse(self, documentation: Optional[str], model_name: str) -> Optional[ImportDirective]:
        """Return the directive in ``documentation``, or None when there is none."""
        ...


class RegexDirectiveParser:
    """
    Directive parser built on regular expressions.

    Only the first marker in the documentation is considered. Malformed list
    elements are dropped, but the marker is still removed from the
    documentation. A marker whose type tag is not ``import`` is fatal.
    """

    def parse(self, documentation: Optional[str], model_name: str) -> Optional[ImportDirective]:
        """
        Args:
            documentation: Raw documentation of the owning model
            model_name: Name of the owning model, reported in errors

        Returns:
            The extracted directive, or None when the documentation has no marker.
            A marker whose elements are all malformed yields no statements but
            is still removed from the documentation

        Raises:
            DirectiveError: If the marker's type tag is not ``import``
        """
        if not documentation:
            return None

        match = DirectiveSyntax.MARKER.search(documentation)
        if not match:
            return None

        directive_type = match.group("type")
        if directive_type != DirectiveSyntax.IMPORT_KEYWORD:
            raise DirectiveError(
                f"[@zod generator error]: '{directive_type}' is not a valid validator key. "
                f"{model_error_location(model_name)}",
                model=model_name,
                directive_type=directive_type,
            )

        payload = match.group("imports")
        statements = tuple(
            statement
            for statement in (
                self._parse_statement(element)
                for element in DirectiveSyntax.ELEMENT_SEPARATOR.split(payload)
            )
            if statement
        )
        if not statements:
            logger.debug(f"Import directive without valid statements. {model_error_location(model_name)}")

        return ImportDirective(
            statements=statements,
            cleared_documentation=documentation.replace(match.group(0), "", 1),
        )

    @staticmethod
    def _parse_statement(element: str) -> Optional[str]:
        statement_match = DirectiveSyntax.STATEMENT.search(element.strip())
        if not statement_match:
            return None
        return DirectiveSyntax.QUOTES.sub("'", statement_match.group("statement"))


default_directive_parser = RegexDirectiveParser()
