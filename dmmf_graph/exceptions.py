"""
Custom exception hierarchy for the DMMF graph builder.

Every error raised while building the graph carries the entity it was raised
for, so a failed run points straight at the offending model or action.
"""

from typing import Dict, Any, Optional, List


class DMMFGraphError(Exception):
    """
    Base exception for all DMMF graph builder errors.

    Provides rich context and error recovery guidance.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        error_code: Optional[str] = None
    ):
        """
        Initialize the exception with context and recovery suggestions.

        Args:
            message: Human-readable error message
            context: Additional context about where/why the error occurred
            suggestions: List of potential solutions or next steps
            error_code: Unique error code for programmatic handling
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        self.error_code = error_code

    def __str__(self) -> str:
        """Return formatted error message with context."""
        lines = [super().__str__()]

        if self.error_code:
            lines.append(f"Error Code: {self.error_code}")

        if self.context:
            lines.append("Context:")
            for key, value in self.context.items():
                lines.append(f"  {key}: {value}")

        if self.suggestions:
            lines.append("Suggestions:")
            for suggestion in self.suggestions:
                lines.append(f"  • {suggestion}")

        return "\n".join(lines)


class ConfigurationError(DMMFGraphError):
    """Raised when generator configuration is invalid."""

    def __init__(self, message: str, config_file: str = None, **kwargs):
        context = kwargs.get('context', {})
        if config_file:
            context['config_file'] = config_file

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check the configuration file syntax",
                "Verify every path option is a non-empty string",
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="CONFIG_ERROR"
        )


class SchemaInputError(DMMFGraphError):
    """Raised when the raw model description does not have the expected shape."""

    def __init__(self, message: str, errors: List[str] = None, **kwargs):
        context = kwargs.get('context', {})
        if errors:
            context['errors'] = "; ".join(errors)

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Pass the document produced by the schema engine unchanged",
                "Check that every model, field and action has a name",
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="SCHEMA_INPUT_ERROR"
        )


class DirectiveError(DMMFGraphError):
    """Raised when a documentation directive uses an unknown keyword."""

    def __init__(self, message: str, model: str = None, directive_type: str = None, **kwargs):
        context = kwargs.get('context', {})
        if model:
            context['model'] = model
        if directive_type:
            context['directive_type'] = directive_type

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Use '@zod.import([...])' to add import statements to a model",
                "Remove the directive from the model documentation",
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="DIRECTIVE_ERROR"
        )


class ActionResolutionError(DMMFGraphError):
    """Raised when an action name contains none of the known verbs."""

    def __init__(self, message: str, action: str = None, **kwargs):
        context = kwargs.get('context', {})
        if action:
            context['action'] = action

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check that the schema engine version matches the supported verbs",
                "Only pass fields of the Query and Mutation output types",
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="ACTION_RESOLUTION_ERROR"
        )

