"""
Custom exception hierarchy for ESDL Auto Generator.

This module provides a comprehensive exception system with rich context
and error recovery guidance for contributors and users.
"""

from typing import Dict, Any, Optional, List, Sequence


class ESDLAutoGeneratorError(Exception):
    """
    Base exception for all ESDL Auto Generator errors.

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


class ConfigurationError(ESDLAutoGeneratorError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, config_file: str = None, **kwargs):
        context = kwargs.get('context', {})
        if config_file:
            context['config_file'] = config_file

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check the configuration file syntax",
                "Verify all required fields are present",
                "Pass the input schema path with --input",
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="CONFIG_ERROR"
        )


class SchemaLoadError(ESDLAutoGeneratorError):
    """Raised when a parsed schema document cannot be read or understood."""

    def __init__(self, message: str, path: str = None, node: str = None, **kwargs):
        context = kwargs.get('context', {})
        if path:
            context['path'] = path
        if node:
            context['node'] = node

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check the file is a JSON or YAML dump of the parsed schema",
                "Verify the top-level node is {'type': 'schema', 'list': [...]}",
                "Re-export the schema tree with the prisma-ast parser",
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="SCHEMA_LOAD_ERROR"
        )


class TranslationError(ESDLAutoGeneratorError):
    """Base class for failures while classifying a model field."""

    default_suggestions: List[str] = []
    code: Optional[str] = None

    def __init__(self, message: str, model: str = None, field: str = None, **kwargs):
        context = kwargs.get('context', {})
        if model:
            context['model'] = model
        if field:
            context['field'] = field

        suggestions = kwargs.get('suggestions', []) or list(self.default_suggestions)

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code=self.code
        )
        self.model = model
        self.field = field


class MissingRelationTargetError(TranslationError):
    """Raised when a relation field points at a model that is not declared."""

    code = "MISSING_RELATION_TARGET"
    default_suggestions = [
        "Check the field type is spelled like the target model",
        "Declare the target model in the same schema",
    ]

    def __init__(self, model: str, field: str, target: str, **kwargs):
        context = kwargs.pop('context', {})
        context['target'] = target
        super().__init__(
            f"No target model '{target}' for relation field '{model}.{field}'",
            model=model,
            field=field,
            context=context,
            **kwargs
        )
        self.target = target


class AmbiguousBacklinkError(TranslationError):
    """Raised when more than one inverse relation field matches a link."""

    code = "AMBIGUOUS_BACKLINK"
    default_suggestions = [
        "Keep the @relation attribute on only one side of each relation",
        "Split the relations so each inverse field is unambiguous",
    ]

    def __init__(self, model: str, field: str, target: str, candidates: Sequence[str], **kwargs):
        context = kwargs.pop('context', {})
        context['target'] = target
        context['candidates'] = ", ".join(candidates)
        super().__init__(
            f"Multiple possible backlinks for '{model}.{field}' on model '{target}'",
            model=model,
            field=field,
            context=context,
            **kwargs
        )
        self.target = target
        self.candidates = list(candidates)


class UnsupportedCompositeKeyError(TranslationError):
    """Raised when a relation is materialized through more than one id field."""

    code = "UNSUPPORTED_COMPOSITE_KEY"
    default_suggestions = [
        "Reference a single id field in @relation(fields: [...])",
        "Introduce a surrogate id on the referenced model",
    ]

    def __init__(self, model: str, field: str, id_fields: Sequence[str], **kwargs):
        context = kwargs.pop('context', {})
        context['id_fields'] = ", ".join(id_fields)
        super().__init__(
            f"Composite relation ids are not supported on '{model}.{field}'",
            model=model,
            field=field,
            context=context,
            **kwargs
        )
        self.id_fields = list(id_fields)


class UnknownScalarTypeError(TranslationError):
    """Raised when a field's primitive type has no ESDL scalar counterpart."""

    code = "UNKNOWN_SCALAR_TYPE"
    default_suggestions = [
        "Use one of the built-in scalar types",
        "Declare the type as an enum or model if it is one",
    ]

    def __init__(self, model: str, field: str, type_name: str, **kwargs):
        context = kwargs.pop('context', {})
        context['type'] = type_name
        super().__init__(
            f"Unknown type '{type_name}' on field '{model}.{field}'",
            model=model,
            field=field,
            context=context,
            **kwargs
        )
        self.type_name = type_name


class FunctionTypeUnsupportedError(TranslationError):
    """Raised when a field type is a function call such as Unsupported("...")."""

    code = "FUNCTION_TYPE_UNSUPPORTED"
    default_suggestions = [
        "Replace the function type with a named scalar type",
        "Remove the field before translating",
    ]

    def __init__(self, model: str, field: str, type_repr: str, **kwargs):
        context = kwargs.pop('context', {})
        context['type'] = type_repr
        super().__init__(
            f"Unknown function type '{type_repr}' on field '{model}.{field}'",
            model=model,
            field=field,
            context=context,
            **kwargs
        )
        self.type_repr = type_repr
