"""
Error types for enum construction, lookup, and variant access.

Every error here signals a caller logic defect: none of them are retried or
recovered inside the runtime.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class EnumContext:
    """
    Where an error happened, in enum terms.

    Attributes:
        enum: Display name of the enum involved
        member: Optional member name involved
    """

    enum: str
    member: str | None = None

    def format(self) -> str:
        """
        Format the context as a short prefix.

        Returns:
            Formatted string like: "enum Color" or "enum Color, member RED"
        """
        if self.member is not None:
            return f"enum {self.enum}, member {self.member}"
        return f"enum {self.enum}"


class EnumKitError(Exception):
    """Base exception for all enumkit errors."""

    def __init__(self, message: str, context: EnumContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class NotAMemberError(EnumKitError, LookupError):
    """
    Raised when an operand is not a member of the enum it was used with.

    Lookup-style operations (``get_key``, membership) report non-members as
    ``None``/``False`` instead of raising this.
    """

    pass


class IncomparableError(NotAMemberError):
    """Raised by ``compare`` when either operand is not a member."""

    pass


class NotAVariantError(EnumKitError, TypeError):
    """Raised when a variant accessor is used on an object that is not a variant."""

    pass


class UninitializedEnumError(EnumKitError):
    """Raised when a variant's owning enum is read before the enum is sealed."""

    pass


class EnumSealedError(EnumKitError, AttributeError):
    """
    Raised on any attempt to mutate a sealed enum or one of its variants.

    Examples:
    - Assigning or deleting an enum attribute
    - Assigning an attribute on a variant
    - ``set_value`` after the owning enum was sealed
    """

    pass


class UnboundValueError(EnumKitError):
    """Raised when a variant value is read, or its enum sealed, before the value is bound."""

    pass


class ValueAlreadyBoundError(EnumKitError):
    """Raised when a variant's value slot is bound a second time."""

    pass


class EnumDefinitionError(EnumKitError, ValueError):
    """
    Raised when factory input or a definition file is malformed.

    Examples:
    - Names and values of different lengths
    - A member name that is not a string
    - Duplicate names or values (strict mode)
    - A member name shadowing the enum surface (strict mode)
    """

    pass


def make_definition_error(
    message: str,
    enum: str,
    member: str | None = None,
) -> EnumDefinitionError:
    """
    Helper to create an EnumDefinitionError with context.

    Args:
        message: Error description
        enum: Name of the enum being defined
        member: Optional offending member name

    Returns:
        EnumDefinitionError with context attached
    """
    return EnumDefinitionError(message, EnumContext(enum=enum, member=member))


def incomparable(enum: str) -> IncomparableError:
    """Build the error ``compare`` raises for non-member operands."""
    return IncomparableError("both arguments must be members of this enum", EnumContext(enum=enum))
