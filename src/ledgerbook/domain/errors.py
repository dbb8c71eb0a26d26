"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class TemplateError(DomainError):
    """Ledger template text is malformed."""


class TemplateNotFoundError(TemplateError):
    """Ledger template resource could not be loaded."""


def entity_not_found(entity_id: str) -> str:
    """Return message for missing entity profile."""
    return f"Entity '{entity_id}' not found"


def duplicate_entity(entity_id: str) -> str:
    """Return message for an entity ID that is already taken."""
    return f"Entity with ID '{entity_id}' already exists"


def unknown_history_tab(name: str) -> str:
    """Return message for an unrecognised history tab name."""
    return f"Unknown history tab '{name}'"


def template_not_found(path: str) -> str:
    """Return message for a missing ledger template."""
    return f"Ledger template not found: {path}"


def unpaired_section_marker(name: str) -> str:
    """Return message for a section start without matching end (or vice versa)."""
    return f"Template section '{name}' has no matching start/end marker"


def invalid_page_limit(name: str, value: int) -> str:
    """Return message for a non-positive pagination threshold."""
    return f"Pagination limit '{name}' must be a positive integer, got {value}"
