"""Ledger statement generation.

:func:`build_statement` is the pure entry point: given records and a context
it filters, sorts, paginates and renders. :class:`StatementService` loads the
records from the database first.
"""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional, Sequence, Union

from ledgerbook.database.base import Database
from ledgerbook.domain.assembler import PageAssembler
from ledgerbook.domain.entities import (
    CompanyInfo,
    EntityProfile,
    HistoryEntry,
    LedgerPage,
    LedgerSummary,
    StatementFilters,
    Transaction,
)
from ledgerbook.domain.errors import NotFoundError, ValidationError, entity_not_found
from ledgerbook.domain.filtering import (
    filter_history_entries,
    filter_transactions,
    sort_chronologically,
    sort_entries_chronologically,
)
from ledgerbook.domain.history import HistoryTab, entries_for_tab
from ledgerbook.domain.pagination import DEFAULT_LIMITS, PaginationLimits, paginate
from ledgerbook.domain.summary import aggregate, aggregate_history
from ledgerbook.rendering.template import LedgerTemplate, load_template

logger = logging.getLogger(__name__)

StatementContext = Union[EntityProfile, str]


def plan_pages(
    rows: Sequence,
    summary: LedgerSummary,
    limits: PaginationLimits = DEFAULT_LIMITS,
) -> list[LedgerPage]:
    """Paginate rows and attach the full-statement summary to the summary page."""
    pages = paginate(
        rows,
        max_first=limits.max_first,
        max_continuation=limits.max_continuation,
        max_single=limits.max_single,
    )
    return [replace(page, summary=summary) if page.show_summary else page for page in pages]


def plan_entity_statement(
    transactions: Sequence[Transaction],
    entity_id: str,
    filters: StatementFilters,
    limits: PaginationLimits = DEFAULT_LIMITS,
) -> list[LedgerPage]:
    """Filter, sort and paginate one entity's transactions."""
    selected = sort_chronologically(
        filter_transactions(transactions, filters.start_date, filters.end_date)
    )
    return plan_pages(selected, aggregate(selected, entity_id), limits)


def plan_history_statement(
    entries: Sequence[HistoryEntry],
    filters: StatementFilters,
    limits: PaginationLimits = DEFAULT_LIMITS,
) -> list[LedgerPage]:
    """Filter, sort and paginate the entries of a tab listing."""
    selected = sort_entries_chronologically(
        filter_history_entries(entries, filters.start_date, filters.end_date)
    )
    return plan_pages(selected, aggregate_history(selected), limits)


def build_statement(
    transactions: Sequence[Union[Transaction, HistoryEntry]],
    filters: Optional[StatementFilters],
    context: StatementContext,
    company: Optional[CompanyInfo] = None,
    generated_at: Optional[datetime] = None,
    template: Optional[LedgerTemplate] = None,
    limits: PaginationLimits = DEFAULT_LIMITS,
) -> list[str]:
    """Build the printable pages of a ledger statement.

    Args:
        transactions: Transactions of one entity, or history entries when
            ``context`` is a tab name
        filters: Statement date range
        context: EntityProfile for an entity ledger, or tab name for a
            multi-entity history ledger
        company: Letterhead details
        generated_at: Generation timestamp printed on the first page
        template: Parsed template; the packaged default when None
        limits: Pagination row limits

    Returns:
        One content string per page, in print order

    Raises:
        TemplateNotFoundError: If the default template cannot be loaded
        ValidationError: If history entries are given without a tab name
    """
    filters = filters or StatementFilters()
    if template is None:
        template = load_template()
    assembler = PageAssembler(template, company, generated_at)

    if isinstance(context, EntityProfile):
        pages = plan_entity_statement(transactions, context.id, filters, limits)
        logger.debug("Entity %s statement: %d page(s)", context.id, len(pages))
        return [assembler.assemble_entity_page(page, context, filters) for page in pages]

    if any(not isinstance(row, HistoryEntry) for row in transactions):
        raise ValidationError("History statements require HistoryEntry rows")
    pages = plan_history_statement(transactions, filters, limits)
    logger.debug("History '%s' statement: %d page(s)", context, len(pages))
    return [assembler.assemble_history_page(page, context, filters) for page in pages]


class StatementService:
    """Service for generating statements from stored records."""

    def __init__(
        self,
        db: Database,
        template_loader: Callable[[], LedgerTemplate] = load_template,
        limits: PaginationLimits = DEFAULT_LIMITS,
    ):
        """Initialize statement service.

        Args:
            db: Database instance
            template_loader: Callable returning the parsed ledger template
            limits: Pagination row limits
        """
        self.db = db
        self.template_loader = template_loader
        self.limits = limits

    def get_entity(self, entity_id: str) -> EntityProfile:
        """Get an entity profile.

        Raises:
            NotFoundError: If the entity doesn't exist
        """
        entity = self.db.get_entity(entity_id)
        if entity is None:
            raise NotFoundError(entity_not_found(entity_id))
        return entity

    def entity_summary(
        self, entity_id: str, filters: Optional[StatementFilters] = None
    ) -> LedgerSummary:
        """Totals of an entity's ledger over the given range."""
        filters = filters or StatementFilters()
        entity = self.get_entity(entity_id)
        selected = filter_transactions(
            self.db.list_entity_transactions(entity.id), filters.start_date, filters.end_date
        )
        return aggregate(selected, entity.id)

    def entity_statement(
        self,
        entity_id: str,
        filters: Optional[StatementFilters] = None,
        company: Optional[CompanyInfo] = None,
        generated_at: Optional[datetime] = None,
    ) -> list[str]:
        """Generate the statement pages of one entity's ledger.

        Raises:
            NotFoundError: If the entity doesn't exist
            TemplateNotFoundError: If the template cannot be loaded
        """
        entity = self.get_entity(entity_id)
        transactions = self.db.list_entity_transactions(entity.id)
        return build_statement(
            transactions,
            filters,
            entity,
            company=company,
            generated_at=generated_at,
            template=self.template_loader(),
            limits=self.limits,
        )

    def history_entries(self, tab: HistoryTab) -> list[HistoryEntry]:
        """Load the de-duplicated entries shown on a history tab."""
        return entries_for_tab(self.db.list_history_entries(set(tab.candidate_types)), tab)

    def history_statement(
        self,
        tab: HistoryTab,
        filters: Optional[StatementFilters] = None,
        company: Optional[CompanyInfo] = None,
        generated_at: Optional[datetime] = None,
    ) -> list[str]:
        """Generate the statement pages of a history tab.

        Raises:
            TemplateNotFoundError: If the template cannot be loaded
        """
        return build_statement(
            self.history_entries(tab),
            filters,
            tab.value,
            company=company,
            generated_at=generated_at,
            template=self.template_loader(),
            limits=self.limits,
        )
