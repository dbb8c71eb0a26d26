"""Splitting a chronological ledger into printable pages.

The first page reserves room for the entity header, continuation pages have
no header and take more rows, and a ledger short enough to fit header and
summary together is printed on a single page.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from ledgerbook.domain.entities import LedgerPage
from ledgerbook.domain.errors import ValidationError, invalid_page_limit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaginationLimits:
    """Row limits per page kind."""

    max_first: int = 20
    max_continuation: int = 22
    max_single: int = 18

    def __post_init__(self):
        for name in ("max_first", "max_continuation", "max_single"):
            value = getattr(self, name)
            if value < 1:
                raise ValidationError(invalid_page_limit(name, value))


DEFAULT_LIMITS = PaginationLimits()


def paginate(
    rows: Sequence,
    max_first: int = DEFAULT_LIMITS.max_first,
    max_continuation: int = DEFAULT_LIMITS.max_continuation,
    max_single: int = DEFAULT_LIMITS.max_single,
) -> list[LedgerPage]:
    """Plan the pages of a statement.

    Pages come back without summaries; the caller attaches totals computed
    over the complete row set to the page flagged ``show_summary``.

    Args:
        rows: Chronologically sorted ledger rows
        max_first: Row limit of the first page of a multi-page ledger
        max_continuation: Row limit of every later page
        max_single: Largest ledger printed as one page up front

    Returns:
        Ordered list of LedgerPage; exactly one page has ``show_summary``
    """
    limits = PaginationLimits(max_first, max_continuation, max_single)
    rows = tuple(rows)

    if len(rows) <= limits.max_single:
        return [LedgerPage(rows=rows, is_first_page=True, show_summary=True)]

    first_rows = rows[: limits.max_first]
    remaining = rows[limits.max_first :]
    first_is_only = not remaining
    pages = [
        LedgerPage(rows=first_rows, is_first_page=True, show_summary=first_is_only)
    ]

    while len(remaining) > limits.max_continuation:
        pages.append(
            LedgerPage(
                rows=remaining[: limits.max_continuation],
                is_first_page=False,
                show_summary=False,
            )
        )
        remaining = remaining[limits.max_continuation :]

    if remaining:
        pages.append(LedgerPage(rows=remaining, is_first_page=False, show_summary=True))

    logger.debug("Planned %d page(s) for %d row(s)", len(pages), len(rows))
    return pages
