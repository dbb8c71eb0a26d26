"""Page content assembly for ledger statements."""

from datetime import datetime
from html import escape
from typing import Optional

from ledgerbook.domain.classifier import (
    PLACEHOLDER,
    classify,
    credit_cell,
    describe,
    payment_method,
    type_badge,
)
from ledgerbook.domain.entities import (
    CompanyInfo,
    EntityProfile,
    HistoryEntry,
    LedgerPage,
    StatementFilters,
    Transaction,
)
from ledgerbook.rendering.formatting import (
    format_currency,
    format_date,
    format_period_bound,
    format_time,
)
from ledgerbook.rendering.template import (
    ENTITY_SECTION,
    FOOTER_SECTION,
    SUMMARY_SECTION,
    LedgerTemplate,
)

DEFAULT_COMPANY_ADDRESS = "123 Business Avenue, Suite 100, City, State 12345"

ROW_TEMPLATE = """<tr>
    <td>{date}</td>
    <td>{time}</td>
    <td>{name}</td>
    <td>{badge}</td>
    <td>{description}</td>
    <td class="payment-method">{payment}</td>
    <td class="text-right {amount_class}">{amount}</td>
    <td class="text-right">{credit}</td>
</tr>
"""


def render_badge(txn: Transaction) -> str:
    label = type_badge(txn)
    if not label:
        return ""
    return (
        f'<span class="transaction-type" style="background-color: {txn.type.badge_color};">'
        f"{escape(label)}</span>"
    )


def render_credit(txn: Transaction) -> str:
    cell = credit_cell(txn)
    if cell is None:
        return PLACEHOLDER
    return f'<span class="{cell.amount_class.css_class}">{cell.display}</span>'


def render_row(
    txn: Transaction,
    entity_id: str,
    entity_name: str,
    tab_context: Optional[str] = None,
) -> str:
    """Render one ledger table row."""
    amount = classify(txn, entity_id, tab_context)
    return ROW_TEMPLATE.format(
        date=format_date(txn.date),
        time=format_time(txn.date),
        name=escape(entity_name),
        badge=render_badge(txn),
        description=escape(describe(txn)),
        payment=escape(payment_method(txn)),
        amount_class=amount.amount_class.css_class,
        amount=amount.display,
        credit=render_credit(txn),
    )


class PageAssembler:
    """Fills the ledger template for each planned page."""

    def __init__(
        self,
        template: LedgerTemplate,
        company: Optional[CompanyInfo] = None,
        generated_at: Optional[datetime] = None,
    ):
        """Initialize page assembler.

        Args:
            template: Parsed ledger template
            company: Letterhead details
            generated_at: Timestamp printed as the generation date; defaults
                to the current time
        """
        self.template = template
        self.company = company or CompanyInfo()
        self.generated_at = generated_at or datetime.now()

    def _company_values(self) -> dict[str, str]:
        address = self.company.address or DEFAULT_COMPANY_ADDRESS
        contact = ""
        if self.company.email and self.company.phone:
            contact = (
                f"<div>Email: {escape(self.company.email)} | "
                f"Phone: {escape(self.company.phone)}</div>"
            )
        return {"company_address": escape(address), "company_contact": contact}

    def _header_values(
        self, name: str, phone: str, email: str, filters: StatementFilters
    ) -> dict[str, str]:
        return {
            "entity_name": escape(name),
            "entity_type": "",
            "entity_phone": f"<div>Phone: {escape(phone)}</div>" if phone else "",
            "entity_email": f"<div>Email: {escape(email)}</div>" if email else "",
            "period_start": format_period_bound(filters.start_date),
            "period_end": format_period_bound(filters.end_date),
            "generated_date": format_date(self.generated_at),
        }

    def _render(
        self, page: LedgerPage, rows_html: str, header: dict[str, str]
    ) -> str:
        values = self._company_values()
        values["transactions"] = rows_html
        if page.is_first_page:
            values.update(header)
        if page.show_summary and page.summary is not None:
            values["total_inflow"] = format_currency(page.summary.inflow)
            values["total_outflow"] = format_currency(page.summary.outflow)

        include = {
            ENTITY_SECTION: page.is_first_page,
            SUMMARY_SECTION: page.show_summary,
            FOOTER_SECTION: page.show_summary,
        }
        return self.template.render(values, include)

    def assemble_entity_page(
        self,
        page: LedgerPage,
        entity: EntityProfile,
        filters: StatementFilters,
    ) -> str:
        """Render a page of a single-entity ledger; the name column stays empty.

        Args:
            page: Planned page with Transaction rows
            entity: Entity the ledger is written for
            filters: Statement date range

        Returns:
            Page content string
        """
        rows_html = "".join(render_row(txn, entity.id, "") for txn in page.rows)
        header = self._header_values(entity.name, entity.phone, entity.email, filters)
        return self._render(page, rows_html, header)

    def assemble_history_page(
        self,
        page: LedgerPage,
        tab_name: str,
        filters: StatementFilters,
    ) -> str:
        """Render a page of a tab ledger; each row names its own entity."""
        rows_html = "".join(
            render_row(entry.transaction, entry.entity_id, entry.entity_name, tab_name)
            for entry in page.rows
            if isinstance(entry, HistoryEntry)
        )
        header = self._header_values(tab_name, "", "", filters)
        return self._render(page, rows_html, header)
