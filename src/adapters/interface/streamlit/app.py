"""Streamlit journal explorer entry point."""

from collections.abc import Sequence
from pathlib import Path

import altair as alt
import streamlit as st

from src.application.use_cases.get_balance_changes import (
    BalanceChangesView,
    build_balance_changes_view,
)
from src.application.use_cases.get_register import (
    RegisterReport,
    build_register_report,
)
from src.application.use_cases.load_ledger import LoadLedgerUseCase
from src.domain.errors import JournalError
from src.domain.models.ledger import Ledger
from src.infrastructure.journal_source import FileJournalSource
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import LedgerSettings


def _fetch_ledger(path: str, encoding: str = "utf-8") -> Ledger:
    """Parse the journal at ``path`` into a ledger."""
    source = FileJournalSource(path, encoding=encoding)
    use_case = LoadLedgerUseCase(journal_source=source)
    return use_case.execute()


@st.cache_data(show_spinner=False)
def _load_ledger(
    path: str,
    encoding: str = "utf-8",
    modified_at: float = 0.0,
) -> Ledger:
    """Cached wrapper around _fetch_ledger, keyed on file mtime."""
    _ = modified_at
    return _fetch_ledger(path, encoding)


def _register_rows(report: RegisterReport) -> list[dict[str, str]]:
    """Return register entries as table rows."""
    return [
        {
            "Date": entry.date.strftime("%Y/%m/%d"),
            "Description": entry.description,
            "Account": entry.account,
            "Amount": str(entry.amount),
            "Balance": str(entry.balance_after),
        }
        for entry in report.entries
    ]


def _prepare_balance_chart_data(
    view: BalanceChangesView,
) -> list[dict[str, str | float]]:
    """Prepare Altair-ready rows of monthly changes.

    Args:
        view: Monthly balance changes.

    Returns:
        list[dict[str, str | float]]: One row per account and month.
    """
    return [
        {
            "month": str(row.month),
            "account": row.account,
            "amount": float(row.amount.to_decimal()),
            "amount_label": str(row.amount),
        }
        for row in view.rows
    ]


def _render_register(ledger: Ledger, accounts: Sequence[str]) -> None:
    """Render the register table for a selected account."""
    st.subheader("Register")
    account = st.selectbox("Account", options=list(accounts), index=0)
    report = build_register_report(ledger, account)
    st.caption(
        f"{report.matched_transaction_count} of "
        f"{report.ledger_transaction_count} transactions, "
        f"closing balance {report.closing_balance}"
    )
    st.dataframe(_register_rows(report), width="stretch", hide_index=True)


def _render_balance_changes(ledger: Ledger, accounts: Sequence[str]) -> None:
    """Render a bar chart of monthly balance changes."""
    st.subheader("Monthly balance changes")
    selected = st.selectbox(
        "Account",
        options=["All"] + list(accounts),
        index=0,
    )
    view = build_balance_changes_view(
        ledger,
        account=None if selected == "All" else selected,
        include_subaccounts=True,
    )
    data = _prepare_balance_chart_data(view)
    if not data:
        st.info("No balance changes to chart.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_bar().encode(
        x=alt.X("month:N", title="Month"),
        y=alt.Y("amount:Q", title="Change"),
        color=alt.Color("account:N", legend=alt.Legend(orient="bottom")),
        tooltip=[
            alt.Tooltip("account:N"),
            alt.Tooltip("month:N"),
            alt.Tooltip("amount_label:N"),
        ],
    )
    st.altair_chart(chart, width="stretch")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Ledger Journal", layout="wide")
    st.title("Ledger Journal")

    settings = LedgerSettings.from_env()
    default_path = str(settings.journal_file) if settings.journal_file else ""
    journal_path = st.sidebar.text_input("Journal file", value=default_path)
    page = st.sidebar.selectbox("Page", ["Register", "Balance changes"])

    if not journal_path:
        st.warning("No journal configured. Set LEDGER_FILE or enter a path.")
        return
    path = Path(journal_path)
    if not path.is_file():
        st.error(f"Journal file not found: {path}")
        return

    get_usage_logger().info(f"Streamlit page={page} journal={path}")
    try:
        ledger = _load_ledger(
            str(path),
            settings.encoding,
            path.stat().st_mtime,
        )
    except JournalError as exc:
        st.error(f"Could not parse journal: {exc}")
        return

    accounts = ledger.accounts()
    st.caption(f"{len(ledger)} transactions across {len(accounts)} accounts")
    if not accounts:
        st.warning("The journal has no transactions.")
        return
    if page == "Register":
        _render_register(ledger, accounts)
    else:
        _render_balance_changes(ledger, accounts)


if __name__ == "__main__":  # pragma: no cover
    main()
