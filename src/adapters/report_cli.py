"""CLI adapter printing register and monthly balance reports."""

import argparse
import sys

from src.application.use_cases.get_balance_changes import BalanceChangesView
from src.application.use_cases.get_register import RegisterReport
from src.domain.errors import JournalError
from src.domain.models.amount import Amount
from src.domain.services.parser import parse_amount
from src.infrastructure.container import (
    build_balance_changes_use_case,
    build_journal_source,
    build_register_use_case,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import LedgerSettings

_BLANK_DATE = " " * 10


def _opening_amount(value: str) -> Amount:
    try:
        return parse_amount(value)
    except JournalError as exc:
        raise argparse.ArgumentTypeError(
            f"Invalid opening balance '{value}'. Expected e.g. $100.00."
        ) from exc


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the report CLI."""
    parser = argparse.ArgumentParser(
        prog="ledger-report",
        description="Print reports from a plain-text journal.",
    )
    subparsers = parser.add_subparsers(dest="report", required=True)

    register_parser = subparsers.add_parser(
        "register",
        help="Postings of one account with a running balance.",
    )
    register_parser.add_argument("-a", "--account", metavar="ACCOUNT")
    register_parser.add_argument("-j", "--journal", metavar="JOURNAL")
    register_parser.add_argument(
        "--opening",
        type=_opening_amount,
        metavar="AMOUNT",
        help="Balance before the first posting, e.g. $100.00.",
    )

    balance_parser = subparsers.add_parser(
        "balance",
        help="Net change of every account per calendar month.",
    )
    balance_parser.add_argument("-a", "--account", metavar="ACCOUNT")
    balance_parser.add_argument("-j", "--journal", metavar="JOURNAL")
    balance_parser.add_argument(
        "--subaccounts",
        action="store_true",
        help="Include the sub-accounts of --account.",
    )
    return parser


def format_register(report: RegisterReport) -> list[str]:
    """Render register entries as fixed-width lines.

    Date and description are printed only on the first line of each
    transaction.

    Args:
        report: Register report to render.

    Returns:
        list[str]: One line per entry.
    """
    lines = []
    previous_index = None
    for entry in report.entries:
        first = entry.transaction_index != previous_index
        previous_index = entry.transaction_index
        date_text = entry.date.strftime("%Y/%m/%d") if first else _BLANK_DATE
        description = entry.description if first else ""
        lines.append(
            f"{date_text} {description:<30} {entry.account:<30} "
            f"{str(entry.amount):>10} {str(entry.balance_after):>10}"
        )
    return lines


def format_balance_changes(view: BalanceChangesView) -> list[str]:
    """Render monthly changes as one line per account and month."""
    lines = []
    for account in view.accounts():
        for row in view.rows:
            if row.account != account:
                continue
            lines.append(f"{str(row.month):<8} {account:<30} {str(row.amount):>10}")
        lines.append(
            f"{'total':<8} {account:<30} {str(view.total_for(account)):>10}"
        )
    return lines


def _run_register(args, settings: LedgerSettings) -> int:
    account = (args.account or "").strip() or settings.default_account
    if not account:
        print(
            "An account is required: pass --account or set "
            "LEDGER_DEFAULT_ACCOUNT.",
            file=sys.stderr,
        )
        return 2
    source = build_journal_source(args.journal, settings=settings)
    report = build_register_use_case(source).execute(
        account,
        opening_balance=args.opening,
    )
    print(f"Register report for account {account}:")
    for line in format_register(report):
        print(line)
    print(
        f"{report.matched_transaction_count} of "
        f"{report.ledger_transaction_count} transactions, "
        f"closing balance {report.closing_balance}"
    )
    return 0


def _run_balance(args, settings: LedgerSettings) -> int:
    source = build_journal_source(args.journal, settings=settings)
    view = build_balance_changes_use_case(source).execute(
        account=args.account,
        include_subaccounts=args.subaccounts,
    )
    months = ", ".join(str(month) for month in view.months) or "none"
    print(f"Balance changes by month ({months}):")
    for line in format_balance_changes(view):
        print(line)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the report CLI.

    Args:
        argv: Command-line arguments, defaulting to ``sys.argv[1:]``.

    Returns:
        int: Process exit code.
    """
    args = build_parser().parse_args(argv)
    logger = get_app_logger()
    get_usage_logger().info(f"CLI report={args.report} account={args.account}")
    settings = LedgerSettings.from_env()
    try:
        if args.report == "register":
            return _run_register(args, settings)
        return _run_balance(args, settings)
    except (JournalError, FileNotFoundError, RuntimeError) as exc:
        logger.error(f"Report {args.report} failed: {exc}")
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
