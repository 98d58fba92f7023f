"""
cli.py - command-line entrypoint (spendr-cli)

Flag-based commands over spendr.ledger.LedgerStore:
    spendr-cli add --desc "Lunch" --amt 120 --cat Food
    spendr-cli delete --id 3
    spendr-cli list
    spendr-cli filter --cat Food [--ignore-case]
    spendr-cli summary [--month 3] [--budget 500]
    spendr-cli export [--out expenses.csv]
    spendr-cli interactive

Output is colorized through rich when stdout is a terminal; plain otherwise.
"""

import argparse
import logging
import sys

from rich.console import Console
from rich.text import Text

from spendr import config
from spendr.errors import InvalidInputError, SpendrError
from spendr.ledger import CURRENCY, LedgerStore, format_amount, format_table
from spendr.parsing import parse_amount, parse_budget, parse_expense_id, parse_month
from spendr.storage import JsonFileStorage

VERSION = "1.0.0"

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False):
    """Single stderr handler on the package logger; INFO with --verbose."""
    pkg_logger = logging.getLogger("spendr")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.INFO if verbose else logging.WARNING)


def _arg(parse):
    """Adapt a spendr.parsing function to an argparse `type=` callable."""
    def convert(text):
        try:
            return parse(text)
        except InvalidInputError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from None
    convert.__name__ = parse.__name__
    return convert


def _say(console: Console, text: str, style: str = ""):
    console.print(Text(text, style=style), soft_wrap=True)


# ---------- Commands ----------
def cmd_add(store: LedgerStore, args, console: Console):
    exp = store.add_expense(args.desc, args.amt, args.cat)
    _say(console, f"# Expense added successfully. (ID: {exp.id})", "green")


def cmd_delete(store: LedgerStore, args, console: Console):
    if store.delete_expense(args.id):
        _say(console, f"# Expense deleted successfully (ID: {args.id})", "green")
    else:
        _say(console, f"Expense with ID {args.id} not found.", "yellow")


def cmd_list(store: LedgerStore, args, console: Console):
    expenses = store.list_expenses()
    if not expenses:
        _say(console, "No expenses recorded.", "yellow")
        return
    header, *rows = format_table(expenses)
    _say(console, header, "bold cyan")
    for row in rows:
        _say(console, row)


def cmd_filter(store: LedgerStore, args, console: Console):
    expenses = store.list_expenses()
    matches = store.filter_by_category(args.cat, ignore_case=args.ignore_case, expenses=expenses)
    if matches:
        _say(console, f"# Expenses in the category '{args.cat}': ", "bold cyan")
        for e in matches:
            _say(console, f"# {e.description}: {CURRENCY}{format_amount(e.amount)} on {e.date}")
    elif not expenses:
        _say(console, "No expenses recorded.", "yellow")
    else:
        _say(console, f"No expenses found in the category '{args.cat}'.", "yellow")


def cmd_summary(store: LedgerStore, args, console: Console):
    summary = store.summarize(month=args.month, budget=args.budget)
    _say(console, summary.headline(), "bold green")
    warning = summary.warning()
    if warning:
        _say(console, warning, "bold red")


def cmd_export(store: LedgerStore, args, console: Console):
    path = store.export_csv(args.out)
    _say(console, f"# Expenses exported to {path}", "green")


def cmd_interactive(store: LedgerStore, args, console: Console):
    from spendr import interactive
    interactive.run(store, console, export_path=config.export_file())


# ---------- CLI ----------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="spendr-cli",
        description="simple expense tracker to manage your finances.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    p.add_argument("--file", default=None,
                   help=f"Ledger JSON file (default: ${config.DATA_FILE_ENV} or {config.DEFAULT_DATA_FILE})")
    p.add_argument("-v", "--verbose", action="store_true", help="Log ledger operations to stderr")
    p.add_argument("--no-color", action="store_true", help="Disable colored output")
    sub = p.add_subparsers(dest="cmd", required=True)

    a = sub.add_parser("add", help="Add the new expenses")
    a.add_argument("--desc", default="", help="Description of the expense")
    a.add_argument("--cat", default="", help="Category of the expenses")
    a.add_argument("--amt", type=_arg(parse_amount), required=True, help="Amount of the expense")
    a.set_defaults(func=cmd_add)

    d = sub.add_parser("delete", help="Delete the existing expenses")
    d.add_argument("--id", type=_arg(parse_expense_id), required=True, help="ID of the expense")
    d.set_defaults(func=cmd_delete)

    ls = sub.add_parser("list", help="Listing all the expenses")
    ls.set_defaults(func=cmd_list)

    f = sub.add_parser("filter", help="Filter expenses by category")
    f.add_argument("--cat", required=True, help="Category to filter by")
    f.add_argument("--ignore-case", action="store_true", help="Match the category case-insensitively")
    f.set_defaults(func=cmd_filter)

    s = sub.add_parser("summary", help="Getting total expense.")
    s.add_argument("--month", type=_arg(parse_month), default=None, help="expenses of the month (1-12)")
    s.add_argument("--budget", type=_arg(parse_budget), default=None, help="Set a budget for the month")
    s.set_defaults(func=cmd_summary)

    e = sub.add_parser("export", help="Export all expenses to a CSV file.")
    e.add_argument("--out", default=None,
                   help=f"CSV file to write (default: ${config.EXPORT_FILE_ENV} or {config.DEFAULT_EXPORT_FILE})")
    e.set_defaults(func=cmd_export)

    i = sub.add_parser("interactive", help="Prompt-driven menu")
    i.set_defaults(func=cmd_interactive)

    return p


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    if args.cmd == "export" and args.out is None:
        args.out = config.export_file()

    console = Console(highlight=False, no_color=args.no_color)
    store = LedgerStore(JsonFileStorage(args.file or config.data_file()))
    logger.info("Running '%s' against %s", args.cmd, store.storage.location)
    try:
        args.func(store, args, console)
    except SpendrError as exc:
        Console(stderr=True, highlight=False, no_color=args.no_color).print(
            Text(f"Error: {exc}", style="bold red"), soft_wrap=True
        )
        return 1
    except KeyboardInterrupt:
        _say(console, "Interrupted - exiting.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
