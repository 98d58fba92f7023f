"""
interactive.py - prompt-driven menu (spendr-cli interactive)

Same operations as the flag-based commands, asked for one value at a time.
Invalid amounts / ids / months are rejected at the prompt and asked again.
"""

from typing import Callable, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt
from rich.table import Table

from spendr.errors import ExportError, InvalidInputError
from spendr.ledger import CURRENCY, TABLE_COLUMNS, LedgerStore, format_amount
from spendr.parsing import parse_amount, parse_budget, parse_expense_id, parse_month

MENU = ["add", "delete", "list", "filter", "summary", "export", "quit"]


def _ask_valid(console: Console, question: str, parse: Callable, optional: bool = False):
    """Ask until `parse` accepts the answer. Blank answers return None when optional."""
    extra = {"default": ""} if optional else {}
    while True:
        answer = Prompt.ask(question, console=console, **extra)
        if optional and not (answer or "").strip():
            return None
        try:
            return parse(answer)
        except InvalidInputError as exc:
            console.print(f"[red]{escape(str(exc))}[/red]")


def add(store: LedgerStore, console: Console):
    description = Prompt.ask("Description", console=console, default="")
    amount = _ask_valid(console, "Amount", parse_amount)
    category = Prompt.ask("Category", console=console, default="")
    with console.status("Saving expense..."):
        exp = store.add_expense(description, amount, category)
    console.print(f"[green]Expense added successfully. (ID: {exp.id})[/green]")


def delete(store: LedgerStore, console: Console):
    expense_id = _ask_valid(console, "Expense ID", parse_expense_id)
    if not Confirm.ask(f"Delete expense {expense_id}?", console=console, default=False):
        console.print("Nothing deleted.")
        return
    with console.status("Deleting expense..."):
        deleted = store.delete_expense(expense_id)
    if deleted:
        console.print(f"[green]Expense deleted successfully (ID: {expense_id})[/green]")
    else:
        console.print(f"[yellow]Expense with ID {expense_id} not found.[/yellow]")


def show_list(store: LedgerStore, console: Console):
    expenses = store.list_expenses()
    if not expenses:
        console.print("[yellow]No expenses recorded.[/yellow]")
        return
    table = Table(box=box.ROUNDED, header_style="bold cyan")
    for name, width in TABLE_COLUMNS:
        table.add_column(name, min_width=width)
    for e in expenses:
        table.add_row(str(e.id), e.date, e.description, format_amount(e.amount), e.category)
    console.print(table)


def filter_category(store: LedgerStore, console: Console):
    category = Prompt.ask("Category", console=console)
    matches = store.filter_by_category(category, ignore_case=True)
    if not matches:
        console.print(f"[yellow]No expenses found in the category '{escape(category)}'.[/yellow]")
        return
    console.print(f"[bold cyan]Expenses in the category '{escape(category)}':[/bold cyan]")
    for e in matches:
        console.print(f"  {e.description}: {CURRENCY}{format_amount(e.amount)} on {e.date}", markup=False)


def summary(store: LedgerStore, console: Console):
    month = _ask_valid(console, "Month (1-12, blank for all)", parse_month, optional=True)
    budget = _ask_valid(console, "Budget (blank for none)", parse_budget, optional=True)
    result = store.summarize(month=month, budget=budget)
    console.print(f"[bold green]{result.headline()}[/bold green]")
    warning = result.warning()
    if warning:
        console.print(f"[bold red]{warning}[/bold red]")


def export(store: LedgerStore, console: Console, export_path: str):
    try:
        with console.status("Exporting to CSV..."):
            path = store.export_csv(export_path)
    except ExportError as exc:
        console.print(f"[red]Export failed: {escape(str(exc))}[/red]")
        return
    console.print(f"[green]Expenses exported to {escape(path)}[/green]")


def run(store: LedgerStore, console: Optional[Console] = None, export_path: str = "expenses.csv"):
    """Menu loop; returns when the user picks `quit`."""
    console = console or Console()
    console.rule("spendr")
    while True:
        choice = Prompt.ask("What would you like to do?", choices=MENU, default="list", console=console)
        if choice == "quit":
            return
        if choice == "add":
            add(store, console)
        elif choice == "delete":
            delete(store, console)
        elif choice == "list":
            show_list(store, console)
        elif choice == "filter":
            filter_category(store, console)
        elif choice == "summary":
            summary(store, console)
        elif choice == "export":
            export(store, console, export_path)
