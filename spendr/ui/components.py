"""
components.py - reusable Streamlit components / forms / displays

This module contains pure-UI helpers used by the dashboard:
 - display_expense_form(on_submit)
 - display_expense_list / display_summary / display_manage_expenses / display_export

The add form validates the amount with spendr.parsing before anything is
stored, the same rule the CLI applies.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List
import datetime

import altair as alt
import pandas as pd
import streamlit as st

from spendr.errors import InvalidInputError
from spendr.ledger import LedgerStore, Summary
from spendr.models import Expense
from spendr.parsing import parse_amount


@dataclass
class ExpenseInput:
    """Lightweight container passed to the on_submit callback."""
    description: str
    amount: float
    category: str
    date: str  # ISO date string


def display_expense_form(on_submit: Callable[[ExpenseInput], None]):
    """
    Display the 'Add Expense' form.

    Parameters:
      - on_submit: callback invoked with ExpenseInput when the form validates
    """
    st.header("Add Expense")
    with st.form(key="expense_form"):
        description = st.text_input("Description")
        amount_text = st.text_input("Amount", placeholder="e.g. 120.50")
        category = st.text_input("Category")
        date_selected = st.date_input("Date", value=datetime.date.today())
        submitted = st.form_submit_button("Add Expense")

    if not submitted:
        return
    try:
        amount = parse_amount(amount_text)
    except InvalidInputError as exc:
        st.error(str(exc))
        return
    on_submit(ExpenseInput(
        description=description,
        amount=amount,
        category=category,
        date=date_selected.isoformat(),
    ))
    st.success("Expense added.")


def display_expense_list(expenses: List[Expense], title: str = "Expense List"):
    """Render expenses as an interactive table with a total row below it."""
    st.header(title)
    if not expenses:
        st.write("No expenses recorded.")
        return
    df = LedgerStore.to_dataframe(expenses)
    st.dataframe(df.style.format({"amount": "{:.2f}"}), use_container_width=True, hide_index=True)
    st.markdown(f"**Total: {df['amount'].sum():.2f}**")


def display_summary(summary: Summary, totals_by_category: Dict[str, float]):
    """Headline total, over-budget warning and a per-category bar chart."""
    st.header("Summary")
    st.markdown(f"**{summary.headline().lstrip('# ')}**")
    warning = summary.warning()
    if warning:
        st.warning(warning)
    if not totals_by_category:
        st.info("No expenses to chart.")
        return
    df = pd.DataFrame(
        [{"category": c or "(none)", "amount": round(a, 2)} for c, a in totals_by_category.items()]
    )
    chart = alt.Chart(df).mark_bar().encode(
        x=alt.X("category:N", title="Category", sort="-y"),
        y=alt.Y("amount:Q", title="Amount"),
        tooltip=[
            alt.Tooltip("category:N", title="Category"),
            alt.Tooltip("amount:Q", title="Amount", format=".2f"),
        ],
    )
    st.altair_chart(chart, use_container_width=True)


def display_manage_expenses(store: LedgerStore):
    """
    UI to select and delete an existing expense.
    Expects a LedgerStore with list_expenses() and delete_expense(id).
    """
    st.header("Delete Expense")
    exs = store.list_expenses()
    if not exs:
        st.info("No expenses recorded.")
        return

    options = {f"#{e.id} {e.category} {e.amount} {e.date} {e.description}": e.id for e in exs}
    sel_label = st.selectbox("Select expense", options=list(options.keys()))
    expense_id = options[sel_label]

    delete_confirm = st.checkbox("I confirm I want to delete this expense")
    if st.button("Delete expense") and delete_confirm:
        if store.delete_expense(expense_id):
            st.success(f"Expense deleted successfully (ID: {expense_id})")
        else:
            st.error(f"Expense with ID {expense_id} not found.")


def display_export(store: LedgerStore, file_name: str = "expenses.csv"):
    """CSV download with the same content `spendr-cli export` writes."""
    st.header("Export")
    st.download_button(
        label="Download as CSV",
        data=store.to_csv_text().encode("utf-8"),
        file_name=file_name,
        mime="text/csv",
    )
