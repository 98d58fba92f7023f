"""
dashboard.py - Streamlit UI entrypoint and orchestration

This module wires the UI components (spendr.ui.components) with the ledger
store (spendr.ledger). The main() function builds the sidebar menu and routes
actions to components and store methods.

Design notes:
 - Keep the dashboard responsible only for UI orchestration and presentation.
 - All persistence and business rules live in spendr.ledger.
"""

import os

import streamlit as st

from spendr import config
from spendr.errors import LedgerFormatError
from spendr.ledger import MONTH_NAMES, LedgerStore
from spendr.storage import JsonFileStorage
from spendr.ui import components


def main():
    """
    Streamlit page: sidebar menu controls which view is shown.
    Actions:
      - Add Expense: show form and persist via store.add_expense
      - List Expenses: whole ledger as a table
      - Filter by Category: exact or case-insensitive match
      - Summary: optional month and budget, chart by category
      - Delete Expense: select + confirm
      - Export CSV: download button
    """
    st.title("spendr")
    store = LedgerStore(JsonFileStorage(config.data_file()))
    st.sidebar.caption(f"Ledger file: {os.path.abspath(store.storage.path)}")

    menu = [
        "Add Expense",
        "List Expenses",
        "Filter by Category",
        "Summary",
        "Delete Expense",
        "Export CSV",
    ]
    choice = st.sidebar.selectbox("Select an option", menu)

    try:
        if choice == "Add Expense":
            def on_submit(exp_input: components.ExpenseInput):
                store.add_expense(
                    exp_input.description,
                    exp_input.amount,
                    exp_input.category,
                    date=exp_input.date,
                )

            components.display_expense_form(on_submit)

        elif choice == "List Expenses":
            components.display_expense_list(store.list_expenses())

        elif choice == "Filter by Category":
            category = st.text_input("Category")
            ignore_case = st.checkbox("Ignore case")
            if category:
                matches = store.filter_by_category(category, ignore_case=ignore_case)
                if matches:
                    components.display_expense_list(matches, title=f"Category: {category}")
                else:
                    st.info(f"No expenses found in the category '{category}'.")

        elif choice == "Summary":
            col1, col2 = st.columns(2)
            with col1:
                month_sel = st.selectbox(
                    "Month (optional)",
                    options=[None] + list(range(1, 13)),
                    format_func=lambda m: "All months" if m is None else MONTH_NAMES[m - 1],
                )
            with col2:
                use_budget = st.checkbox("Set a budget")
                budget = st.number_input("Budget", min_value=0.0, format="%.2f") if use_budget else None
            components.display_summary(
                store.summarize(month=month_sel, budget=budget),
                store.totals_by_category(month=month_sel),
            )

        elif choice == "Delete Expense":
            components.display_manage_expenses(store)

        elif choice == "Export CSV":
            components.display_export(store, file_name=os.path.basename(config.export_file()))
    except LedgerFormatError as exc:
        st.error(f"Cannot read ledger: {exc}")


if __name__ == "__main__":
    main()
