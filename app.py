"""
app.py - minimal entrypoint for the Streamlit dashboard

Keep this file tiny so streamlit can import it without side-effects.
Run the app with:
    streamlit run app.py

Set SPENDR_DATA_FILE to point the dashboard at a ledger other than
./expense.json. This module simply delegates to spendr.ui.dashboard.main().
"""
from spendr.ui import dashboard


def main():
    dashboard.main()


if __name__ == "__main__":
    main()
