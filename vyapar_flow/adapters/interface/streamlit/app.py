"""Streamlit bookkeeping app entry point."""

from collections.abc import Sequence
from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal

import altair as alt
import streamlit as st

from vyapar_flow.application.store import PersistOnChange, StateStore
from vyapar_flow.application.use_cases.backups import ImportBackupUseCase
from vyapar_flow.application.use_cases.get_dashboard_summary import (
    GetDashboardSummaryUseCase,
)
from vyapar_flow.application.use_cases.record_finance_entry import (
    RecordFinanceEntryUseCase,
)
from vyapar_flow.application.use_cases.record_transaction import (
    RecordCustomerTransactionUseCase,
)
from vyapar_flow.application.use_cases.register_customer import (
    RegisterCustomerUseCase,
)
from vyapar_flow.application.use_cases.select_data_folder import (
    DesktopCapabilityUnavailable,
    SelectDataFolderUseCase,
)
from vyapar_flow.application.use_cases.update_shop_profile import (
    UpdateShopProfileUseCase,
)
from vyapar_flow.application.use_cases.work_orders import (
    ChangeOrderStatusUseCase,
    CreateWorkOrderUseCase,
)
from vyapar_flow.domain.constants import (
    COMPLETED,
    EXPENSE,
    IN_PROCESS,
    INCOME,
    JAMA,
    ORDER_STATUSES,
    PENDING,
    UDHAAR,
)
from vyapar_flow.domain.exceptions import ImportValidationError
from vyapar_flow.domain.models import (
    Customer,
    FinanceEntry,
    FinanceTotals,
    WorkOrder,
)
from vyapar_flow.domain.services.ledger import (
    compute_customer_balance,
    compute_finance_totals,
    compute_order_stats,
    compute_overall_customer_balance,
    search_customers,
    sort_finances_by_date,
    suggest_customers,
)
from vyapar_flow.infrastructure.container import (
    build_desktop_bridge,
    build_persistence_adapter,
    build_store,
)
from vyapar_flow.infrastructure.logging.logger import get_usage_logger
from vyapar_flow.infrastructure.persistence import backup_file_name
from vyapar_flow.infrastructure.settings import AppSettings, DATA_FILE_NAME
from vyapar_flow.infrastructure.state_codec import dumps_state


PAGES = ["Dashboard", "Customers", "Finances", "Work Orders", "Settings"]

STATUS_LABELS = {
    PENDING: "Pending",
    IN_PROCESS: "In Process",
    COMPLETED: "Completed",
}

WALK_IN_OPTION = "Walk-in (not linked)"

TRANSACTION_LABELS = {
    UDHAAR: "Udhaar (Given)",
    JAMA: "Jama (Received)",
}


@dataclass
class AppContext:
    """Objects shared by every page of one Streamlit session."""

    store: StateStore
    listener: PersistOnChange
    folder_use_case: SelectDataFolderUseCase


def _build_context() -> AppContext:
    """Wire the store, its persistence and the optional desktop bridge."""
    settings = AppSettings.from_env()
    bridge = build_desktop_bridge(settings, picker=_pick_folder)
    persistence = build_persistence_adapter(settings=settings, bridge=bridge)
    store, listener = build_store(persistence)
    return AppContext(
        store=store,
        listener=listener,
        folder_use_case=SelectDataFolderUseCase(store, bridge),
    )


def _get_context() -> AppContext:
    """Return the session context, building it on first access."""
    if "vyapar_context" not in st.session_state:
        st.session_state["vyapar_context"] = _build_context()
    return st.session_state["vyapar_context"]


def _pick_folder() -> str | None:
    """Return the folder typed in the settings page, if any."""
    value = st.session_state.get("data_folder_input", "")
    return value.strip() or None


def _format_currency(value: Decimal) -> str:
    """Format amounts for display."""
    return f"₹{value:,.2f}"


def _format_signed(value: Decimal) -> str:
    """Format a balance with an explicit sign."""
    sign = "+" if value >= 0 else "-"
    return f"{sign}{_format_currency(abs(value))}"


def _prepare_finance_chart_data(
    totals: FinanceTotals,
) -> list[dict[str, str | float]]:
    """Return Altair-ready rows for the income/expense bar chart."""
    return [
        {
            "name": "Income",
            "amount": float(totals.total_income),
            "amount_label": _format_currency(totals.total_income),
        },
        {
            "name": "Expense",
            "amount": float(totals.total_expense),
            "amount_label": _format_currency(totals.total_expense),
        },
    ]


def _customer_rows(customers: Sequence[Customer]) -> list[dict[str, str]]:
    """Build table rows for the customer list."""
    return [
        {
            "Name": customer.name,
            "Mobile": customer.mobile or "No Mobile",
            "Balance": _format_signed(
                compute_customer_balance(customer.transactions)
            ),
        }
        for customer in customers
    ]


def _transaction_rows(customer: Customer) -> list[dict[str, str]]:
    """Build table rows for a customer's ledger, newest first."""
    return [
        {
            "Date": transaction.date,
            "Type": "Jama" if transaction.type == JAMA else "Udhaar",
            "Amount": (
                f"{'+' if transaction.type == JAMA else '-'}"
                f"{_format_currency(transaction.amount)}"
            ),
            "Description": transaction.description,
        }
        for transaction in customer.transactions
    ]


def _order_customer_options(
    customers: Sequence[Customer],
    lookup: str,
) -> list[Customer | None]:
    """Return the link choices for a new order, walk-in first.

    A typed name narrows the list to matching customers.
    """
    fragment = lookup.strip()
    if not fragment:
        return [None, *customers]
    return [None, *suggest_customers(customers, fragment)]


def _handle_backup_upload(store: StateStore, raw: bytes) -> tuple[bool, str]:
    """Import an uploaded backup.

    Returns:
        tuple[bool, str]: Success flag and the message to show.
    """
    try:
        ImportBackupUseCase(store).execute(raw)
    except ImportValidationError as exc:
        return False, str(exc)
    return True, "Database restored successfully!"


def _render_finance_chart(totals: FinanceTotals) -> None:
    """Render a horizontal bar chart of income against expenses."""
    data = _prepare_finance_chart_data(totals)
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusEnd=4,
        size=40,
    ).encode(
        x=alt.X("amount:Q", axis=None),
        y=alt.Y("name:N", sort=None, title=None),
        color=alt.Color(
            "name:N",
            scale=alt.Scale(
                domain=["Income", "Expense"],
                range=["#16a34a", "#dc2626"],
            ),
            legend=None,
        ),
        tooltip=[
            alt.Tooltip("name:N"),
            alt.Tooltip("amount_label:N"),
        ],
    ).properties(height=180)
    st.subheader("Financial Overview")
    st.altair_chart(chart, width="stretch")


def _render_dashboard(store: StateStore) -> None:
    summary = GetDashboardSummaryUseCase(store).execute()
    st.subheader("Overview")
    st.metric(
        "Total Shop Balance",
        _format_currency(summary.finance.net_balance),
    )
    income_col, expense_col, udhaar_col, orders_col = st.columns(4)
    income_col.metric(
        "Total Income",
        _format_currency(summary.finance.total_income),
    )
    expense_col.metric(
        "Total Expenses",
        _format_currency(summary.finance.total_expense),
    )
    udhaar_col.metric(
        "Market Udhaar (To Collect)",
        _format_currency(summary.exposure.receivables),
        help="Money customers owe you",
    )
    orders_col.metric("Active Orders", str(summary.orders.active))
    _render_finance_chart(summary.finance)


def _render_customers(store: StateStore) -> None:
    usage = get_usage_logger()
    customers = store.state.customers
    st.metric(
        "Overall Customer Balance",
        _format_signed(compute_overall_customer_balance(customers)),
    )

    with st.expander("Add customer"):
        with st.form("add_customer", clear_on_submit=True):
            name = st.text_input("Name")
            mobile = st.text_input("Mobile")
            if st.form_submit_button("Save customer"):
                try:
                    RegisterCustomerUseCase(store).execute(name, mobile)
                except ValueError as exc:
                    st.error(str(exc))
                else:
                    usage.info("customer added")
                    st.rerun()

    term = st.text_input("Search name or mobile...", key="customer_search")
    filtered = search_customers(customers, term)
    if not filtered:
        st.info("No customers found.")
        return
    st.dataframe(_customer_rows(filtered), width="stretch", hide_index=True)

    selected = st.selectbox(
        "Customer",
        options=filtered,
        format_func=lambda c: f"{c.name} ({c.mobile or 'No Mobile'})",
    )
    if selected is None:
        return
    st.subheader(selected.name)
    st.metric(
        "Balance",
        _format_signed(compute_customer_balance(selected.transactions)),
    )
    if selected.transactions:
        st.dataframe(
            _transaction_rows(selected),
            width="stretch",
            hide_index=True,
        )
    else:
        st.caption("No transactions yet.")

    with st.form("add_transaction", clear_on_submit=True):
        transaction_type = st.radio(
            "Type",
            options=[UDHAAR, JAMA],
            format_func=TRANSACTION_LABELS.get,
            horizontal=True,
        )
        amount = st.number_input("Amount", min_value=0.0, step=1.0)
        description = st.text_input("Description")
        on_date = st.date_input("Date", value=date.today())
        if st.form_submit_button("Add entry"):
            RecordCustomerTransactionUseCase(store).execute(
                selected.id,
                amount,
                transaction_type,
                description=description,
                on_date=on_date,
            )
            usage.info(f"{transaction_type} recorded")
            st.rerun()


def _render_finances(store: StateStore) -> None:
    usage = get_usage_logger()
    finances = store.state.finances
    totals = compute_finance_totals(finances)
    income_col, expense_col, balance_col = st.columns(3)
    income_col.metric("Income", _format_currency(totals.total_income))
    expense_col.metric("Expense", _format_currency(totals.total_expense))
    balance_col.metric("Balance", _format_currency(totals.net_balance))

    with st.form("add_finance_entry", clear_on_submit=True):
        entry_type = st.radio(
            "Type",
            options=[INCOME, EXPENSE],
            format_func=str.title,
            horizontal=True,
        )
        on_date = st.date_input("Date", value=date.today())
        amount = st.number_input("Amount", min_value=0.0, step=1.0)
        description = st.text_area("Description")
        if st.form_submit_button("Add entry"):
            RecordFinanceEntryUseCase(store).execute(
                amount,
                entry_type,
                description=description,
                on_date=on_date,
            )
            usage.info(f"{entry_type} entry added")
            st.rerun()

    entries = sort_finances_by_date(finances)
    if not entries:
        st.info("No entries yet.")
        return
    for entry in entries:
        _render_finance_row(store, entry)


def _render_finance_row(store: StateStore, entry: FinanceEntry) -> None:
    text_col, amount_col, action_col = st.columns([6, 2, 1])
    text_col.write(f"**{entry.description or entry.category}** · {entry.date}")
    sign = "+" if entry.type == INCOME else "-"
    amount_col.write(f"{sign}{_format_currency(entry.amount)}")
    if action_col.button("Delete", key=f"delete_{entry.id}"):
        store.delete_finance_entry(entry.id)
        get_usage_logger().info("finance entry deleted")
        st.rerun()


def _render_orders(store: StateStore) -> None:
    usage = get_usage_logger()
    state = store.state
    stats = compute_order_stats(state.orders)
    total_col, pending_col, process_col, done_col = st.columns(4)
    total_col.metric(
        "Total Orders",
        str(stats.total),
        help=f"Value: {_format_currency(stats.total_value)}",
    )
    pending_col.metric("Pending", str(stats.pending))
    process_col.metric("In Process", str(stats.in_process))
    done_col.metric("Completed", str(stats.completed))

    with st.expander("New order"):
        lookup = st.text_input(
            "Find customer",
            key="order_customer_lookup",
        )
        with st.form("add_order", clear_on_submit=True):
            linked = st.selectbox(
                "Link to customer",
                options=_order_customer_options(state.customers, lookup),
                format_func=lambda c: WALK_IN_OPTION if c is None else c.name,
            )
            name = st.text_input("Customer name (walk-in)")
            detail = st.text_area("Order detail")
            amount = st.number_input("Total amount", min_value=0.0, step=1.0)
            advance = st.number_input("Advance / Jama", min_value=0.0, step=1.0)
            status = st.selectbox(
                "Status",
                options=list(ORDER_STATUSES),
                format_func=STATUS_LABELS.get,
            )
            on_date = st.date_input("Date", value=date.today())
            if st.form_submit_button("Create order"):
                try:
                    CreateWorkOrderUseCase(store).execute(
                        linked.name if linked is not None else name,
                        amount,
                        detail=detail,
                        advance=advance,
                        customer_id=linked.id if linked is not None else "",
                        status=status,
                        on_date=on_date,
                    )
                except ValueError as exc:
                    st.error(str(exc))
                else:
                    usage.info("work order created")
                    st.rerun()

    if not state.orders:
        st.info("No active work orders.")
        return
    for order in state.orders:
        _render_order_card(store, order)


def _render_order_card(store: StateStore, order: WorkOrder) -> None:
    with st.container(border=True):
        st.markdown(f"**{order.customer_name}** · {order.date}")
        st.write(order.detail)
        amount_col, advance_col, remaining_col = st.columns(3)
        amount_col.metric("Total Amount", _format_currency(order.amount))
        advance_col.metric("Advance/Jama", _format_currency(order.advance))
        remaining_col.metric(
            "Remaining Udhaar",
            _format_currency(order.remaining),
        )
        status = st.selectbox(
            "Status",
            options=list(ORDER_STATUSES),
            index=list(ORDER_STATUSES).index(order.status),
            format_func=STATUS_LABELS.get,
            key=f"status_{order.id}",
        )
        if status != order.status:
            ChangeOrderStatusUseCase(store).execute(order.id, status)
            get_usage_logger().info(f"order status changed to {status}")
            st.rerun()


def _render_settings(context: AppContext) -> None:
    store = context.store
    settings = store.state.settings
    st.subheader("Shop Profile")
    with st.form("shop_profile"):
        shop_name = st.text_input("Shop name", value=settings.shop_name)
        owner_name = st.text_input("Owner name", value=settings.owner_name)
        contact = st.text_input(
            "Contact number",
            value=settings.contact_number,
        )
        address = st.text_input("Address", value=settings.address)
        if st.form_submit_button("Save Changes"):
            try:
                UpdateShopProfileUseCase(store).execute(
                    shop_name,
                    owner_name=owner_name,
                    contact_number=contact,
                    address=address,
                )
            except ValueError as exc:
                st.error(str(exc))
            else:
                st.success("Settings saved successfully!")

    st.subheader("Data Storage Location")
    st.caption(
        "Choose a folder to keep a readable copy of your data "
        f"({DATA_FILE_NAME})."
    )
    st.text_input(
        "Data folder",
        value=settings.data_folder_path,
        placeholder="No folder selected (Using internal storage)",
        key="data_folder_input",
    )
    folder_use_case = context.folder_use_case
    folder_col, clear_col = st.columns(2)
    if not folder_use_case.available:
        st.caption(
            "Folder selection is only available in the desktop version."
        )
    if folder_col.button(
        "Change Folder",
        disabled=not folder_use_case.available,
    ):
        try:
            path = folder_use_case.execute()
        except DesktopCapabilityUnavailable as exc:
            st.warning(str(exc))
        else:
            if path:
                st.success(f"Data will also be saved in {path}")
    if settings.data_folder_path and clear_col.button("Stop saving to folder"):
        store.update_settings(replace(settings, data_folder_path=""))
        st.rerun()

    st.subheader("Manual Backup & Restore")
    state = store.state
    st.download_button(
        "Download Backup (JSON)",
        data=dumps_state(state, pretty=True),
        file_name=backup_file_name(),
        mime="application/json",
    )
    uploaded = st.file_uploader("Restore from backup", type=["json"])
    if uploaded is not None and st.button("Restore"):
        ok, message = _handle_backup_upload(store, uploaded.getvalue())
        if ok:
            get_usage_logger().info("backup restored")
            st.success(message)
        else:
            st.error(message)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Vyapar Flow", layout="wide")
    context = _get_context()
    settings = context.store.state.settings
    st.title(settings.shop_name)
    st.caption(settings.owner_name)

    page = st.sidebar.radio("Page", PAGES)
    if page == "Dashboard":
        _render_dashboard(context.store)
    elif page == "Customers":
        _render_customers(context.store)
    elif page == "Finances":
        _render_finances(context.store)
    elif page == "Work Orders":
        _render_orders(context.store)
    else:
        _render_settings(context)


if __name__ == "__main__":  # pragma: no cover
    main()
