"""
Streamlit Frontend for Tax Copilot

This is the interface a shop owner uses to log sales and expenses and
keep an eye on their GST position.

DESIGN PRINCIPLES:
1. Every number on screen comes straight from the ledger engine
2. Live feedback: add a sale, see GST and reminders change
3. Clear error messages in simple language
4. English and Hindi everywhere

The UI never edits transactions itself; it only calls
add / delete / reset on the engine.
"""

from datetime import date

import streamlit as st

from tax_copilot.activity import configure_log_level
from tax_copilot.config import get_settings
from tax_copilot.i18n import format_inr, get_text
from tax_copilot.ledger import InvalidAmountError
from tax_copilot.models.transaction import Language, SupplyCategory, TransactionType
from tax_copilot.orchestrator import AppComponents, create_app_components
from tax_copilot.reminders import ReminderStatus, evaluate_reminders, next_due


# Page configuration
st.set_page_config(
    page_title="Tax Copilot",
    page_icon="🚀",
    layout="wide",
    initial_sidebar_state="expanded",
)

# Custom CSS for better UX
st.markdown("""
<style>
    .stButton>button {
        width: 100%;
        margin-top: 10px;
    }
    .muted-box {
        padding: 16px;
        background-color: #f1f3f5;
        border-radius: 10px;
        opacity: 0.6;
        margin: 8px 0;
    }
</style>
""", unsafe_allow_html=True)


STATUS_ICONS = {
    ReminderStatus.COMPLETED: "✅",
    ReminderStatus.UPCOMING: "🕒",
    ReminderStatus.DUE: "⚠️",
    ReminderStatus.OVERDUE: "🚨",
}


@st.cache_resource
def get_components() -> AppComponents:
    """Get or create application components (cached)."""
    configure_log_level(get_settings().app.log_level)
    return create_app_components(use_disk=True)


def main():
    """Main application entry point."""
    components = get_components()
    language = components.current_language()
    text = get_text(language)

    render_sidebar(components, text)

    st.title(f"🚀 {text['title']}")
    st.caption(text["subtitle"])

    if not components.ledger.last_save_ok:
        st.warning(text["save_failed"])

    dashboard_tab, add_tab, reminders_tab, chat_tab = st.tabs([
        f"📊 {text['dashboard']}",
        f"➕ {text['add_transaction']}",
        f"🔔 {text['reminders']}",
        f"💬 {text['tax_chat']}",
    ])

    with dashboard_tab:
        render_dashboard(components, text)
    with add_tab:
        render_transaction_page(components, text)
    with reminders_tab:
        render_reminders_page(components, text)
    with chat_tab:
        render_chat_page(components, language, text)


def render_sidebar(components: AppComponents, text: dict[str, str]):
    """Headline figures plus export, reset and language controls."""
    ledger = components.ledger
    summary = ledger.summary()

    st.sidebar.title(f"₹ {text['title']}")
    if st.sidebar.button(f"🌐 {text['language_toggle']}"):
        components.switch_language()
        st.rerun()

    st.sidebar.markdown("---")
    st.sidebar.metric(text["total_sales"], format_inr(summary.total_sales))
    st.sidebar.metric(
        text["est_gst_due"],
        format_inr(summary.tax_payable) if summary.requires_registration else text["below_threshold"],
    )
    score = ledger.compliance_score()
    st.sidebar.metric(text["compliance"], f"{score}%")
    st.sidebar.progress(score / 100)

    st.sidebar.markdown("---")
    filename, content = ledger.build_export(components.export_prefix)
    st.sidebar.download_button(
        f"⬇️ {text['export_csv']}",
        data=content,
        file_name=filename,
        mime="text/csv",
        on_click=ledger.record_export,
        args=(filename,),
    )
    if st.sidebar.button(f"🔄 {text['reset_demo']}"):
        ledger.reset()
        st.rerun()

    st.sidebar.info(f"💡 {text['demo_hint']}")


def render_dashboard(components: AppComponents, text: dict[str, str]):
    """Render the summary cards and the monthly trend chart."""
    ledger = components.ledger
    summary = ledger.summary()

    col1, col2, col3, col4 = st.columns(4)
    col1.metric(text["total_income"], format_inr(summary.net_income))
    col2.metric(text["total_expenses"], format_inr(summary.total_expenses))
    col3.metric(
        text["gst_payable"],
        format_inr(summary.tax_payable) if summary.requires_registration else text["below_threshold"],
    )

    upcoming = next_due(ledger.today(), summary.requires_registration)
    if upcoming:
        col4.metric(
            text["next_due"],
            upcoming.reminder.title,
            f"{upcoming.days_left} {text['days_left']}",
            delta_color="off",
        )
    else:
        col4.metric(text["next_due"], "—")

    st.subheader(text["income_vs_expense"])
    buckets = ledger.monthly_rollup()
    if buckets:
        st.bar_chart(
            {
                "month": [f"{b.key} {b.label}" for b in buckets],
                text["income"]: [float(b.income) for b in buckets],
                text["expense"]: [float(b.expense) for b in buckets],
            },
            x="month",
            stack=False,
        )


def render_transaction_page(components: AppComponents, text: dict[str, str]):
    """Render the add-transaction form and the transaction list."""
    ledger = components.ledger

    with st.form("add_transaction", clear_on_submit=True):
        col1, col2 = st.columns(2)
        with col1:
            txn_date = st.date_input(text["date"], value=ledger.today())
            kind = st.radio(
                text["type"],
                options=list(TransactionType),
                format_func=lambda k: text["sale"] if k == TransactionType.SALE else text["expense"],
                horizontal=True,
            )
            amount = st.number_input(text["amount"], min_value=0.0, step=100.0, format="%.2f")
        with col2:
            category = st.selectbox(
                text["category"],
                options=list(SupplyCategory),
                format_func=lambda c: text[c.value],
            )
            taxpayer_id = st.text_input(
                text["gstin"],
                placeholder=text["gstin_placeholder"],
                max_chars=15,
            )

        submitted = st.form_submit_button(f"➕ {text['add_button']}", type="primary")

    if submitted:
        try:
            transaction = ledger.add(
                date=txn_date or date.today(),
                kind=kind,
                amount=amount,
                category=category,
                taxpayer_id=taxpayer_id or None,
            )
        except InvalidAmountError:
            st.error(text["invalid_amount"])
        else:
            st.success(
                f"{text['success']} {text['gst_calculated']}: {format_inr(transaction.tax_amount)}"
            )

    st.subheader(text["recent_transactions"])
    transactions = ledger.transactions_by_date
    if not transactions:
        st.info(text["no_transactions"])
        return

    for transaction in transactions:
        col1, col2, col3 = st.columns([4, 2, 1])
        sign = "+" if transaction.is_sale else "-"
        with col1:
            label = text["sale"] if transaction.is_sale else text["expense"]
            st.markdown(
                f"**{label}** · {transaction.date.strftime('%d %b %Y')} · "
                f"{text[transaction.category.value]}"
                + (f" · `{transaction.taxpayer_id}`" if transaction.taxpayer_id else "")
            )
        with col2:
            st.markdown(
                f"{sign}{format_inr(transaction.amount)}  \n"
                f"{text['gst']}: {format_inr(transaction.tax_amount)}"
            )
        with col3:
            if st.button("🗑️", key=f"delete_{transaction.id}", help=text["delete"]):
                ledger.delete(transaction.id)
                st.rerun()


def render_reminders_page(components: AppComponents, text: dict[str, str]):
    """Render filing reminders with their current status."""
    ledger = components.ledger
    summary = ledger.summary()

    st.subheader(text["reminders_title"])
    st.caption(text["reminders_subtitle"])

    for view in evaluate_reminders(ledger.today(), summary.requires_registration):
        reminder = view.reminder

        if not view.applicable:
            st.markdown(f"""
            <div class="muted-box">
                <strong>{reminder.title}</strong><br/>
                {text['not_applicable']}
            </div>
            """, unsafe_allow_html=True)
            continue

        with st.container(border=True):
            col1, col2 = st.columns([4, 1])
            with col1:
                st.markdown(f"**{reminder.title}** · {text[reminder.frequency.value]}")
                st.caption(text[f"{reminder.id}_description"])
                st.caption(text[f"{reminder.id}_due"])
            with col2:
                st.markdown(f"{STATUS_ICONS[view.status]} {text['status_' + view.status.value]}")
                if view.status == ReminderStatus.UPCOMING and view.days_left > 0:
                    st.caption(f"{view.days_left} {text['days_left']}")
                elif view.status == ReminderStatus.DUE:
                    st.caption(text["due_today"])


def render_chat_page(components: AppComponents, language: Language, text: dict[str, str]):
    """Render the canned-response tax chat."""
    agent = components.chat_agent

    st.subheader(text["chat_title"])
    st.caption(text["chat_subtitle"])

    if "chat_messages" not in st.session_state:
        st.session_state.chat_messages = [
            {"role": "assistant", "content": agent.welcome(language).response}
        ]

    suggestion = None
    cols = st.columns(3)
    for i, col in enumerate(cols, start=1):
        if col.button(text[f"suggestion_{i}"], key=f"suggestion_{i}"):
            suggestion = text[f"suggestion_{i}"]

    question = st.chat_input(text["chat_placeholder"]) or suggestion
    if question:
        reply = agent.respond(question, language)
        st.session_state.chat_messages.append({"role": "user", "content": question})
        st.session_state.chat_messages.append({"role": "assistant", "content": reply.response})

    for message in st.session_state.chat_messages:
        with st.chat_message(message["role"]):
            st.markdown(message["content"])


if __name__ == "__main__":
    main()
