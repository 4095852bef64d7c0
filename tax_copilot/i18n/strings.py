"""
UI String Tables

English and Hindi text for every screen. Keys are shared between the
two tables; `get_text` falls back to English for any key a translation
is missing.
"""

from decimal import ROUND_HALF_UP, Decimal

from tax_copilot.models.transaction import Language


UI_TEXT: dict[Language, dict[str, str]] = {
    Language.ENGLISH: {
        # Header and sidebar
        "title": "Real-Time Tax Copilot",
        "subtitle": "For Micro-Businesses",
        "dashboard": "Dashboard",
        "add_transaction": "Add Transaction",
        "reminders": "Reminders",
        "tax_chat": "Tax Chat",
        "total_sales": "Total Sales",
        "est_gst_due": "Est. GST Due",
        "compliance": "Compliance",
        "export_csv": "Export CSV",
        "reset_demo": "Reset Data",
        "demo_hint": "Add sales → see live GST + reminders",
        "below_threshold": "Below threshold",
        "language_toggle": "हिंदी",
        "save_failed": "Could not save to local storage. Your changes are kept for this session only.",
        # Dashboard
        "total_income": "Total Income",
        "total_expenses": "Total Expenses",
        "gst_payable": "GST Payable",
        "next_due": "Next Due",
        "days_left": "days left",
        "income_vs_expense": "Income vs Expense Trend",
        "income": "Income",
        "expense": "Expense",
        # Transaction form
        "date": "Date",
        "type": "Type",
        "sale": "Sale",
        "amount": "Amount (₹)",
        "category": "Category",
        "goods": "Goods (18% GST)",
        "service": "Service (12% GST)",
        "gstin": "GSTIN (Optional)",
        "gstin_placeholder": "Enter GSTIN",
        "add_button": "Add Transaction",
        "recent_transactions": "Recent Transactions",
        "no_transactions": "No transactions yet. Add your first one!",
        "gst": "GST",
        "success": "Transaction added successfully!",
        "gst_calculated": "GST calculated",
        "invalid_amount": "Please enter a valid amount",
        "delete": "Delete",
        # Reminders
        "reminders_title": "Tax Reminders & Due Dates",
        "reminders_subtitle": "Stay compliant with upcoming deadlines",
        "due_today": "Due today!",
        "status_completed": "Filed",
        "status_upcoming": "Upcoming",
        "status_due": "Due Soon",
        "status_overdue": "Overdue!",
        "not_applicable": "Not applicable (below GST threshold)",
        "monthly": "Monthly",
        "annual": "Annual",
        "gstr1_description": "Monthly/Quarterly return for outward supplies",
        "gstr1_due": "10th of every month",
        "gstr3b_description": "Monthly summary return with tax payment",
        "gstr3b_due": "20th of every month",
        "gstr9_description": "Annual return for regular taxpayers",
        "gstr9_due": "31st December",
        "itr_description": "Income Tax Return filing",
        "itr_due": "31st July",
        # Chat
        "chat_title": "Tax Copilot Chat",
        "chat_subtitle": "Ask me anything about GST & taxes",
        "chat_placeholder": "Type your question...",
        "suggestion_1": "When to file GSTR-3B?",
        "suggestion_2": "What is GST threshold?",
        "suggestion_3": "GST rates for goods?",
    },
    Language.HINDI: {
        "title": "रियल-टाइम टैक्स कोपायलट",
        "subtitle": "सूक्ष्म व्यवसायों के लिए",
        "dashboard": "डैशबोर्ड",
        "add_transaction": "लेनदेन जोड़ें",
        "reminders": "अनुस्मारक",
        "tax_chat": "टैक्स चैट",
        "total_sales": "कुल बिक्री",
        "est_gst_due": "अनु. GST देय",
        "compliance": "अनुपालन",
        "export_csv": "CSV निर्यात",
        "reset_demo": "डेटा रीसेट",
        "demo_hint": "बिक्री जोड़ें → लाइव GST + अनुस्मारक देखें",
        "below_threshold": "सीमा से नीचे",
        "language_toggle": "EN",
        "total_income": "कुल आय",
        "total_expenses": "कुल खर्च",
        "gst_payable": "GST देय",
        "next_due": "अगली देय तिथि",
        "days_left": "दिन बाकी",
        "income_vs_expense": "आय बनाम खर्च रुझान",
        "income": "आय",
        "expense": "खर्च",
        "date": "तारीख",
        "type": "प्रकार",
        "sale": "बिक्री",
        "amount": "राशि (₹)",
        "category": "श्रेणी",
        "goods": "वस्तुएं (18% GST)",
        "service": "सेवा (12% GST)",
        "gstin": "GSTIN (वैकल्पिक)",
        "gstin_placeholder": "GSTIN दर्ज करें",
        "add_button": "लेनदेन जोड़ें",
        "recent_transactions": "हाल के लेनदेन",
        "no_transactions": "अभी तक कोई लेनदेन नहीं। पहला जोड़ें!",
        "gst": "GST",
        "success": "लेनदेन सफलतापूर्वक जोड़ा गया!",
        "gst_calculated": "GST गणना",
        "reminders_title": "कर अनुस्मारक और देय तिथियां",
        "reminders_subtitle": "आगामी समय सीमा के साथ अनुपालन करें",
        "due_today": "आज देय!",
        "status_completed": "दाखिल",
        "status_upcoming": "आगामी",
        "status_due": "जल्द देय",
        "status_overdue": "अतिदेय!",
        "not_applicable": "लागू नहीं (GST सीमा से नीचे)",
        "monthly": "मासिक",
        "annual": "वार्षिक",
        "chat_title": "टैक्स कोपायलट चैट",
        "chat_subtitle": "GST और करों के बारे में कुछ भी पूछें",
        "chat_placeholder": "अपना प्रश्न टाइप करें...",
        "suggestion_1": "GSTR-3B कब फाइल करें?",
        "suggestion_2": "GST सीमा क्या है?",
        "suggestion_3": "वस्तुओं पर GST दर?",
    },
}


def get_text(language: Language) -> dict[str, str]:
    """String table for a language, with English filling any gaps."""
    return {**UI_TEXT[Language.ENGLISH], **UI_TEXT[Language(language)]}


def toggle_language(language: Language) -> Language:
    """The other language; the header button flips between the two."""
    return Language.HINDI if Language(language) == Language.ENGLISH else Language.ENGLISH


def format_inr(amount: Decimal) -> str:
    """
    Format whole rupees with Indian digit grouping.

    2000000 -> ₹20,00,000. Paise are rounded away, matching the
    dashboard cards.
    """
    rupees = int(Decimal(amount).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    sign = "-" if rupees < 0 else ""
    digits = str(abs(rupees))

    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        digits = ",".join(groups + [tail])

    return f"{sign}₹{digits}"
