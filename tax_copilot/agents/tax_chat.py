"""
Tax Chat Agent

CRITICAL BOUNDARY: This is a lookup table, not a language model.
The agent:
- CAN: Match keywords in a question and return a prepared answer
- CANNOT: Understand free-form questions or read the user's ledger
- MUST: Fall back to a help message listing what it can answer

Rules are checked in order and the first match wins, so "gstr-3b late
fee" is answered as a GSTR-3B question, not a penalty question.
"""

import random
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from tax_copilot.models.transaction import Language


class ChatTopic(str, Enum):
    GSTR3B = "gstr3b"
    GSTR1 = "gstr1"
    GST_THRESHOLD = "gst_threshold"
    GST_RATE = "gst_rate"
    ITR = "itr"
    INPUT_TAX = "input_tax"
    PENALTY = "penalty"
    GREETING = "greeting"
    DEFAULT = "default"


class ChatReply(BaseModel):
    """Canned answer picked for a user message."""

    topic: ChatTopic
    response: str = Field(description="Answer text, may contain markdown")
    language: Language


# Substrings matched against the lower-cased message, in priority order
KEYWORD_RULES: tuple[tuple[ChatTopic, tuple[str, ...]], ...] = (
    (ChatTopic.GSTR3B, ("gstr3b", "gstr-3b", "3b")),
    (ChatTopic.GSTR1, ("gstr1", "gstr-1", "gstr 1")),
    (ChatTopic.GST_THRESHOLD, ("threshold", "limit", "registration", "सीमा", "पंजीकरण")),
    (ChatTopic.GST_RATE, ("rate", "percentage", "%", "दर")),
    (ChatTopic.ITR, ("itr", "income tax", "आयकर")),
    (ChatTopic.INPUT_TAX, ("input", "itc", "credit", "क्रेडिट")),
    (ChatTopic.PENALTY, ("penalty", "late", "fine", "जुर्माना", "देर")),
    (ChatTopic.GREETING, ("hi", "hello", "hey", "नमस्ते")),
)

GREETINGS: dict[Language, tuple[str, ...]] = {
    Language.ENGLISH: (
        "Hello! I'm your Tax Copilot. How can I help you today?",
        "Hi there! Ask me anything about GST, ITR, or tax compliance.",
    ),
    Language.HINDI: (
        "नमस्ते! मैं आपका Tax Copilot हूं। आज मैं आपकी कैसे मदद कर सकता हूं?",
        "नमस्कार! GST, ITR या कर अनुपालन के बारे में कुछ भी पूछें।",
    ),
}

RESPONSES: dict[Language, dict[ChatTopic, str]] = {
    Language.ENGLISH: {
        ChatTopic.GSTR3B: (
            "GSTR-3B must be filed by the **20th of every month**. It's a summary "
            "return where you declare your GST liability and pay tax."
        ),
        ChatTopic.GSTR1: (
            "GSTR-1 is due on the **10th of every month** (or quarterly for small "
            "businesses). It contains details of all outward supplies."
        ),
        ChatTopic.GST_THRESHOLD: (
            "GST registration is mandatory if your annual turnover exceeds "
            "**₹20 Lakhs** (₹10 Lakhs for special category states)."
        ),
        ChatTopic.GST_RATE: (
            "GST rates vary by category:\n"
            "• **5%** - Essential goods\n"
            "• **12%** - Standard services\n"
            "• **18%** - Most goods & services\n"
            "• **28%** - Luxury items"
        ),
        ChatTopic.ITR: (
            "ITR (Income Tax Return) deadline is **31st July** for individuals. "
            "Late filing attracts penalty up to ₹5,000."
        ),
        ChatTopic.INPUT_TAX: (
            "Input Tax Credit (ITC) allows you to deduct GST paid on purchases from "
            "GST collected on sales. This reduces your net tax liability."
        ),
        ChatTopic.PENALTY: (
            "Late GST filing attracts:\n"
            "• **Late fee**: ₹50/day (₹25 CGST + ₹25 SGST)\n"
            "• **Interest**: 18% per annum on tax due"
        ),
        ChatTopic.DEFAULT: (
            "I'm not sure about that. Try asking about:\n"
            "• GSTR-3B filing date\n"
            "• GST threshold\n"
            "• GST rates\n"
            "• ITR deadline\n"
            "• Input tax credit"
        ),
    },
    Language.HINDI: {
        ChatTopic.GSTR3B: (
            "GSTR-3B **हर महीने की 20 तारीख** तक दाखिल करना होता है। यह एक सारांश "
            "रिटर्न है जहां आप अपनी GST देनदारी घोषित करते हैं।"
        ),
        ChatTopic.GSTR1: (
            "GSTR-1 **हर महीने की 10 तारीख** को देय है। इसमें सभी आउटवर्ड सप्लाई "
            "का विवरण होता है।"
        ),
        ChatTopic.GST_THRESHOLD: (
            "GST पंजीकरण अनिवार्य है यदि वार्षिक टर्नओवर **₹20 लाख** से अधिक है "
            "(विशेष राज्यों के लिए ₹10 लाख)।"
        ),
        ChatTopic.GST_RATE: (
            "GST दरें श्रेणी के अनुसार:\n"
            "• **5%** - आवश्यक वस्तुएं\n"
            "• **12%** - मानक सेवाएं\n"
            "• **18%** - अधिकांश वस्तुएं\n"
            "• **28%** - लक्जरी आइटम"
        ),
        ChatTopic.ITR: (
            "ITR की समय सीमा व्यक्तियों के लिए **31 जुलाई** है। देर से फाइलिंग पर "
            "₹5,000 तक जुर्माना।"
        ),
        ChatTopic.INPUT_TAX: (
            "इनपुट टैक्स क्रेडिट (ITC) आपको खरीद पर भुगतान किए गए GST को बिक्री पर "
            "एकत्रित GST से घटाने की अनुमति देता है।"
        ),
        ChatTopic.PENALTY: (
            "देर से GST फाइलिंग पर:\n"
            "• **विलंब शुल्क**: ₹50/दिन\n"
            "• **ब्याज**: कर देय पर 18% वार्षिक"
        ),
        ChatTopic.DEFAULT: (
            "इस बारे में मुझे जानकारी नहीं है। पूछें:\n"
            "• GSTR-3B फाइलिंग तिथि\n"
            "• GST सीमा\n"
            "• GST दरें\n"
            "• ITR समय सीमा"
        ),
    },
}


def match_topic(message: str) -> ChatTopic:
    """First topic whose keywords appear in the message."""
    text = message.lower()
    for topic, keywords in KEYWORD_RULES:
        if any(keyword in text for keyword in keywords):
            return topic
    return ChatTopic.DEFAULT


class TaxChatAgent:
    """
    Canned-response agent for the Tax Chat tab.

    RESPONSIBILITIES:
    - Pick a prepared answer for a question
    - Answer in the user's chosen language

    BOUNDARIES:
    - NEVER looks at ledger data
    - NEVER generates text
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def welcome(self, language: Language) -> ChatReply:
        """Opening message shown before the user types anything."""
        language = Language(language)
        return ChatReply(
            topic=ChatTopic.GREETING,
            response=GREETINGS[language][0],
            language=language,
        )

    def respond(self, message: str, language: Language) -> ChatReply:
        """
        Answer a user message.

        Raises:
            ValueError: If the message is empty or only whitespace
        """
        if not message or not message.strip():
            raise ValueError("Message must not be empty")

        language = Language(language)
        topic = match_topic(message)

        if topic == ChatTopic.GREETING:
            response = self._rng.choice(GREETINGS[language])
        else:
            response = RESPONSES[language][topic]

        return ChatReply(topic=topic, response=response, language=language)
