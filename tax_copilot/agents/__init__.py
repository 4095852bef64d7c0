"""Chat agents package."""

from tax_copilot.agents.tax_chat import (
    ChatReply,
    ChatTopic,
    TaxChatAgent,
    match_topic,
)

__all__ = [
    "ChatReply",
    "ChatTopic",
    "TaxChatAgent",
    "match_topic",
]
