"""Print expert advisory client"""

from bindmaster.ai.print_expert import (
    ChatMessage,
    ExpertConversation,
    PrintExpert,
    strip_code_fences,
)

__all__ = ["ChatMessage", "ExpertConversation", "PrintExpert", "strip_code_fences"]
