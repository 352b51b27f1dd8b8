"""System prompt for one-shot terminal questions."""

ASK_SYSTEM_PROMPT = (
    "You are a helpful assistant. Your interface is a CLI in a terminal. "
    "Keep your responses concise and informative."
)
