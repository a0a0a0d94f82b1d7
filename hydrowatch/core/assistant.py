"""Chat assistant prompts and offline fallback replies."""

import re
from typing import List

SYSTEM_PROMPT = """You are a helpful assistant for DWLR (Department of Water Level Resources) in India.
Your expertise includes water levels, seasonal patterns, safety measures, and water resource management.
Be concise, accurate, and focus on providing practical information.
If you don't know something, say so."""

GREETING = (
    "Hi! I'm your water level assistant. Ask me about water levels, seasonal trends, "
    "or safety precautions for any location in India."
)

FALLBACK_RESPONSES = {
    "hello": "Hello! I'm your water level assistant. It seems I'm having trouble connecting to the AI service. Please try again in a moment.",
    "hi": "Hi there! I'm experiencing some technical difficulties. I'll be back to help you with water level information across India shortly.",
    "water levels": "I'm currently unable to fetch real-time water level data. Please check back soon or visit the official DWLR dashboard for the latest information.",
    "default": "I apologize, but I'm currently experiencing technical difficulties. Please try your query again in a few moments or check back later.",
}


def fallback_reply(prompt: str) -> str:
    """Keyword-matched reply used when the assistant is unreachable."""
    lower = prompt.lower()
    for key, reply in FALLBACK_RESPONSES.items():
        if key != "default" and re.search(rf"\b{re.escape(key)}\b", lower):
            return reply
    return FALLBACK_RESPONSES["default"]


def build_messages(history: List[dict], system_prompt: str = SYSTEM_PROMPT) -> List[dict]:
    """System prompt followed by the transcript (any earlier system turns dropped)."""
    turns = [{"role": m["role"], "content": m["content"]} for m in history if m.get("role") != "system"]
    return [{"role": "system", "content": system_prompt}, *turns]
