"""
Chat collaborator backed by Google Gemini.

`send_message` never raises: any failure (no API key, SDK error, timeout,
empty or blocked reply) is logged and replaced by CHAT_FALLBACK so the chat
widget stays usable for the next message.
"""
import asyncio
import logging
import os
from typing import Optional

import google.generativeai as genai

from domain.constants import CHAT_FALLBACK, CHAT_SYSTEM_INSTRUCTION, CHAT_TIMEOUT, GEMINI_MODEL
from domain.errors import ChatCollaboratorFailure

logger = logging.getLogger(__name__)


class ChatService:
    def __init__(self, api_key: Optional[str] = None, model_name: str = GEMINI_MODEL,
                 timeout: float = CHAT_TIMEOUT):
        self.api_key = api_key
        self.model_name = model_name
        self.timeout = timeout
        self._initialized = False
        self._chat = None

    @property
    def is_configured(self) -> bool:
        return self._chat is not None

    def initialize_chat(self):
        """Open a chat session. Safe to call repeatedly; only the first call does work."""
        if self._initialized:
            return
        self._initialized = True
        api_key = self.api_key or os.getenv('GEMINI_API_KEY')
        if not api_key:
            logger.warning("GEMINI_API_KEY is not set; chat replies will use the fallback message")
            return
        try:
            genai.configure(api_key=api_key)
            model = genai.GenerativeModel(self.model_name, system_instruction=CHAT_SYSTEM_INSTRUCTION)
            self._chat = model.start_chat(history=[])
        except Exception as e:
            logger.warning("Gemini chat initialization failed: %s", e)
            self._chat = None

    def reset(self):
        """Forget the conversation; the next message opens a fresh chat session."""
        self._initialized = False
        self._chat = None

    async def _ask(self, text: str) -> str:
        self.initialize_chat()
        if self._chat is None:
            raise ChatCollaboratorFailure("chat is not configured")
        try:
            response = await asyncio.wait_for(self._chat.send_message_async(text), timeout=self.timeout)
            reply = (response.text or '').strip()
        except asyncio.TimeoutError as e:
            raise ChatCollaboratorFailure(f"no reply within {self.timeout}s") from e
        except Exception as e:
            raise ChatCollaboratorFailure(f"Gemini error: {e}") from e
        if not reply:
            raise ChatCollaboratorFailure("empty reply")
        return reply

    async def send_message(self, text: str) -> str:
        try:
            return await self._ask(text)
        except ChatCollaboratorFailure as e:
            logger.warning("Chat request failed: %s", e.message)
            return CHAT_FALLBACK
