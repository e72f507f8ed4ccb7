"""Application context: the single owner of roster, session, chat and theme.

One AppContext is created per browser session and handed to every view, so
state changes go through these entry points rather than module globals.
"""
from __future__ import annotations
from typing import List, Optional

from domain.constants import DEMO_LOGIN_DELAY, LOGIN_DELAY
from domain.models import Account, ChatMessage
from services import preferences
from services import users as user_store
from services.chat import ChatService
from services.session import SessionManager
from utils.ids import create_id_with_prefix


def greeting_for(account: Account) -> str:
    return (f"Hi {account.first_name}! I'm LifeLink AI. "
            "Ask me about donation eligibility or health tips!")


class AppContext:
    def __init__(self, accounts: Optional[List[Account]] = None, chat: Optional[ChatService] = None,
                 theme: Optional[str] = None, system_theme: str = 'light',
                 login_delay: float = LOGIN_DELAY, demo_delay: float = DEMO_LOGIN_DELAY):
        self.accounts = accounts if accounts is not None else user_store.load()
        self.chat = chat or ChatService()
        self.theme = theme or preferences.load_theme(system_theme)
        self.transcript: List[ChatMessage] = []
        self.session = SessionManager(self.accounts, login_delay=login_delay,
                                      demo_delay=demo_delay, on_change=self.reset_chat)

    def reset_chat(self, account: Optional[Account] = None):
        """Drop the transcript; a signed-in account gets a fresh greeting."""
        self.chat.reset()
        self.transcript = []
        if account is not None:
            self.transcript.append(ChatMessage(
                id=create_id_with_prefix('m'), role='model', text=greeting_for(account)))

    async def ask(self, text: str) -> Optional[ChatMessage]:
        """Send a chat message; the reply is dropped if the session changed meanwhile."""
        text = (text or '').strip()
        if not text:
            return None
        started = self.session.generation
        self.transcript.append(ChatMessage(id=create_id_with_prefix('m'), role='user', text=text))
        reply_text = await self.chat.send_message(text)
        if self.session.generation != started:
            return None
        reply = ChatMessage(id=create_id_with_prefix('m'), role='model', text=reply_text)
        self.transcript.append(reply)
        return reply

    def set_theme(self, theme: str) -> str:
        preferences.save_theme(theme)
        self.theme = theme
        return theme

    def toggle_theme(self) -> str:
        return self.set_theme(preferences.toggle_theme(self.theme))
