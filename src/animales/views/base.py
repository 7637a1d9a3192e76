"""
Shared plumbing for the views.

- ViewContext: what every view is given (gateway, navigation, confirm/notify hooks)
- TransientMessage: a message that clears itself after a fixed window
- View: base class with the `active` guard used after every awaited request
"""
from __future__ import annotations
import asyncio
from typing import Any, Awaitable, Callable, Dict, List, Optional

from ..api import AnimalesAPI

LIST_PATH = "/animales"
CREATE_PATH = "/animales/crear"
MISSING_ID_MSG = "No se proporcionó un ID válido"

Confirm = Callable[[str], Awaitable[bool]]
Notify = Callable[[str], None]
Navigate = Callable[[str], Awaitable[Any]]

def detail_path(animal_id: str) -> str:
    return f"{LIST_PATH}/{animal_id}"

def edit_path(animal_id: str) -> str:
    return f"{LIST_PATH}/editar/{animal_id}"

class ViewContext:

    def __init__(
        self,
        api: AnimalesAPI,
        navigate: Navigate,
        confirm: Confirm,
        notify: Notify,
        *,
        message_ttl: float = 3.0,
    ):
        self.api = api
        self.navigate = navigate
        self.confirm = confirm
        self.notify = notify
        self.message_ttl = message_ttl

class TransientMessage:
    """
    Text that clears itself `ttl` seconds after `show()`.
    Each show/persist/clear bumps a generation; a timer only clears the
    generation it was scheduled for, so it never wipes a newer message.
    """

    def __init__(self, ttl: float):
        self.ttl = ttl
        self.text = ""
        self._generation = 0
        self._handle: Optional[asyncio.TimerHandle] = None

    def __bool__(self) -> bool:
        return bool(self.text)

    def __str__(self) -> str:
        return self.text

    def _bump(self, text: str) -> int:
        self.cancel()
        self._generation += 1
        self.text = text
        return self._generation

    def show(self, text: str) -> None:
        generation = self._bump(text)
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.ttl, self._expire, generation)

    def persist(self, text: str) -> None:
        """Set without a timer (stays until replaced or cleared)."""
        self._bump(text)

    def clear(self) -> None:
        self._bump("")

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _expire(self, generation: int) -> None:
        if generation != self._generation:
            return
        self.text = ""
        self._handle = None

class View:
    """
    A view owns its display state exclusively. The router flips `active` off
    when it navigates away; continuations of requests issued earlier check it
    before touching state.
    """

    title = ""

    def __init__(self, ctx: ViewContext, params: Optional[Dict[str, str]] = None):
        self.ctx = ctx
        self.params = params or {}
        self.active = True

    @property
    def api(self) -> AnimalesAPI:
        return self.ctx.api

    async def load(self) -> None:
        pass

    def deactivate(self) -> None:
        self.active = False

    async def navigate(self, path: str) -> None:
        await self.ctx.navigate(path)

    def lines(self) -> List[str]:
        return [self.title]
