from __future__ import annotations
from typing import Awaitable, Callable, List, Optional

from ..models import Animal

OnId = Callable[[str], Awaitable[None]]
OnDelete = Callable[[str, str], Awaitable[None]]

class AnimalCard:
    """
    Presentational unit for one record. Emits view/edit/delete intents
    upward; emits nothing for a record without an id (unsaved).
    """

    def __init__(
        self,
        animal: Animal,
        *,
        on_view: Optional[OnId] = None,
        on_edit: Optional[OnId] = None,
        on_delete: Optional[OnDelete] = None,
    ):
        self.animal = animal
        self.on_view = on_view
        self.on_edit = on_edit
        self.on_delete = on_delete

    @property
    def animal_id(self) -> str:
        return self.animal.get("id") or ""

    async def view(self) -> None:
        if self.animal_id and self.on_view is not None:
            await self.on_view(self.animal_id)

    async def edit(self) -> None:
        if self.animal_id and self.on_edit is not None:
            await self.on_edit(self.animal_id)

    async def delete(self) -> None:
        if self.animal_id and self.on_delete is not None:
            await self.on_delete(self.animal_id, self.animal.get("nombre", ""))

    def lines(self) -> List[str]:
        a = self.animal
        return [
            f"{a.get('nombre', '')} ({a.get('especie', '')})",
            f"  Hábitat: {a.get('habitat', '')}",
            f"  Dieta  : {a.get('dieta', '')}",
        ]
