from __future__ import annotations
import sys
from typing import List, Optional

from http_client import RequestFailed

from ..models import Animal
from .base import LIST_PATH, MISSING_ID_MSG, View, edit_path

LOAD_ERROR_MSG = "No se pudo cargar el animal. Verifica que el ID sea correcto."

class DetalleAnimal(View):
    """Shows one animal by id, with edit/delete/back actions."""

    title = "Detalle del animal"

    def __init__(self, ctx, params=None):
        super().__init__(ctx, params)
        self.animal: Optional[Animal] = None
        self.cargando = True
        self.mensaje_error = ""

    @property
    def state(self) -> str:
        if self.cargando:
            return "loading"
        return "loaded" if self.animal is not None else "failed"

    async def load(self) -> None:
        animal_id = self.params.get("id")
        if not animal_id:
            self.mensaje_error = MISSING_ID_MSG
            self.cargando = False
            return

        self.cargando = True
        try:
            animal = await self.api.get_by_id(animal_id)
        except RequestFailed as e:
            print(f"[error] loading animal {animal_id} failed: {e}", file=sys.stderr)
            if self.active:
                self.mensaje_error = LOAD_ERROR_MSG
                self.cargando = False
            return

        if not self.active:
            return
        self.animal = animal
        self.cargando = False

    async def editar(self) -> None:
        if self.animal and self.animal.get("id"):
            await self.navigate(edit_path(self.animal["id"]))

    async def eliminar(self) -> bool:
        if not self.animal:
            return False
        nombre = self.animal.get("nombre", "")
        confirmed = await self.ctx.confirm(f"¿Estás seguro de que quieres eliminar a {nombre}?")
        animal_id = self.animal.get("id")
        if not (confirmed and animal_id and self.active):
            return False

        try:
            await self.api.delete_by_id(animal_id)
        except RequestFailed as e:
            print(f"[error] deleting {animal_id} failed: {e}", file=sys.stderr)
            if self.active:
                self.mensaje_error = f"No se pudo eliminar a {nombre}. Intenta nuevamente."
            return False

        if self.active:
            self.ctx.notify(f"✅ {nombre} ha sido eliminado correctamente")
            await self.navigate(LIST_PATH)
        return True

    async def volver(self) -> None:
        await self.navigate(LIST_PATH)

    def lines(self) -> List[str]:
        out = [f"=== {self.title} ==="]
        if self.cargando:
            out.append("Cargando…")
            return out
        if self.mensaje_error:
            out.append(f"❌ {self.mensaje_error}")
        if self.animal is not None:
            a = self.animal
            out += [
                f"ID     : {a.get('id', '')}",
                f"Nombre : {a.get('nombre', '')}",
                f"Especie: {a.get('especie', '')}",
                f"Hábitat: {a.get('habitat', '')}",
                f"Dieta  : {a.get('dieta', '')}",
            ]
        return out
