"""
List view: loads every animal, renders one card each and handles
delete-with-confirmation. Delete outcomes are shown as transient messages.
"""
from __future__ import annotations
import sys
from typing import List

from http_client import RequestFailed

from ..models import AnimalList
from .base import CREATE_PATH, TransientMessage, View, ViewContext, detail_path, edit_path
from .card import AnimalCard

LOAD_ERROR_MSG = "Error al cargar los animales. Intenta nuevamente."

class ListadoAnimales(View):

    title = "Listado de animales"

    def __init__(self, ctx: ViewContext, params=None):
        super().__init__(ctx, params)
        self.animales: AnimalList = []
        self.cards: List[AnimalCard] = []
        self.cargando = True
        self.failed = False
        self.mensaje_exito = TransientMessage(ctx.message_ttl)
        self.mensaje_error = TransientMessage(ctx.message_ttl)

    @property
    def state(self) -> str:
        if self.cargando:
            return "loading"
        return "failed" if self.failed else "loaded"

    async def load(self) -> None:
        self.cargando = True
        try:
            animales = await self.api.list_all()
        except RequestFailed as e:
            print(f"[error] loading animals failed: {e}", file=sys.stderr)
            if not self.active:
                return
            self.mensaje_error.persist(LOAD_ERROR_MSG)
            self.failed = True
            self.cargando = False
            return

        if not self.active:
            return
        if self.failed:
            self.mensaje_error.clear()
        self.failed = False
        self.animales = list(animales)
        self.cards = [
            AnimalCard(a, on_view=self.ver_detalle, on_edit=self.editar, on_delete=self.eliminar)
            for a in self.animales
        ]
        self.cargando = False
        print(f"[info] loaded {len(self.animales)} animal(s)", file=sys.stderr)

    async def ver_detalle(self, animal_id: str) -> None:
        await self.navigate(detail_path(animal_id))

    async def editar(self, animal_id: str) -> None:
        await self.navigate(edit_path(animal_id))

    async def ir_a_crear(self) -> None:
        await self.navigate(CREATE_PATH)

    async def eliminar(self, animal_id: str, nombre: str) -> bool:
        """Returns True when the record was deleted."""
        if not await self.ctx.confirm(f"¿Estás seguro de que quieres eliminar a {nombre}?"):
            return False
        if not self.active:
            return False

        try:
            deleted = await self.api.delete_by_id(animal_id)
        except RequestFailed as e:
            print(f"[error] deleting {animal_id} failed: {e}", file=sys.stderr)
            if self.active:
                self.mensaje_error.show(f"No se pudo eliminar a {nombre}. Intenta nuevamente.")
            return False

        print(f"[info] deleted animal {deleted.get('id', animal_id)}", file=sys.stderr)
        if not self.active:
            return True
        self.mensaje_exito.show(f"{nombre} ha sido eliminado correctamente")
        await self.load()
        return True

    def deactivate(self) -> None:
        super().deactivate()
        self.mensaje_exito.cancel()
        self.mensaje_error.cancel()

    def lines(self) -> List[str]:
        out = [f"=== {self.title} ==="]
        if self.mensaje_exito:
            out.append(f"✅ {self.mensaje_exito}")
        if self.mensaje_error:
            out.append(f"❌ {self.mensaje_error}")
        if self.cargando:
            out.append("Cargando…")
            return out
        if not self.cards and self.state == "loaded":
            out.append("No hay animales registrados.")
        for i, card in enumerate(self.cards, 1):
            first, *rest = card.lines()
            out.append(f"[{i}] {first}")
            out.extend(rest)
        return out
