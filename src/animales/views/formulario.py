"""
Create and edit form views.

Both share the same four validated fields and the same submit contract:
- invalid form: mark every field touched, show a generic message, no request
- valid form: set `enviando` before the request, clear the error, send once
- success: notify and go back to the list
- failure: re-enable submission, show a generic message, keep the form as is
"""
from __future__ import annotations
import sys
from typing import Any, Dict, List

from http_client import RequestFailed

from ..forms import SUBMIT_INVALID_MSG, URL_PATTERN_MSG, Form, build_animal_form
from ..models import Animal
from ..utils import pick_fields, with_id
from .base import LIST_PATH, MISSING_ID_MSG, View, ViewContext

LABELS = {"nombre": "Nombre", "especie": "Especie", "habitat": "Hábitat", "dieta": "Dieta"}

class FormularioAnimal(View):

    cancel_prompt = "¿Estás seguro de cancelar?"
    success_msg = ""
    failure_msg = ""

    def __init__(self, ctx: ViewContext, params=None, form: Form | None = None):
        super().__init__(ctx, params)
        self.formulario = form if form is not None else build_animal_form()
        self.enviando = False
        self.cargando = False
        self.mensaje_error = ""

    def set(self, campo: str, valor: Any) -> None:
        self.formulario.set(campo, valor)

    def campo_no_valido(self, campo: str) -> bool:
        return self.formulario.field_invalid(campo)

    def mensaje_campo(self, campo: str) -> str:
        return self.formulario.error_message(campo)

    async def _send(self, values: Dict[str, Any]) -> Animal:
        """Send the form values and return the saved record. Subclasses must override."""
        raise NotImplementedError

    def _can_submit(self) -> bool:
        return True

    async def submit(self) -> bool:
        """Returns True when the record was saved."""
        if self.enviando or not self._can_submit():
            return False
        if self.formulario.invalid:
            self.mensaje_error = SUBMIT_INVALID_MSG
            self.formulario.mark_all_touched()
            return False

        self.enviando = True
        self.mensaje_error = ""
        try:
            saved = await self._send(dict(self.formulario.value))
        except RequestFailed as e:
            print(f"[error] {type(self).__name__} submit failed: {e}", file=sys.stderr)
            if self.active:
                self.mensaje_error = self.failure_msg
                self.enviando = False
            return False

        print(f"[info] saved animal {saved.get('id', '?')}", file=sys.stderr)
        if self.active:
            self.ctx.notify(self.success_msg)
            await self.navigate(LIST_PATH)
        return True

    async def cancelar(self) -> bool:
        if await self.ctx.confirm(self.cancel_prompt):
            if self.active:
                await self.navigate(LIST_PATH)
            return True
        return False

    def lines(self) -> List[str]:
        out = [f"=== {self.title} ==="]
        if self.cargando:
            out.append("Cargando…")
            return out
        for campo, field in self.formulario.fields.items():
            out.append(f"{LABELS.get(campo, campo):8}: {field.value}")
            if self.campo_no_valido(campo):
                out.append(f"          ⚠ {self.mensaje_campo(campo)}")
        if self.enviando:
            out.append("Enviando…")
        if self.mensaje_error:
            out.append(f"❌ {self.mensaje_error}")
        return out

class CrearAnimal(FormularioAnimal):

    title = "Nuevo animal"
    cancel_prompt = "¿Estás seguro de cancelar? Los datos no se guardarán."
    success_msg = "✅ Animal creado correctamente"
    failure_msg = "Error al crear el animal. Intenta nuevamente."

    async def _send(self, values: Dict[str, Any]) -> Animal:
        return await self.api.create(values)

class EditarAnimal(FormularioAnimal):

    title = "Editar animal"
    cancel_prompt = "¿Estás seguro de cancelar? Los cambios no se guardarán."
    success_msg = "✅ Animal actualizado correctamente"
    failure_msg = "Error al actualizar el animal. Intenta nuevamente."
    load_error_msg = "No se pudo cargar el animal. Verifica que existe."

    def __init__(self, ctx: ViewContext, params=None):
        super().__init__(ctx, params, build_animal_form(pattern_message=URL_PATTERN_MSG))
        self.animal_id = self.params.get("id") or ""
        self.cargando = True

    async def load(self) -> None:
        if not self.animal_id:
            self.mensaje_error = MISSING_ID_MSG
            self.cargando = False
            return

        self.cargando = True
        try:
            animal = await self.api.get_by_id(self.animal_id)
        except RequestFailed as e:
            print(f"[error] loading animal {self.animal_id} for edit failed: {e}", file=sys.stderr)
            if self.active:
                self.mensaje_error = self.load_error_msg
                self.cargando = False
            return

        if not self.active:
            return
        self.formulario.patch(pick_fields(animal))
        self.cargando = False

    def _can_submit(self) -> bool:
        return bool(self.animal_id)

    async def _send(self, values: Dict[str, Any]) -> Animal:
        return await self.api.update(self.animal_id, with_id(self.animal_id, values))
