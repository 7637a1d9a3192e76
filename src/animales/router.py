"""
Client-side router: maps paths to views.

    /animales                -> list
    /animales/crear          -> create form
    /animales/editar/:id     -> edit form
    /animales/:id            -> detail
    anything else            -> redirect to /animales

Routes are matched in order, so `crear` and `editar/:id` win over `:id`.
"""
from __future__ import annotations
import sys
from typing import Dict, List, Optional, Tuple, Type

from .api import AnimalesAPI
from .utils import compile_route, normalize_path
from .views.base import LIST_PATH, Confirm, Notify, View, ViewContext
from .views.detalle import DetalleAnimal
from .views.formulario import CrearAnimal, EditarAnimal
from .views.listado import ListadoAnimales

ROUTES: List[Tuple[str, str, Type[View]]] = [
    ("listado", "/animales", ListadoAnimales),
    ("crear", "/animales/crear", CrearAnimal),
    ("editar", "/animales/editar/:id", EditarAnimal),
    ("detalle", "/animales/:id", DetalleAnimal),
]

class Router:

    def __init__(self, api: AnimalesAPI, confirm: Confirm, notify: Notify, *, message_ttl: float = 3.0):
        self.ctx = ViewContext(api, self.navigate, confirm, notify, message_ttl=message_ttl)
        self._routes = [(name, compile_route(pattern), view_cls) for name, pattern, view_cls in ROUTES]
        self.current: Optional[View] = None
        self.path = ""

    def resolve(self, path: Optional[str]) -> Tuple[str, Dict[str, str], str]:
        """(route name, params, canonical path); unknown paths resolve to the list."""
        path = normalize_path(path)
        for name, regex, _ in self._routes:
            m = regex.match(path)
            if m:
                return name, m.groupdict(), path
        return "listado", {}, LIST_PATH

    def view_class(self, name: str) -> Type[View]:
        for route_name, _, view_cls in self._routes:
            if route_name == name:
                return view_cls
        raise KeyError(name)

    async def navigate(self, path: Optional[str]) -> View:
        name, params, canonical = self.resolve(path)
        if canonical != normalize_path(path):
            print(f"[info] redirect {path!r} -> {canonical}", file=sys.stderr)

        if self.current is not None:
            self.current.deactivate()
        view = self.view_class(name)(self.ctx, params)
        self.current = view
        self.path = canonical
        await view.load()
        return view
