"""
Command-line entrypoint for the Animales client.

- Parses CLI args and config
- Initializes HttpClient, AnimalesAPI and the Router
- Renders the current view as text and reads one command per line:
    list    : ver N | editar N | borrar N | crear | recargar
    detail  : editar | borrar | volver
    forms   : <campo>=<valor> | guardar | cancelar
    anywhere: ir <ruta> | ayuda | salir

Input is read on a daemon thread, so transient messages keep
expiring while the prompt waits and KeyboardInterrupt exits at once.
"""
from __future__ import annotations
import asyncio, os, sys, threading
from typing import Optional

from http_client import HttpClient

from .api import AnimalesAPI
from .config import parse_args
from .router import Router
from .views.base import View
from .views.detalle import DetalleAnimal
from .views.formulario import FormularioAnimal
from .views.listado import ListadoAnimales

YES = {"s", "si", "sí", "y", "yes"}

HELP = {
    ListadoAnimales: "ver N | editar N | borrar N | crear | recargar | salir",
    DetalleAnimal: "editar | borrar | volver | salir",
    FormularioAnimal: "<campo>=<valor> | guardar | cancelar | salir",
}

class LineReader:
    """
    Reads stdin lines on daemon threads straight from the file descriptor.
    Nothing waits on a blocked read: a cancelled `ask` just drops its line,
    and interpreter exit does not join the thread or hold the stdin buffer lock.
    """

    def __init__(self, fd: Optional[int] = None):
        self.fd = fd
        self._pending = b""
        self._lock = threading.Lock()

    def readline(self) -> Optional[str]:
        """One line without the newline; None at EOF."""
        fd = sys.stdin.fileno() if self.fd is None else self.fd
        with self._lock:
            while b"\n" not in self._pending:
                chunk = os.read(fd, 1024)
                if not chunk:
                    break
                self._pending += chunk
            if not self._pending:
                return None
            line, _, self._pending = self._pending.partition(b"\n")
            return line.decode(errors="replace").rstrip("\r")

    async def ask(self, prompt: str) -> str:
        loop = asyncio.get_running_loop()
        fut = loop.create_future()

        def settle(line: Optional[str], exc: Optional[BaseException]) -> None:
            if fut.done():
                return
            if exc is not None:
                fut.set_exception(exc)
            elif line is None:
                fut.set_exception(EOFError())
            else:
                fut.set_result(line)

        def worker() -> None:
            line, exc = None, None
            try:
                line = self.readline()
            except OSError as e:
                exc = e
            try:
                loop.call_soon_threadsafe(settle, line, exc)
            except RuntimeError:
                pass  # loop already closed

        print(prompt, end="", flush=True)
        threading.Thread(target=worker, name="stdin-reader", daemon=True).start()
        return await fut

STDIN = LineReader()

async def ask(prompt: str) -> str:
    return await STDIN.ask(prompt)

async def confirm(message: str) -> bool:
    try:
        answer = await ask(f"{message} [s/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in YES

def notify(message: str) -> None:
    print(message)

def help_for(view: Optional[View]) -> str:
    for cls, text in HELP.items():
        if isinstance(view, cls):
            return text
    return "ir <ruta> | salir"

def render(view: Optional[View]) -> None:
    if view is None:
        return
    print("\n".join(view.lines()))
    print(f"({help_for(view)})")

def _card_index(view: ListadoAnimales, arg: str) -> Optional[int]:
    try:
        i = int(arg) - 1
    except ValueError:
        return None
    return i if 0 <= i < len(view.cards) else None

async def handle(router: Router, line: str) -> bool:
    """Run one command against the current view. Returns False to quit."""
    cmd, _, arg = line.strip().partition(" ")
    arg = arg.strip()
    view = router.current

    if cmd in ("salir", "exit", "quit"):
        return False
    if cmd == "":
        return True
    if cmd == "ayuda":
        print(help_for(view))
        return True
    if cmd == "ir":
        await router.navigate(arg)
        return True

    if isinstance(view, ListadoAnimales):
        if cmd == "crear":
            await view.ir_a_crear()
        elif cmd == "recargar":
            await view.load()
        elif cmd in ("ver", "editar", "borrar"):
            i = _card_index(view, arg)
            if i is None:
                print(f"Número inválido: {arg!r}")
                return True
            card = view.cards[i]
            await {"ver": card.view, "editar": card.edit, "borrar": card.delete}[cmd]()
        else:
            print(f"Comando desconocido: {cmd}")
    elif isinstance(view, DetalleAnimal):
        if cmd == "editar":
            await view.editar()
        elif cmd == "borrar":
            await view.eliminar()
        elif cmd == "volver":
            await view.volver()
        else:
            print(f"Comando desconocido: {cmd}")
    elif isinstance(view, FormularioAnimal):
        if "=" in line:
            campo, _, valor = line.partition("=")
            campo = campo.strip()
            if campo not in view.formulario:
                print(f"Campo desconocido: {campo}")
            else:
                view.set(campo, valor.strip())
        elif cmd == "guardar":
            await view.submit()
        elif cmd == "cancelar":
            await view.cancelar()
        else:
            print(f"Comando desconocido: {cmd}")
    return True

async def run(args):
    async with HttpClient(
        base_url=args.base_url,
        connect_timeout=args.connect_timeout,
        read_timeout=args.read_timeout,
    ) as http:
        api = AnimalesAPI(http, resource=args.resource)
        router = Router(api, confirm, notify, message_ttl=args.message_ttl)
        print(f"""
            ====== Animales ======
            Base URL       : {args.base_url}
            Resource       : {args.resource}
            Timeouts (s)   : connect={args.connect_timeout} read={args.read_timeout}
            ======================
        """)
        await router.navigate(args.path)
        while True:
            render(router.current)
            try:
                line = await ask("> ")
            except EOFError:
                break
            if not await handle(router, line):
                break

def main() -> None:
    args = parse_args()
    try:
        asyncio.run(run(args))
    except KeyboardInterrupt:
        print("Aborted.", file=sys.stderr)
