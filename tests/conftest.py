import asyncio
import itertools
import pytest

from http_client import RequestFailed
from animales.router import Router

class FakeAPI:
    """In-memory stand-in for AnimalesAPI; records every call."""
    def __init__(self, records=None, fail=()):
        self._ids = itertools.count(1)
        self.store = {}
        for r in records or []:
            self._put(dict(r))
        self.fail = set(fail)
        self.calls = []

    def _put(self, record):
        record.setdefault("id", str(next(self._ids)))
        self.store[record["id"]] = record
        return record

    async def _call(self, op, *args):
        self.calls.append((op, *args))
        await self._hold(op)
        if op in self.fail:
            raise RequestFailed("FAKE", f"/animales ({op})", status=500)

    async def _hold(self, op):
        pass

    def ops(self):
        return [c[0] for c in self.calls]

    async def list_all(self):
        await self._call("list_all")
        return [dict(r) for r in self.store.values()]

    async def get_by_id(self, animal_id):
        await self._call("get_by_id", animal_id)
        if animal_id not in self.store:
            raise RequestFailed("GET", f"/animales/{animal_id}", status=404)
        return dict(self.store[animal_id])

    async def create(self, animal):
        await self._call("create", dict(animal))
        return dict(self._put({k: v for k, v in animal.items() if k != "id"}))

    async def update(self, animal_id, animal):
        await self._call("update", animal_id, dict(animal))
        self.store[animal_id] = dict(animal)
        return dict(animal)

    async def delete_by_id(self, animal_id):
        await self._call("delete_by_id", animal_id)
        if animal_id not in self.store:
            raise RequestFailed("DELETE", f"/animales/{animal_id}", status=404)
        return self.store.pop(animal_id)

class GatedAPI(FakeAPI):
    """FakeAPI whose `gated` operations block until `gate` is set."""
    def __init__(self, records=None, fail=(), gated=()):
        super().__init__(records, fail)
        self.gated = set(gated)
        self.started = asyncio.Event()
        self.gate = asyncio.Event()

    async def _hold(self, op):
        if op in self.gated:
            self.started.set()
            await self.gate.wait()

class Prompts:
    """Scripted confirm() answers plus a log of notify() messages."""
    def __init__(self, answer=True):
        self.answer = answer
        self.asked = []
        self.notified = []

    async def confirm(self, message):
        self.asked.append(message)
        return self.answer

    def notify(self, message):
        self.notified.append(message)

LION = {"nombre": "Lion", "especie": "Panthera leo", "habitat": "Savanna", "dieta": "Carnivore"}
WOLF = {"nombre": "Wolf", "especie": "Canis lupus", "habitat": "Forest", "dieta": "Carnivore"}

@pytest.fixture
def prompts():
    return Prompts()

@pytest.fixture
def api():
    return FakeAPI([LION, WOLF])

@pytest.fixture
def router(api, prompts):
    return Router(api, prompts.confirm, prompts.notify, message_ttl=0.05)
