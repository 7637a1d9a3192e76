"""
Async API wrapper around the Animales REST resource.

Provides a typed interface for:
- Listing all animals (`list_all`)
- Fetching one animal (`get_by_id`)
- Creating, replacing and deleting animals (`create`, `update`, `delete_by_id`)

Every method issues exactly one request. Failures surface as `RequestFailed`,
including a success status whose body is not JSON.
"""
from __future__ import annotations
import sys
from typing import Any

import httpx

from http_client import HttpClient, RequestFailed

from .models import Animal, AnimalFields, AnimalList
from .utils import without_id

class AnimalesAPI:

    def __init__(self, http: HttpClient, resource: str = "/animales"):
        self.http = http
        self.resource = "/" + resource.strip("/")

    def _item(self, animal_id: str) -> str:
        return f"{self.resource}/{animal_id}"

    def _decode(self, resp: httpx.Response, method: str) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            url = str(resp.request.url)
            req_id = resp.request.headers.get("X-Request-Id", "")
            print(f"[req#{req_id}] [warn] non-JSON response for {method} {url}: {resp.text[:200]}", file=sys.stderr)
            raise RequestFailed(method, url, status=resp.status_code, req_id=req_id) from e

    async def list_all(self) -> AnimalList:
        resp = await self.http.request("GET", self.resource)
        return self._decode(resp, "GET")

    async def get_by_id(self, animal_id: str) -> Animal:
        path = self._item(animal_id)
        resp = await self.http.request("GET", path)
        return self._decode(resp, "GET")

    async def create(self, animal: AnimalFields) -> Animal:
        resp = await self.http.request("POST", self.resource, json=without_id(animal))
        return self._decode(resp, "POST")

    async def update(self, animal_id: str, animal: Animal) -> Animal:
        path = self._item(animal_id)
        resp = await self.http.request("PUT", path, json=animal)
        return self._decode(resp, "PUT")

    async def delete_by_id(self, animal_id: str) -> Animal:
        path = self._item(animal_id)
        resp = await self.http.request("DELETE", path)
        return self._decode(resp, "DELETE")
