"""
TypedDict models for requests and responses to/from the Animales API.

Includes:
- AnimalFields: the four user-editable fields (form value, POST body)
- Animal: a record as returned by the API (id assigned server-side)
- FIELD_NAMES: wire names, in form order

"""

from __future__ import annotations
from typing import TypedDict, List

FIELD_NAMES = ("nombre", "especie", "habitat", "dieta")

# POST /animales (body)
class AnimalFields(TypedDict):
    nombre: str
    especie: str
    habitat: str
    dieta: str

# GET /animales/{id}, PUT /animales/{id}
class Animal(AnimalFields, total=False):
    id: str                  # absent until persisted

AnimalList = List[Animal]
