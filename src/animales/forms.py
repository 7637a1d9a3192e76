"""
Form state and field validation for the create/edit views.

A `Field` holds a value, its validators and a `touched` flag. Errors are
computed on demand, so they always reflect the current value. A field only
*shows* its error once it is both touched and invalid.
"""
from __future__ import annotations
import re
from typing import Any, Dict, List, Optional

from .models import FIELD_NAMES

REQUIRED_MSG = "Este campo es obligatorio"
INVALID_MSG = "Campo inválido"
SUBMIT_INVALID_MSG = "Por favor, completa todos los campos correctamente"
URL_PATTERN_MSG = "URL inválida (debe comenzar con http:// o https://)"

class Field:

    def __init__(
        self,
        name: str,
        value: Any = "",
        *,
        required: bool = False,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        min: Optional[float] = None,
        max: Optional[float] = None,
        pattern: Optional[str] = None,
    ):
        self.name = name
        self.value = value
        self.required = required
        self.min_length = min_length
        self.max_length = max_length
        self.min = min
        self.max = max
        self.pattern = re.compile(pattern) if pattern else None
        self.touched = False

    @property
    def errors(self) -> Dict[str, Dict[str, Any]]:
        """
        Failing validators keyed by kind, insertion-ordered like the checks.
        Empty values only fail `required`; the other checks skip them.
        """
        errs: Dict[str, Dict[str, Any]] = {}
        value = self.value
        empty = value is None or (isinstance(value, str) and value == "")

        if self.required and empty:
            errs["required"] = {}
        if empty:
            return errs

        text = str(value)
        if self.min_length is not None and len(text) < self.min_length:
            errs["minlength"] = {"required_length": self.min_length, "actual_length": len(text)}
        if self.max_length is not None and len(text) > self.max_length:
            errs["maxlength"] = {"required_length": self.max_length, "actual_length": len(text)}

        if self.min is not None or self.max is not None:
            try:
                number = float(value)
            except (TypeError, ValueError):
                number = None
            if number is not None and self.min is not None and number < self.min:
                errs["min"] = {"min": self.min, "actual": number}
            if number is not None and self.max is not None and number > self.max:
                errs["max"] = {"max": self.max, "actual": number}

        if self.pattern is not None and not self.pattern.fullmatch(text):
            errs["pattern"] = {"required_pattern": self.pattern.pattern, "actual_value": text}
        return errs

    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def invalid(self) -> bool:
        return not self.valid

    def set(self, value: Any) -> None:
        """User edit: updates the value and marks the field touched."""
        self.value = value
        self.touched = True

def error_message(errors: Dict[str, Dict[str, Any]], pattern_message: Optional[str] = None) -> str:
    """Resolve one user-facing message; first matching rule wins."""
    if not errors:
        return ""
    if "required" in errors:
        return REQUIRED_MSG
    if "minlength" in errors:
        return f"Mínimo {errors['minlength']['required_length']} caracteres"
    if "maxlength" in errors:
        return f"Máximo {errors['maxlength']['required_length']} caracteres"
    if "min" in errors:
        return f"El valor mínimo es {errors['min']['min']}"
    if "max" in errors:
        return f"El valor máximo es {errors['max']['max']}"
    if "pattern" in errors and pattern_message:
        return pattern_message
    return INVALID_MSG

class Form:

    def __init__(self, fields: List[Field], *, pattern_message: Optional[str] = None):
        self.fields: Dict[str, Field] = {f.name: f for f in fields}
        self.pattern_message = pattern_message

    def __getitem__(self, name: str) -> Field:
        return self.fields[name]

    def __contains__(self, name: str) -> bool:
        return name in self.fields

    @property
    def valid(self) -> bool:
        return all(f.valid for f in self.fields.values())

    @property
    def invalid(self) -> bool:
        return not self.valid

    @property
    def value(self) -> Dict[str, Any]:
        return {name: f.value for name, f in self.fields.items()}

    def patch(self, values: Dict[str, Any]) -> None:
        """Programmatic fill: known names only, touched state untouched."""
        for name, value in values.items():
            if name in self.fields:
                self.fields[name].value = value

    def set(self, name: str, value: Any) -> None:
        self.fields[name].set(value)

    def mark_all_touched(self) -> None:
        for f in self.fields.values():
            f.touched = True

    def field_invalid(self, name: str) -> bool:
        f = self.fields.get(name)
        return bool(f and f.invalid and f.touched)

    def error_message(self, name: str) -> str:
        f = self.fields.get(name)
        if f is None:
            return ""
        return error_message(f.errors, self.pattern_message)

def build_animal_form(pattern_message: Optional[str] = None) -> Form:
    nombre, especie, habitat, dieta = FIELD_NAMES
    return Form(
        [
            Field(nombre, required=True, min_length=2),
            Field(especie, required=True, min_length=3),
            Field(habitat, required=True),
            Field(dieta, required=True),
        ],
        pattern_message=pattern_message,
    )
