"""
Coerción de los campos crudos (form-data, url-encoded o JSON) antes de
construir los comandos tipados.

Las funciones de validación de cada recurso devuelven el comando o un
`Invalid`; nunca lanzan excepciones ni cortan la petición.
"""

import math
import re
from dataclasses import dataclass, field
from typing import Any, List, Optional

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

# Columnas INTEGER de 32 bits con signo
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


@dataclass(frozen=True)
class Invalid:
    message: str
    fields: List[str] = field(default_factory=list)


def coerce_int(value: Any, default: int = 0) -> int:
    """
    Entero "tolerante" :
      None / ""      -> default
      "12", " 12 "   -> 12
      "12abc", "3.9" -> 12, 3   (se conserva el entero inicial)
      "abc"          -> 0
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    text = str(value)
    if not text.strip():
        return default
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def in_int_range(value: int) -> bool:
    return INT_MIN <= value <= INT_MAX


def clean_str(value: Any) -> str:
    """None -> "", cualquier otro valor -> str recortado."""
    if value is None:
        return ""
    return str(value).strip()


def optional_id(value: Any) -> Optional[int]:
    """Identificador positivo o None si falta o no cabe ("", "0", "abc", "99999999999")."""
    ident = coerce_int(value, default=0)
    return ident if 0 < ident <= INT_MAX else None
