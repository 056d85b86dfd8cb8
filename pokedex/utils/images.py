import hashlib
from pathlib import PurePath
from typing import Optional

import filetype


def pick_extension(filename: Optional[str], file_bytes: bytes) -> str:
    """
    Extensión (con punto, en minúsculas) para el archivo guardado.
    Prioridad : nombre original > tipo detectado por 'filetype' > ".bin".
    """
    suffix = PurePath(filename or "").suffix.lower()
    if suffix and len(suffix) > 1:
        return suffix
    kind = filetype.guess(file_bytes)
    return "." + (kind.extension if kind else "bin")


def build_file_name(file_bytes: bytes, *, nombre: str, now_ns: int, ext_with_dot: str) -> str:
    """
    Nombre derivado del contenido y de la hora : dos subidas nunca colisionan,
    incluso del mismo archivo.
    Ejemplo: "3f1c...9a.png"
    """
    digest = hashlib.sha256()
    digest.update(file_bytes)
    digest.update(str(now_ns).encode("ascii"))
    digest.update(nombre.encode("utf-8"))
    ext = ext_with_dot if ext_with_dot.startswith(".") else f".{ext_with_dot}"
    return f"{digest.hexdigest()[:32]}{ext}"
