import logging
import time
from pathlib import Path
from typing import Callable, Optional

from fastapi import UploadFile

from pokedex.core.config import settings
from pokedex.core.errors import StorageError, ValidationFailed
from pokedex.utils.images import build_file_name, pick_extension

logger = logging.getLogger(__name__)


class ImageService:
    """
    Recepción de la imagen opcional de un Pokémon.
    Guarda el binario en el directorio público y devuelve la ruta relativa
    (p.ej. "public/images/pokemon/<hash>.png") usada como imagen_url.
    """

    def __init__(
        self,
        *,
        base_dir: Path = Path("."),
        upload_dir: str = settings.UPLOAD_DIR,
        max_mb: int = settings.MAX_UPLOAD_MB,
        clock_ns: Callable[[], int] = time.time_ns,
    ):
        self.base_dir = Path(base_dir)
        self.upload_dir = upload_dir.strip("/")
        self.max_mb = max_mb
        self.clock_ns = clock_ns

    async def store(self, file: Optional[UploadFile], *, nombre: str) -> Optional[str]:
        # Sin parte "imagen" o sin archivo seleccionado : nada que hacer
        if file is None or not file.filename:
            return None

        raw = await file.read()
        if len(raw) > self.max_mb * 1024 * 1024:
            raise ValidationFailed(
                f"Error de subida de archivo: el archivo supera el máximo de {self.max_mb} MB.",
                fields=["imagen"],
            )

        ext = pick_extension(file.filename, raw)
        name = build_file_name(raw, nombre=nombre, now_ns=self.clock_ns(), ext_with_dot=ext)

        target_dir = self.base_dir / self.upload_dir
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("No se pudo crear %s: %s", self.upload_dir, e)
            raise StorageError(f"Error al crear el directorio de imágenes: {self.upload_dir}")

        try:
            (target_dir / name).write_bytes(raw)
        except OSError as e:
            logger.error("No se pudo escribir %s/%s: %s", self.upload_dir, name, e)
            raise StorageError(
                f"Error al mover el archivo. Revise los permisos de la carpeta: {self.upload_dir}"
            )

        imagen_url = f"{self.upload_dir}/{name}"
        logger.info("Imagen guardada en %s (%d bytes)", imagen_url, len(raw))
        return imagen_url
