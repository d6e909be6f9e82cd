"""Product image storage on the local filesystem"""

import logging
import os
import random
import re
import time
from pathlib import Path

from ...core.config import settings
from ...domain.value_objects.product_image import ProductImage

logger = logging.getLogger(__name__)


class StorageService:
    """Stores product images under ``UPLOAD_DIR/products``.

    Files are served statically from ``/uploads``, so the stored ``path`` is
    the public path (``uploads/products/<filename>``) rather than the disk
    location.
    """

    subdir = "products"

    def __init__(self, base_dir: str = None):
        self.base_dir = Path(base_dir or settings.UPLOAD_DIR)
        self.directory = self.base_dir / self.subdir
        self.directory.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def build_filename(original_name: str) -> str:
        """``<epoch ms>-<random>_<name><ext>``, unique without hashing content"""
        stem, ext = os.path.splitext(os.path.basename(original_name or "image"))
        stem = re.sub(r"\s+", "_", stem) or "image"
        unique_suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10 ** 9)}"
        return f"{unique_suffix}_{stem}{ext.lower()}"

    async def save_image(self, content: bytes, original_name: str, content_type: str) -> ProductImage:
        """Write an image and return its metadata"""
        filename = self.build_filename(original_name)
        (self.directory / filename).write_bytes(content)
        return ProductImage(
            filename=filename,
            path=f"uploads/{self.subdir}/{filename}",
            mimetype=content_type
        )

    async def delete_image(self, image: ProductImage) -> bool:
        """Best-effort removal: errors are logged, never raised"""
        try:
            (self.directory / os.path.basename(image.filename)).unlink()
            return True
        except OSError as e:
            logger.warning("Error deleting file %s: %s", image.filename, e)
            return False
