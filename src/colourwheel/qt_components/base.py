"""
Shared helpers for the PySide6 colour wheel components.

- pil_to_pixmap: PIL Image -> QPixmap (flattening alpha onto a background)
"""
from __future__ import annotations

from PIL import Image
from PySide6.QtGui import QImage, QPixmap


def pil_to_pixmap(pil_image, background=(255, 255, 255)):
    """
    Convert PIL Image to QPixmap efficiently.

    Args:
        pil_image: PIL Image
        background: RGB used under transparent pixels

    Returns:
        QPixmap
    """
    if pil_image is None:
        return QPixmap()

    # Convert to RGB if needed
    if pil_image.mode == 'RGBA':
        bg = Image.new('RGB', pil_image.size, background)
        bg.paste(pil_image, mask=pil_image.split()[3])
        pil_image = bg
    elif pil_image.mode != 'RGB':
        pil_image = pil_image.convert('RGB')

    data = pil_image.tobytes()
    qimage = QImage(
        data,
        pil_image.width,
        pil_image.height,
        pil_image.width * 3,
        QImage.Format.Format_RGB888
    )
    # QImage borrows ``data``; copy before it goes out of scope
    return QPixmap.fromImage(qimage.copy())

