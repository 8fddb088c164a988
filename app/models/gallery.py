from typing import List, Literal

from app.models.base import ViewModel


class GalleryImage(ViewModel):
    src: str
    alt: str
    orientation: Literal["horizontal", "vertical"]


class GalleryPage(ViewModel):
    path: str
    label: str
    title: str
    description: str
    images: List[GalleryImage]
