"""
AI model families exposed by the WorqHat API.
"""

from typing import TYPE_CHECKING

from .analysis import ImageAnalysis
from .content import ContentGeneration
from .datasets import Datasets
from .extraction import TextExtraction
from .images import ImageGeneration, ImageUpscale, ImageVariations
from .moderation import Moderation
from .search import Search

if TYPE_CHECKING:
    from ..client import WorqHatClient


class AI:
    """Groups every AI endpoint family behind one attribute of the client."""

    def __init__(self, client: "WorqHatClient"):
        self.content_generation = ContentGeneration(client)
        self.image_generation = ImageGeneration(client)
        self.image_variations = ImageVariations(client)
        self.upscale_image = ImageUpscale(client)
        self.moderation = Moderation(client)
        self.search = Search(client)
        self.analyse_images = ImageAnalysis(client)
        self.text_extraction = TextExtraction(client)
        self.datasets = Datasets(client)


__all__ = [
    "AI",
    "ContentGeneration",
    "Datasets",
    "ImageAnalysis",
    "ImageGeneration",
    "ImageUpscale",
    "ImageVariations",
    "Moderation",
    "Search",
    "TextExtraction",
]
