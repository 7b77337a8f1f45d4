"""
Sprite Slicer

Splits sprite sheets into individual sprites, either by a regular grid or by
detecting sprites from the alpha channel.

Public API:
    - detect_sprites: Automatic sprite detection and cropping
    - slice_spritesheet: Grid slicing by tile size or rows/columns
    - normalize: Suggest a common sprite size from detected sizes
    - ProcessedImage, DetectionResult, BoundingBox, SliceSpec: Result and request types
"""

from spriteslicer.api import detect_sprites, slice_spritesheet
from spriteslicer.dimensions import normalize
from spriteslicer.grid_slicing import SliceSpec
from spriteslicer.models import BoundingBox, DetectionResult, ProcessedImage

__version__ = "0.1.0"
__all__ = ["detect_sprites", "slice_spritesheet", "normalize", "SliceSpec",
           "BoundingBox", "DetectionResult", "ProcessedImage", "__version__"]
