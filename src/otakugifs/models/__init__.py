"""SDK response models."""

from otakugifs.models.base import OtakuModel
from otakugifs.models.enums import ImageFormat, Reaction
from otakugifs.models.gifs import GifResult, ReactionsResult, decode_gif, decode_reactions

__all__ = [
    "OtakuModel",
    # enums
    "ImageFormat",
    "Reaction",
    # gifs
    "GifResult",
    "ReactionsResult",
    "decode_gif",
    "decode_reactions",
]
