"""GIF response models and body decoders."""

from __future__ import annotations

from pydantic import Field, ValidationError

from otakugifs.errors import OtakuGifsDecodeError
from otakugifs.models.base import OtakuModel


class GifResult(OtakuModel):
    url: str = Field(min_length=1)


class ReactionsResult(OtakuModel):
    """Reaction names as reported by the service, in server order.

    The list is authoritative and may differ from :class:`~otakugifs.models.enums.Reaction`.
    """

    reactions: list[str]


def decode_gif(body: bytes | str) -> GifResult:
    try:
        return GifResult.model_validate_json(body)
    except ValidationError as exc:
        raise OtakuGifsDecodeError("Failed to deserialize response") from exc


def decode_reactions(body: bytes | str) -> ReactionsResult:
    try:
        return ReactionsResult.model_validate_json(body)
    except ValidationError as exc:
        raise OtakuGifsDecodeError("Failed to deserialize reactions response") from exc
