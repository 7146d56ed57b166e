"""Tests for SDK response models and decoders."""

import pytest
from pydantic import ValidationError

from otakugifs.errors import OtakuGifsDecodeError
from otakugifs.models.enums import ImageFormat, Reaction
from otakugifs.models.gifs import GifResult, ReactionsResult, decode_gif, decode_reactions


class TestEnums:
    def test_reaction_values_are_lowercase(self):
        for reaction in Reaction:
            assert reaction.value == reaction.name.lower()

    def test_format_values(self):
        assert [f.value for f in ImageFormat] == ["gif", "webp", "avif"]

    def test_lookup_by_value(self):
        assert Reaction("thumbsup") is Reaction.thumbsup
        assert ImageFormat("webp") is ImageFormat.webp


class TestGifModels:
    def test_gif_result(self):
        r = GifResult(url="https://cdn.example/gifs/kiss/abc.gif")
        assert r.url == "https://cdn.example/gifs/kiss/abc.gif"

    def test_gif_result_is_frozen(self):
        r = GifResult(url="https://cdn.example/a.gif")
        with pytest.raises(ValidationError):
            r.url = "https://cdn.example/b.gif"

    def test_field_names_case_insensitive(self):
        r = GifResult.model_validate({"URL": "https://cdn.example/a.gif"})
        assert r.url == "https://cdn.example/a.gif"
        rr = ReactionsResult.model_validate({"Reactions": ["kiss"]})
        assert rr.reactions == ["kiss"]


class TestDecodeGif:
    def test_decodes_url(self):
        r = decode_gif(b'{"url":"https://cdn.example/gifs/kiss/abc.gif"}')
        assert r.url == "https://cdn.example/gifs/kiss/abc.gif"

    def test_accepts_str(self):
        assert decode_gif('{"Url": "https://cdn.example/x.gif"}').url == "https://cdn.example/x.gif"

    def test_extra_fields_ignored(self):
        r = decode_gif(b'{"url": "https://cdn.example/x.gif", "format": "gif", "size": 12}')
        assert r.url == "https://cdn.example/x.gif"

    @pytest.mark.parametrize("body", [
        b"",
        b"not json",
        b"null",
        b"[]",
        b"{}",
        b'{"url": null}',
        b'{"url": ""}',
        b'{"link": "https://cdn.example/x.gif"}',
        b"\xff\xfe",
        b"[" * 200000 + b"]" * 200000,
    ])
    def test_bad_bodies(self, body):
        with pytest.raises(OtakuGifsDecodeError) as exc_info:
            decode_gif(body)
        assert str(exc_info.value) == "Failed to deserialize response"
        assert exc_info.value.__cause__ is not None


class TestDecodeReactions:
    def test_preserves_order(self):
        r = decode_reactions(b'{"reactions":["kiss","hug","pat"]}')
        assert r.reactions == ["kiss", "hug", "pat"]

    def test_unknown_names_kept(self):
        r = decode_reactions(b'{"reactions":["kiss","brandnew"]}')
        assert "brandnew" in r.reactions

    def test_empty_list_is_valid(self):
        assert decode_reactions(b'{"reactions": []}').reactions == []

    @pytest.mark.parametrize("body", [
        b"",
        b"null",
        b"{}",
        b'{"reactions": null}',
        b'{"reactions": "kiss"}',
        b'{"reactions": [1, 2]}',
        b'["kiss"]',
        b"{\"reactions\": " + b"[" * 200000 + b"]" * 200000 + b"}",
    ])
    def test_bad_bodies(self, body):
        with pytest.raises(OtakuGifsDecodeError) as exc_info:
            decode_reactions(body)
        assert str(exc_info.value) == "Failed to deserialize reactions response"
