"""Tests for article_store.codec module."""

import struct

import numpy as np
import pytest

from article_store.codec import HEADER, decode_embedding, encode_embedding
from common.errors import EmbeddingFormatError


class TestEncodeEmbedding:
    def test_header_carries_version_and_dimension(self) -> None:
        blob = encode_embedding([0.5, -1.0, 2.0])
        assert HEADER.unpack_from(blob) == (1, 3)
        assert len(blob) == HEADER.size + 3 * 8

    def test_values_little_endian_f64(self) -> None:
        blob = encode_embedding([1.5])
        assert struct.unpack("<d", blob[HEADER.size:]) == (1.5,)

    def test_empty_vector_rejected(self) -> None:
        with pytest.raises(EmbeddingFormatError):
            encode_embedding([])

    def test_matrix_rejected(self) -> None:
        with pytest.raises(EmbeddingFormatError):
            encode_embedding([[1.0, 2.0], [3.0, 4.0]])


class TestDecodeEmbedding:
    def test_decodes_encoded_vector(self) -> None:
        vector = np.array([0.1, 0.2, 0.3])
        np.testing.assert_array_equal(decode_embedding(encode_embedding(vector)), vector)

    def test_too_short_for_header(self) -> None:
        with pytest.raises(EmbeddingFormatError, match="too short"):
            decode_embedding(b"\x01\x00")

    def test_unknown_version(self) -> None:
        blob = struct.pack("<BI", 2, 1) + struct.pack("<d", 1.0)
        with pytest.raises(EmbeddingFormatError, match="version 2"):
            decode_embedding(blob)

    def test_partial_value(self) -> None:
        blob = encode_embedding([1.0, 2.0])[:-3]
        with pytest.raises(EmbeddingFormatError, match="not a multiple"):
            decode_embedding(blob)

    def test_dimension_mismatch(self) -> None:
        blob = struct.pack("<BI", 1, 3) + struct.pack("<2d", 1.0, 2.0)
        with pytest.raises(EmbeddingFormatError, match="says 3 values"):
            decode_embedding(blob)

    def test_decoded_array_is_writable(self) -> None:
        decoded = decode_embedding(encode_embedding([1.0, 2.0]))
        decoded[0] = 5.0
        assert decoded[0] == 5.0
