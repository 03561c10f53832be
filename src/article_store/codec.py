"""Binary encoding of embedding vectors stored in article_chunk.embed.

Layout (little-endian)::

    u8   format version (1)
    u32  dimension
    f64  value * dimension

The explicit dimension means a blob written by a different embedding model
is reported rather than silently compared.
"""

from __future__ import annotations

import struct
from typing import Sequence

import numpy as np

from common.errors import EmbeddingFormatError

FORMAT_VERSION = 1
HEADER = struct.Struct("<BI")
VALUE_DTYPE = np.dtype("<f8")


def encode_embedding(vector: Sequence[float] | np.ndarray) -> bytes:
    values = np.asarray(vector, dtype=VALUE_DTYPE)
    if values.ndim != 1 or values.size == 0:
        raise EmbeddingFormatError(f"Embedding must be a non-empty 1-d vector, got shape {values.shape}")
    return HEADER.pack(FORMAT_VERSION, values.size) + values.tobytes()


def decode_embedding(blob: bytes) -> np.ndarray:
    if len(blob) < HEADER.size:
        raise EmbeddingFormatError(f"Embedding blob too short for header: {len(blob)} bytes")

    version, dimension = HEADER.unpack_from(blob)
    if version != FORMAT_VERSION:
        raise EmbeddingFormatError(f"Unsupported embedding format version {version}")

    payload = blob[HEADER.size:]
    if len(payload) % VALUE_DTYPE.itemsize != 0:
        raise EmbeddingFormatError(
            f"Embedding payload of {len(payload)} bytes is not a multiple of {VALUE_DTYPE.itemsize}"
        )
    if len(payload) // VALUE_DTYPE.itemsize != dimension:
        raise EmbeddingFormatError(
            f"Embedding header says {dimension} values, payload holds {len(payload) // VALUE_DTYPE.itemsize}"
        )
    return np.frombuffer(payload, dtype=VALUE_DTYPE).astype(np.float64)
