"""Error types shared by the pipeline stages."""


class FrontMatterError(ValueError):
    """Front matter is missing or not valid YAML."""


class EmbeddingFormatError(ValueError):
    """A stored embedding blob cannot be decoded."""


class EmbeddingDimensionError(ValueError):
    """Two embeddings being compared have different lengths."""


class EmptyComparisonError(ValueError):
    """An article reached the similarity engine with no embedded chunks."""


class ProviderError(RuntimeError):
    """An embedding or chat provider returned an error or an unusable response."""
