"""
Embedding-system exceptions to keep error handling consistent.
"""

class EmbeddingError(Exception):
    """Base embedding error."""
    pass

class DimensionMismatch(EmbeddingError, ValueError):
    """Raised when two vectors that must share a length do not."""
    pass

class InvalidArgument(EmbeddingError, ValueError):
    """Raised when an argument is outside what an operation accepts."""
    pass

class MalformedModel(EmbeddingError, ValueError):
    """Raised when an exported model blob cannot be parsed or fails validation."""
    pass

class EmbeddingDimensionWarning(UserWarning):
    """Issued when a caller asks for a dimension other than the configured one."""
    pass
