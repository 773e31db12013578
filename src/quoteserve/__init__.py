"""quoteserve - quote-serving API with like-weighted recommendations."""

__version__ = "0.1.0"
