"""doc2code - generate client SDKs from API documentation with hosted LLMs."""

__version__ = "0.1.0"
