"""llmstxt: concatenate a documentation tree into a single llms.txt file."""

__version__ = "0.1.0"
