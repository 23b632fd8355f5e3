"""Text processing helpers."""

from catalog_translator.services.text_processing.text_normalization import truncate_removing_newlines

__all__ = [
    "truncate_removing_newlines",
]
