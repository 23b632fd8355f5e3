"""Text normalization utilities for log-friendly previews of catalog strings."""


def truncate_removing_newlines(text: str, length: int) -> str:
    """
    Produce a single-line preview of text.

    Rules:
    - Newlines become single spaces
    - Text no longer than ``length`` is returned unchanged
    - Longer text is cut to ``length`` characters and suffixed with "..."

    Args:
        text: Original text.
        length: Maximum number of characters kept before the ellipsis.

    Returns:
        Preview string.
    """
    single_line = text.replace("\n", " ")
    if len(single_line) <= length:
        return text
    return single_line[:length] + "..."
