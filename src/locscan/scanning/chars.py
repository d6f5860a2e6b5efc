"""Character classification shared by the trie, dialects and engine."""


def is_identifier_char(ch: str) -> bool:
    """True for characters that can be part of an identifier."""
    return ch == "_" or ch.isalnum()


def char_at(text: str, index: int) -> str:
    """text[index], or "" outside the text."""
    if 0 <= index < len(text):
        return text[index]
    return ""
