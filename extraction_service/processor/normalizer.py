import re

# unicode spaces and the byte order mark, \x1c-\x1f and \x85 are not whitespace here
_WHITESPACE_RUN = re.compile(r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+")
_NON_PRINTABLE_ASCII = re.compile(r"[^\x20-\x7E\n]")


def normalize_text(text: str) -> str:
    """Clean extracted text before validation.

    The steps run in a fixed order, each one assumes the previous ran:
    CRLF to LF, tabs to spaces, whitespace runs collapsed to one space,
    everything outside printable ASCII replaced by a space, then trimmed.
    The result is a single line, non-ASCII scripts do not survive.

    Args:
        text (str): raw text produced by an extraction strategy.

    Returns:
        str: normalized text.
    """
    text = text.replace("\r\n", "\n")
    text = text.replace("\t", " ")
    text = _WHITESPACE_RUN.sub(" ", text)
    text = _NON_PRINTABLE_ASCII.sub(" ", text)
    return text.strip()
