"""
Percent encoding and path normalization for link URIs.
"""

from urllib.parse import quote, unquote_to_bytes

# Characters kept as-is besides ASCII alphanumerics ("-_.~" are always safe
# for urllib.parse.quote)
_COMPONENT_SAFE = "!*'()"
_PATHNAME_SAFE = "/!*'()"

_SCHEME_EXTRA_CHARS = "+-."


def encode_uri_component(s: str) -> str:
    """Percent-encode everything except ASCII alphanumerics and ``-_.!~*'()``."""
    return quote(s, safe=_COMPONENT_SAFE, errors="surrogatepass")


def encode_uri_pathname(s: str) -> str:
    """Like ``encode_uri_component``, but ``/`` is kept."""
    return quote(s, safe=_PATHNAME_SAFE, errors="surrogatepass")


def decode_uri_component(s: str) -> str:
    """
    Decode percent escapes.

    Malformed escapes are kept literally. If the decoded bytes are not
    valid UTF-8 the input is returned unchanged.
    """
    if "%" not in s:
        return s
    try:
        return unquote_to_bytes(s).decode("utf-8")
    except UnicodeError:
        return s


def clean_path(name: str) -> str:
    """
    Lexically normalize a ``/``-separated path.

    Empty and ``.`` segments are dropped and ``..`` removes the previous
    segment. A rooted path cannot go above the root; a relative path keeps
    its leading ``..`` segments.

    Args:
        name: Path to clean

    Returns:
        The cleaned path, ``/`` or ``.`` if nothing is left
    """
    rooted = name.startswith("/")
    parts = []
    dotdot_depth = 0

    for part in name.split("/"):
        if part == "" or part == ".":
            continue
        if part == "..":
            if len(parts) > dotdot_depth:
                parts.pop()
            elif not rooted:
                parts.append("..")
                dotdot_depth += 1
            continue
        parts.append(part)

    joined = "/".join(parts)
    if rooted:
        return "/" + joined
    return joined or "."


def decode_and_clean_path(s: str) -> str:
    """Percent-decode ``s`` and clean the result."""
    return clean_path(decode_uri_component(s))


def is_external_link(s: str) -> bool:
    """
    Check whether ``s`` starts with a URI scheme (``scheme:``).

    The scheme must be at least 3 characters, start with an ASCII letter and
    continue with ASCII letters, digits or ``+ - .``. Single-letter schemes
    are rejected so Windows drive letters are treated as paths.
    """
    scheme, sep, _ = s.partition(":")
    if not sep or len(scheme) < 3:
        return False
    if not (scheme[0].isascii() and scheme[0].isalpha()):
        return False
    return all(ch.isascii() and (ch.isalnum() or ch in _SCHEME_EXTRA_CHARS) for ch in scheme[1:])


def is_pdf_path(s: str) -> bool:
    """Check whether ``s`` names a PDF file (``.pdf``, any case)."""
    return len(s) >= 4 and s[-4:].lower() == ".pdf"
