"""Response charset detection and body decoding."""

DEFAULT_CHARSET = "utf-8"


def parse_charset(content_type: str | None) -> str | None:
    """
    Extract the charset parameter from a Content-Type header value.

    Spaces are removed before the header is split on ``;``; the first
    segment starting with ``charset=`` wins.

    Args:
        content_type: Raw Content-Type header value, or None

    Returns:
        The declared charset, or None when the header declares none
    """
    if content_type is None:
        return None

    for param in content_type.replace(" ", "").split(";"):
        if param.startswith("charset="):
            return param.split("=", 1)[1]
    return None


def decode_body(content: bytes | None, charset: str | None = None) -> str | None:
    """
    Decode a response body.

    The whole buffer is decoded at once, with ``charset`` when the server
    declared one and UTF-8 otherwise. Undecodable bytes are replaced.

    Args:
        content: Raw body bytes
        charset: Declared charset, if any

    Returns:
        The body text, or None when there is no body

    Raises:
        LookupError: If ``charset`` names an unknown codec
    """
    if not content:
        return None

    return content.decode(charset or DEFAULT_CHARSET, errors="replace")
