"""Slug generation utilities."""

from slugify import slugify


def create_slug(text: str) -> str:
    """
    Create a URL-friendly slug from text.

    Args:
        text: The text to convert to a slug

    Returns:
        A lowercase, hyphenated slug

    Examples:
        >>> create_slug("Acme Corporation")
        'acme-corporation'
        >>> create_slug("Offer Letter (signed).pdf")
        'offer-letter-signed-pdf'
    """
    return slugify(text, lowercase=True, separator="-")


def safe_filename(filename: str) -> str:
    """
    Slugify a filename while keeping its extension.

    Examples:
        >>> safe_filename("My Resume 2025.PDF")
        'my-resume-2025.pdf'
    """
    stem, dot, ext = filename.rpartition(".")
    if not dot or not stem:
        return create_slug(filename) or "document"
    return f"{create_slug(stem) or 'document'}.{create_slug(ext)}"
