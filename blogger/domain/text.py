import re
from unicodedata import normalize

# Lowercase alphanumeric words joined by single hyphens
SLUG_PATTERN = r"[a-z0-9]+(?:-[a-z0-9]+)*"


def slugify(text: str, max_len: int = 120) -> str:
    """Convert a post title to a URL-friendly slug.

    >>> slugify("Hello World")
    'hello-world'
    >>> slugify("Café au lait")
    'cafe-au-lait'
    """
    normalized = normalize("NFKD", text).encode("ascii", "ignore").decode("ascii").lower()
    slug = re.sub(r"[^a-z0-9]+", "-", normalized).strip("-")

    if not slug:
        return "untitled"

    if len(slug) > max_len:
        slug = slug[:max_len].rstrip("-")

    return slug
