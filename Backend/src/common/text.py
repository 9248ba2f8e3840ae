import re
import unicodedata

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def generate_slug(title: str) -> str:
    """
    Slug URL a partir d'un titre.
    "Événement d'Été!" -> "evenement-d-ete"
    """
    if not title:
        return ""
    text = unicodedata.normalize("NFD", title.lower())
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    return _NON_ALNUM.sub("-", text).strip("-")
