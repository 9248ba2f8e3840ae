"""
Filtre HTML par liste blanche pour le contenu riche (articles, pages).

- balises hors liste: retirees, leur texte est conserve
- script/style/noscript/template/object/embed: retires avec leur contenu
- <iframe>: conserve seulement si son hote est un domaine de confiance
- la sortie est toujours bien formee (balises ouvertes refermees)
"""
import html
import re
from html.parser import HTMLParser
from typing import Iterable, List, Optional, Tuple
from urllib.parse import urlparse

from django.conf import settings

ALLOWED_TAGS = {
    "p", "h1", "h2", "h3", "h4", "h5", "h6",
    "ul", "ol", "li", "strong", "em", "s", "a", "br",
    "span", "div", "blockquote", "img", "iframe",
    "audio", "source",
    "svg", "path", "polyline", "line",
}

# elements vides HTML: jamais de balise fermante, ne comptent pas dans la profondeur ignoree
VOID_TAGS = {
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
}

DROP_WITH_CONTENT = {"script", "style", "noscript", "template", "object", "embed"}

ALLOWED_ATTRS = {
    "href", "target", "rel", "src", "alt", "class", "style",
    "width", "height", "frameborder", "allow", "allowfullscreen",
    "scrolling", "sandbox", "data-align", "controls", "type", "title",
}

# HTMLParser met les noms en minuscules; on restaure la casse SVG
SVG_ATTRS = {
    "xmlns": "xmlns",
    "viewbox": "viewBox",
    "fill": "fill",
    "stroke": "stroke",
    "stroke-width": "stroke-width",
    "stroke-linecap": "stroke-linecap",
    "stroke-linejoin": "stroke-linejoin",
    "d": "d",
    "points": "points",
    "x1": "x1",
    "y1": "y1",
    "x2": "x2",
    "y2": "y2",
}

URL_ATTRS = {"href", "src", "data-src"}
SAFE_SCHEMES = {"http", "https", "mailto", "tel"}

_DATA_ATTR = re.compile(r"^data-[a-z0-9_.:-]+$")
_CONTROL_CHARS = re.compile(r"[\x00-\x20\x7f]+")


def is_safe_url(value: Optional[str]) -> bool:
    """http(s), mailto, tel ou relatif."""
    if value is None:
        return False
    cleaned = _CONTROL_CHARS.sub("", value)
    if not cleaned:
        return False
    scheme = urlparse(cleaned).scheme.lower()
    return scheme == "" or scheme in SAFE_SCHEMES


def is_trusted_iframe(src: Optional[str], domains: Iterable[str]) -> bool:
    if not is_safe_url(src):
        return False
    host = (urlparse(_CONTROL_CHARS.sub("", src)).hostname or "").lower()
    if not host:
        return False
    return any(host == d or host.endswith("." + d) for d in domains)


def _unsafe_style(value: str) -> bool:
    lowered = _CONTROL_CHARS.sub("", value).lower()
    return "expression(" in lowered or "javascript:" in lowered or "url(" in lowered


class _Sanitizer(HTMLParser):
    def __init__(self, trusted_domains: Iterable[str]):
        super().__init__(convert_charrefs=True)
        self._trusted = [d.lower() for d in trusted_domains]
        self._out: List[str] = []
        self._open: List[str] = []
        self._skip = 0

    # --- attributs ---
    def _clean_attrs(self, tag: str, attrs) -> List[Tuple[str, Optional[str]]]:
        kept: List[Tuple[str, Optional[str]]] = []
        for name, value in attrs:
            name = name.lower()
            if name in SVG_ATTRS:
                name = SVG_ATTRS[name]
            elif name not in ALLOWED_ATTRS and not _DATA_ATTR.match(name):
                continue
            if name in URL_ATTRS and not is_safe_url(value):
                continue
            if name == "style" and value and _unsafe_style(value):
                continue
            kept.append((name, value))

        if tag == "a" and dict(kept).get("target") == "_blank" and "rel" not in dict(kept):
            kept.append(("rel", "noopener noreferrer"))
        return kept

    def _emit_start(self, tag: str, attrs, self_closing: bool = False) -> None:
        parts = [tag]
        for name, value in self._clean_attrs(tag, attrs):
            if value is None:
                parts.append(name)
            else:
                parts.append(f'{name}="{html.escape(value, quote=True)}"')
        end = " />" if self_closing else ">"
        self._out.append("<" + " ".join(parts) + end)

    # --- evenements du parseur ---
    def handle_starttag(self, tag: str, attrs):
        tag = tag.lower()
        if self._skip:
            if tag not in VOID_TAGS:
                self._skip += 1
            return
        if tag in DROP_WITH_CONTENT or (tag == "iframe" and not is_trusted_iframe(dict(attrs).get("src"), self._trusted)):
            if tag not in VOID_TAGS:
                self._skip = 1
            return
        if tag not in ALLOWED_TAGS:
            return
        self._emit_start(tag, attrs)
        if tag not in VOID_TAGS:
            self._open.append(tag)

    def handle_startendtag(self, tag: str, attrs):
        tag = tag.lower()
        if self._skip or tag not in ALLOWED_TAGS:
            return
        if tag in VOID_TAGS:
            self._emit_start(tag, attrs)
        elif tag == "iframe":
            if is_trusted_iframe(dict(attrs).get("src"), self._trusted):
                self._emit_start(tag, attrs)
                self._out.append("</iframe>")
        else:
            # <path ... /> et autres formes SVG auto-fermantes
            self._emit_start(tag, attrs, self_closing=True)

    def handle_endtag(self, tag: str):
        tag = tag.lower()
        if self._skip:
            if tag not in VOID_TAGS:
                self._skip -= 1
            return
        if tag not in self._open:
            return
        while self._open:
            last = self._open.pop()
            self._out.append(f"</{last}>")
            if last == tag:
                break

    def handle_data(self, data: str):
        if self._skip:
            return
        self._out.append(html.escape(data, quote=False))

    def get_html(self) -> str:
        while self._open:
            self._out.append(f"</{self._open.pop()}>")
        return "".join(self._out)


def sanitize_html(value: Optional[str], trusted_domains: Optional[Iterable[str]] = None) -> str:
    if not value:
        return ""
    if trusted_domains is None:
        trusted_domains = getattr(settings, "EDITOR_TRUSTED_IFRAME_DOMAINS", [])
    parser = _Sanitizer(trusted_domains)
    parser.feed(value)
    parser.close()
    return parser.get_html()
