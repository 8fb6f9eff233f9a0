"""Allow-list HTML sanitizer for submitted page text."""

import re
from typing import Dict, FrozenSet
from urllib.parse import urlparse

from bs4 import BeautifulSoup
from bs4.element import PreformattedString


class HtmlSanitizer:
    """Strip markup outside a fixed allow-list.

    Elements in ``DROP_WITH_CONTENT`` are removed together with everything
    inside them. Any other element not in ``ALLOWED_TAGS`` is unwrapped, so
    its text survives without the tag. Attributes outside
    ``ALLOWED_ATTRIBUTES`` are removed, as are ``on*`` handlers and links with
    a scheme outside ``SAFE_URL_SCHEMES``.
    """

    ALLOWED_TAGS: FrozenSet[str] = frozenset({
        "p", "br",
        "b", "strong", "i", "em", "u", "s", "strike", "del",
        "h1", "h2", "h3",
        "ul", "ol", "li",
        "blockquote", "pre", "code",
        "a", "span",
    })

    # "*" applies to every allowed element
    ALLOWED_ATTRIBUTES: Dict[str, FrozenSet[str]] = {
        "*": frozenset({"style", "class"}),
        "a": frozenset({"href", "target"}),
    }

    DROP_WITH_CONTENT: FrozenSet[str] = frozenset({
        "script", "iframe", "object", "embed", "form", "input",
        "style", "textarea", "select", "button", "noscript", "template",
    })

    SAFE_URL_SCHEMES: FrozenSet[str] = frozenset({"http", "https", "mailto"})

    _URL_NOISE = re.compile(r"[\x00-\x20\x7f]+")
    _UNSAFE_STYLE = re.compile(r"expression\s*\(|javascript:|url\s*\(", re.IGNORECASE)

    def sanitize(self, html: str) -> str:
        """Return ``html`` with everything outside the allow-list removed.

        Args:
            html: Untrusted markup

        Returns:
            Sanitized markup
        """
        if not html:
            return ""

        soup = BeautifulSoup(html, "html.parser")

        # Comments, doctypes, CDATA and processing instructions
        for node in soup.find_all(string=lambda s: isinstance(s, PreformattedString)):
            node.extract()

        for tag in soup.find_all(list(self.DROP_WITH_CONTENT)):
            if tag.decomposed:
                continue
            tag.decompose()

        for tag in soup.find_all(True):
            if tag.name in self.ALLOWED_TAGS:
                self._clean_attributes(tag)
            else:
                tag.unwrap()

        return str(soup)

    def has_visible_text(self, html: str) -> bool:
        """True if ``html`` renders at least one non-whitespace character."""
        if not html:
            return False
        text = BeautifulSoup(html, "html.parser").get_text()
        return bool(text.strip())

    def _clean_attributes(self, tag) -> None:
        allowed = self.ALLOWED_ATTRIBUTES["*"] | self.ALLOWED_ATTRIBUTES.get(tag.name, frozenset())
        for name in list(tag.attrs):
            lowered = name.lower()
            if lowered.startswith("on") or lowered not in allowed:
                del tag.attrs[name]
            elif lowered == "href" and not self._is_safe_url(tag.attrs[name]):
                del tag.attrs[name]
            elif lowered == "style" and self._UNSAFE_STYLE.search(str(tag.attrs[name])):
                del tag.attrs[name]

    def _is_safe_url(self, value) -> bool:
        # Browsers ignore embedded whitespace and control characters in schemes
        cleaned = self._URL_NOISE.sub("", str(value))
        scheme = urlparse(cleaned).scheme.lower()
        return not scheme or scheme in self.SAFE_URL_SCHEMES
