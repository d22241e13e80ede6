# statictags/helpers.py
"""
HTML tag helpers for images, stylesheets, scripts and links.

In HTML, <img> and <link> have no end tag. In XHTML they must be closed with
"/>"; pick the behaviour with the ``xhtml`` flag (default False).
"""
import html
from typing import Any, Mapping, Optional, Sequence, Union

from statictags.core.cache_bust import AssetUrlBuilder
from statictags.core.paths import resolve_path
from statictags.core.settings import AssetSettings

Attributes = Mapping[str, Any]
Sources = Union[str, Sequence[str]]

STYLESHEET_DEFAULTS = {
    "type": "text/css",
    "charset": "utf-8",
    "media": "screen",
    "rel": "stylesheet",
}

JAVASCRIPT_DEFAULTS = {
    "type": "text/javascript",
    "charset": "utf-8",
}


def tag_options(attributes: Optional[Attributes]) -> str:
    """Render attributes as ' key="value" ...', sorted by key and HTML-escaped."""
    if not attributes:
        return ""
    pairs = [
        f'{key}="{html.escape(str(value))}"'
        for key, value in sorted(attributes.items(), key=lambda item: str(item[0]))
    ]
    return " " + " ".join(pairs)


def _as_list(sources: Sources) -> list:
    if isinstance(sources, str):
        return [sources]
    return list(sources)


class StaticAssetHelpers:
    def __init__(self, url_builder: AssetUrlBuilder, xhtml: bool = False) -> None:
        self.url_builder = url_builder
        self.xhtml = xhtml

    @classmethod
    def from_settings(cls, settings: AssetSettings, url_for_path=None) -> "StaticAssetHelpers":
        return cls(AssetUrlBuilder(settings, url_for_path), xhtml=settings.xhtml)

    # ------------------------------------------------------------------
    # Tag assembly
    # ------------------------------------------------------------------
    def tag(self, name: str, attributes: Optional[Attributes] = None, content: Optional[str] = None) -> str:
        """
        Build a single tag.

        Paired ("<a ...>content</a>") whenever content is given, even if it is
        empty; otherwise a void tag, closed with "/>" only in XHTML mode.
        """
        start_tag = f"<{name}{tag_options(attributes)}"
        if content is not None:
            return f"{start_tag}>{content}</{name}>"
        return f"{start_tag}{'/' if self.xhtml else ''}>"

    def source_url(self, source: str, folder: str, extension: Optional[str] = None) -> str:
        return self.url_builder.build_asset_url(resolve_path(source, folder, extension))

    # ------------------------------------------------------------------
    # Public helpers
    # ------------------------------------------------------------------
    def image_tag(self, source: str, options: Optional[Attributes] = None) -> str:
        """
        <img> for an asset under images/.

            image_tag("foo.png", {"alt": "Foo itself"})
            -> <img alt="Foo itself" src="/images/foo.png?1700000000">
        """
        attributes = dict(options or {})
        attributes["src"] = self.source_url(source, "images")
        return self.tag("img", attributes)

    def stylesheet_tag(self, source: str, options: Optional[Attributes] = None) -> str:
        attributes = dict(STYLESHEET_DEFAULTS)
        attributes["href"] = self.source_url(source, "stylesheets", "css")
        attributes.update(options or {})
        return self.tag("link", attributes)

    def stylesheet_link_tag(self, sources: Sources, options: Optional[Attributes] = None) -> str:
        """One <link rel="stylesheet"> per source, newline separated."""
        return "\n".join(self.stylesheet_tag(source, options) for source in _as_list(sources))

    def javascript_tag(self, source: str, options: Optional[Attributes] = None) -> str:
        attributes = dict(JAVASCRIPT_DEFAULTS)
        attributes["src"] = self.source_url(source, "javascripts", "js")
        attributes.update(options or {})
        return self.tag("script", attributes, content="")

    def javascript_script_tag(self, sources: Sources, options: Optional[Attributes] = None) -> str:
        """One <script src=...></script> per source, newline separated."""
        return "\n".join(self.javascript_tag(source, options) for source in _as_list(sources))

    javascript_include_tag = javascript_script_tag

    def link_to(self, description: str, url: str, options: Optional[Attributes] = None) -> str:
        """Anchor to a routed URL. Navigation targets are never cache-busted."""
        attributes = dict(options or {})
        attributes["href"] = self.url_builder.url_for_path(url)
        return self.tag("a", attributes, content=description)
