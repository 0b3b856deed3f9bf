"""Tab header rendering for the wizard navigation list."""

from __future__ import annotations

import typing as typ

from markupsafe import Markup

from .markup import add_css_class, merge_attributes, tag

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .markup import Attributes
    from .models import NavEntry


class NavRenderer(typ.Protocol):
    """Turn ordered nav entries into tab header markup."""

    def render(
        self, items: cabc.Sequence[NavEntry], options: Attributes
    ) -> Markup: ...


class BootstrapNav:
    """Render nav entries as a Bootstrap ``<ul class="nav">`` list.

    Each entry becomes ``<li>`` carrying the entry's ``options`` around an
    ``<a>`` pointing at the entry target. Labels on :class:`NavEntry` are
    already escaped and are inserted as is.
    """

    def __init__(self, *, tag_name: str = "ul") -> None:
        self.tag_name = tag_name

    def render(self, items: cabc.Sequence[NavEntry], options: Attributes) -> Markup:
        """Return the nav list markup for ``items``."""
        attributes = merge_attributes(options, None)
        add_css_class(attributes, "nav")
        rendered = [self._render_item(item) for item in items]
        return tag(self.tag_name, Markup("\n").join(rendered), attributes)

    @staticmethod
    def _render_item(item: NavEntry) -> Markup:
        link_options = merge_attributes(item.link_options, {"href": item.target})
        return tag("li", tag("a", item.label, link_options), item.options)


__all__ = ["BootstrapNav", "NavRenderer"]
