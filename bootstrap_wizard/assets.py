"""Client-side asset bundles and plugin bootstrap for the wizard widget.

The wizard markup only works once jQuery, Bootstrap and the
``bootstrapWizard`` plugin are loaded and the plugin is attached to the
container. :class:`AssetCollector` records which bundles a render needs and
which plugin calls to emit, so a page template can place the ``<link>`` and
``<script>`` tags where they belong.

Examples
--------
>>> from bootstrap_wizard.assets import AssetCollector, WIZARD_ASSET
>>> collector = AssetCollector()
>>> collector.register(WIZARD_ASSET)
>>> [bundle.name for bundle in collector.bundles]
['jquery', 'bootstrap', 'bootstrap-wizard']
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import msgspec.json as msgspec_json
from markupsafe import Markup

from .markup import tag
from .models import ConfigurationError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

JSON_HTML_ESCAPES: dict[str, str] = {
    "<": "\\u003C",
    ">": "\\u003E",
    "&": "\\u0026",
    "'": "\\u0027",
}


@dc.dataclass(slots=True, frozen=True)
class AssetBundle:
    """A named group of stylesheets and scripts with bundle dependencies."""

    name: str
    base_url: str = ""
    js: tuple[str, ...] = ()
    css: tuple[str, ...] = ()
    depends: tuple[str, ...] = ()

    def js_urls(self) -> list[str]:
        """Return the absolute-ish script URLs of the bundle."""
        return [self._url(path) for path in self.js]

    def css_urls(self) -> list[str]:
        """Return the stylesheet URLs of the bundle."""
        return [self._url(path) for path in self.css]

    def _url(self, path: str) -> str:
        if not self.base_url or "://" in path or path.startswith("/"):
            return path
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"


JQUERY_ASSET = AssetBundle(name="jquery", base_url="assets/jquery", js=("jquery.js",))
BOOTSTRAP_ASSET = AssetBundle(
    name="bootstrap",
    base_url="assets/bootstrap",
    js=("js/bootstrap.js",),
    css=("css/bootstrap.css",),
    depends=("jquery",),
)
WIZARD_ASSET = AssetBundle(
    name="bootstrap-wizard",
    base_url="assets/bootstrap-wizard",
    js=("jquery.bootstrap.wizard.js",),
    depends=("bootstrap",),
)
DEFAULT_BUNDLES: dict[str, AssetBundle] = {
    bundle.name: bundle for bundle in (JQUERY_ASSET, BOOTSTRAP_ASSET, WIZARD_ASSET)
}


class AssetRegistrar(typ.Protocol):
    """Capability used by the widget to request client-side assets."""

    def register(self, bundle: AssetBundle) -> None: ...

    def register_plugin(
        self,
        name: str,
        element_id: str,
        client_options: cabc.Mapping[str, typ.Any] | None = None,
        client_events: cabc.Mapping[str, str] | None = None,
    ) -> None: ...


def html_encode_json(value: object) -> str:
    """Encode ``value`` as JSON that is safe to embed in an HTML page."""
    encoded = msgspec_json.encode(value).decode("utf-8")
    for char, replacement in JSON_HTML_ESCAPES.items():
        encoded = encoded.replace(char, replacement)
    return encoded


def plugin_script(
    name: str,
    element_id: str,
    client_options: cabc.Mapping[str, typ.Any] | None = None,
    client_events: cabc.Mapping[str, str] | None = None,
) -> list[str]:
    """Return the jQuery statements that attach plugin ``name`` to an element.

    Parameters
    ----------
    name : str
        jQuery plugin method, for example ``"bootstrapWizard"``.
    element_id : str
        DOM id of the element the plugin binds to.
    client_options : Mapping[str, Any], optional
        Options passed to the plugin; omitted from the call when empty.
    client_events : Mapping[str, str], optional
        Event names mapped to JavaScript handler expressions.

    Returns
    -------
    list[str]
        The plugin call followed by one ``.on(...)`` binding per event.
    """
    selector = f"jQuery('#{element_id}')"
    options = html_encode_json(dict(client_options)) if client_options else ""
    statements = [f"{selector}.{name}({options});"]
    statements.extend(
        f"{selector}.on('{event}', {handler});"
        for event, handler in (client_events or {}).items()
    )
    return statements


class AssetCollector:
    """Collect bundles and plugin bootstrap statements for one page."""

    def __init__(self, bundles: cabc.Mapping[str, AssetBundle] | None = None) -> None:
        """Initialize the collector with the bundles dependencies resolve to.

        Parameters
        ----------
        bundles : Mapping[str, AssetBundle], optional
            Known bundles keyed by name; defaults to :data:`DEFAULT_BUNDLES`.
            Pass a custom mapping to point the dependencies at a CDN.
        """
        self.known: dict[str, AssetBundle] = dict(
            DEFAULT_BUNDLES if bundles is None else bundles
        )
        self.bundles: list[AssetBundle] = []
        self.scripts: list[str] = []

    def register(self, bundle: AssetBundle) -> None:
        """Register ``bundle`` after its dependencies; repeats are ignored."""
        self._register(bundle, ())

    def _register(self, bundle: AssetBundle, chain: tuple[str, ...]) -> None:
        if any(existing.name == bundle.name for existing in self.bundles):
            return
        if bundle.name in chain:
            msg = f"Circular asset dependency: {' -> '.join((*chain, bundle.name))}"
            raise ConfigurationError(msg)
        for dependency in bundle.depends:
            try:
                resolved = self.known[dependency]
            except KeyError as exc:
                msg = f"Asset bundle '{bundle.name}' depends on unknown '{dependency}'."
                raise ConfigurationError(msg) from exc
            self._register(resolved, (*chain, bundle.name))
        self.bundles.append(bundle)

    def register_plugin(
        self,
        name: str,
        element_id: str,
        client_options: cabc.Mapping[str, typ.Any] | None = None,
        client_events: cabc.Mapping[str, str] | None = None,
    ) -> None:
        """Queue the statements that attach plugin ``name`` to ``element_id``."""
        self.scripts.extend(
            plugin_script(name, element_id, client_options, client_events)
        )

    def css_urls(self) -> list[str]:
        """Return stylesheet URLs in registration order."""
        return [url for bundle in self.bundles for url in bundle.css_urls()]

    def js_urls(self) -> list[str]:
        """Return script URLs in registration order."""
        return [url for bundle in self.bundles for url in bundle.js_urls()]

    def render_head(self) -> Markup:
        """Return ``<link>`` tags for the registered stylesheets."""
        return Markup("\n").join(
            tag("link", attributes={"href": url, "rel": "stylesheet"})
            for url in self.css_urls()
        )

    def render_body_end(self) -> Markup:
        """Return script tags followed by the queued plugin bootstrap block."""
        parts = [tag("script", "", {"src": url}) for url in self.js_urls()]
        if self.scripts:
            body = "\n".join(self.scripts)
            parts.append(tag("script", Markup(f"jQuery(function ($) {{\n{body}\n}});")))
        return Markup("\n").join(parts)


__all__ = [
    "BOOTSTRAP_ASSET",
    "DEFAULT_BUNDLES",
    "JQUERY_ASSET",
    "WIZARD_ASSET",
    "AssetBundle",
    "AssetCollector",
    "AssetRegistrar",
    "html_encode_json",
    "plugin_script",
]
