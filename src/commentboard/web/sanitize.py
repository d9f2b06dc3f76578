"""Allow-list HTML sanitization for user supplied text.

Two policies are provided:

* :data:`STRICT` keeps no markup at all, for short labels like a name.
* :data:`PERMISSIVE` keeps a few inline tags and links, for comment bodies.
  Links always open in a new browsing context without an opener or a
  referrer.

Policies are callables returning :class:`~markupsafe.Markup`, safe to embed
in a page without further escaping. Applying a policy to its own output
doesn't change it.
"""
import re
from functools import partial
from typing import Any, Collection, Dict, Iterator, List, Mapping, Optional

from bleach.html5lib_shim import Filter
from bleach.sanitizer import Cleaner
from markupsafe import Markup

__all__ = ["SanitizationPolicy", "STRICT", "PERMISSIVE", "NON_TEXT_TAGS"]

#: elements removed together with their content: it is never meant to be
#: displayed as text.
NON_TEXT_TAGS = ("script", "style", "textarea", "option", "noscript")

#: an unterminated element runs to the end of input, like browsers do.
_NON_TEXT_RE = re.compile(
    r"<({tags})\b[^>]*>.*?(?:</\1\b[^>]*>|\Z)".format(tags="|".join(NON_TEXT_TAGS)),
    re.IGNORECASE | re.DOTALL,
)

LINK_PROTOCOLS = frozenset(["http", "https", "ftp", "mailto", "tel"])


def drop_non_text_elements(text: str) -> str:
    """Remove :data:`NON_TEXT_TAGS` elements, content included.

    Repeated until nothing matches, so that removing an element can't
    assemble a new one from the surrounding pieces.
    """
    while True:
        cleaned = _NON_TEXT_RE.sub("", text)
        if cleaned == text:
            return text
        text = cleaned


class ForceAttributesFilter(Filter):
    """html5lib filter that overwrites attributes on tags that survived
    sanitization.

    `forced` maps a tag name to ``{attribute: value}``. Values supplied in
    the input for these attributes are discarded.
    """

    def __init__(self, source: Any, forced: Mapping[str, Mapping[str, str]]):
        super().__init__(source)
        self.forced = forced

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        for token in super().__iter__():
            if token["type"] in ("StartTag", "EmptyTag"):
                forced = self.forced.get(token["name"])
                if forced:
                    token["data"] = self.force(token.get("data", {}), forced)
            yield token

    @staticmethod
    def force(attrs, forced):
        result = {key: value for key, value in attrs.items() if key[1] not in forced}
        for name, value in forced.items():
            result[(None, name)] = value
        return result


class SanitizationPolicy:
    """An allow-list of tags and attributes.

    :param tags: tag names kept in output. Other tags are stripped, their
        text content is kept.
    :param attributes: mapping of tag name to the attribute names it keeps.
    :param forced_attributes: mapping of tag name to ``{attribute: value}``,
        set on every such tag in output whatever the input said.
    :param protocols: URL schemes accepted in ``href``-like attributes.
    """

    def __init__(
        self,
        name: str,
        tags: Collection[str] = (),
        attributes: Optional[Mapping[str, List[str]]] = None,
        forced_attributes: Optional[Mapping[str, Mapping[str, str]]] = None,
        protocols: Collection[str] = LINK_PROTOCOLS,
    ) -> None:
        self.name = name
        self.tags = frozenset(tags)
        self.attributes = dict(attributes or {})
        self.forced_attributes = dict(forced_attributes or {})
        self.protocols = frozenset(protocols)

    def __repr__(self):
        return "<{} {!r} tags={}>".format(
            self.__class__.__name__, self.name, sorted(self.tags)
        )

    def cleaner(self) -> Cleaner:
        # Cleaner instances are not thread safe: build one per call.
        filters = []
        if self.forced_attributes:
            filters.append(
                partial(ForceAttributesFilter, forced=self.forced_attributes)
            )
        return Cleaner(
            tags=self.tags,
            attributes=self.attributes,
            protocols=self.protocols,
            strip=True,
            strip_comments=True,
            filters=filters,
        )

    def clean(self, text: Any) -> Markup:
        if text is None:
            return Markup("")
        # str() also turns Markup into a plain string: its methods escape
        # their arguments, which bleach doesn't expect.
        text = drop_non_text_elements(str(text))
        return Markup(self.cleaner().clean(text))

    __call__ = clean


#: no markup at all; used for author names.
STRICT = SanitizationPolicy("strict")

#: inline formatting and links; used for comment bodies.
PERMISSIVE = SanitizationPolicy(
    "permissive",
    tags=["b", "i", "em", "strong", "a"],
    attributes={"a": ["href", "rel", "target"]},
    forced_attributes={"a": {"rel": "noopener noreferrer", "target": "_blank"}},
)

