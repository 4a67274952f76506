"""
Document model: parsed markup with stylesheet and computed-style access.

This is the only module that reads raw markup or CSS text. Rules work on the
`Document` it returns and never mutate it.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Set, Tuple

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.element import Tag
from soupsieve import SelectorSyntaxError

from .contrast import is_transparent, parse_color
from .errors import MarkupParseError
from .utils import attribute_value

logger = logging.getLogger(__name__)

PARSER = "lxml"

# Properties a child takes from its parent when it does not set them itself.
INHERITED_PROPERTIES = frozenset({"color", "font-size"})

# At-rules whose block holds ordinary style rules.
_GROUPING_AT_RULES = frozenset({"media", "supports", "layer", "document", "container"})

_COMMENT_PATTERN = re.compile(r"/\*.*?\*/", re.DOTALL)
_COLOR_TOKEN_PATTERN = re.compile(r"#[0-9a-fA-F]{3,8}\b|rgba?\([^)]*\)|\btransparent\b", re.IGNORECASE)
_ID_SELECTOR = re.compile(r"#[\w-]+")
_CLASS_ATTR_PSEUDO = re.compile(r"\.[\w-]+|\[[^\]]*\]|(?<!:):(?!not\(|is\(|where\()[\w-]+")
_TYPE_SELECTOR = re.compile(r"(?:^|[\s>+~(])([a-zA-Z][\w-]*)")
_PSEUDO_ELEMENT = re.compile(r"::|:(?:before|after|first-line|first-letter)\b", re.IGNORECASE)

Specificity = Tuple[int, int, int]


@dataclass
class StyleRule:
    """One style rule from a stylesheet."""
    selector_text: str
    declarations: Dict[str, str]
    sheet_index: int
    rule_index: int
    important: Set[str] = field(default_factory=set)

    def get(self, name: str) -> Optional[str]:
        return self.declarations.get(name.lower())

    @property
    def selectors(self) -> List[str]:
        """The comma-separated selectors of this rule."""
        return split_selector_list(self.selector_text)


@dataclass
class Stylesheet:
    """An embedded or linked stylesheet.

    Linked sheets are never fetched; they are kept with `available=False` so
    rules can tell that coverage is incomplete.
    """
    index: int
    rules: List[StyleRule] = field(default_factory=list)
    href: Optional[str] = None
    available: bool = True


class ComputedStyle:
    """Resolved style of one element, with an optional value per property."""

    def __init__(self, properties: Optional[Dict[str, str]] = None):
        self._properties = dict(properties or {})

    def get(self, name: str) -> Optional[str]:
        return self._properties.get(name.lower())

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._properties

    def as_dict(self) -> Dict[str, str]:
        return dict(self._properties)

    @property
    def color(self) -> Optional[str]:
        return self.get("color")

    @property
    def background_color(self) -> Optional[str]:
        return self.get("background-color")

    @property
    def font_size(self) -> Optional[str]:
        return self.get("font-size")

    @property
    def animation(self) -> Optional[str]:
        return self.get("animation") or self.get("animation-name")

    @property
    def outline(self) -> Optional[str]:
        return self.get("outline")

    @property
    def box_shadow(self) -> Optional[str]:
        return self.get("box-shadow")

    def __repr__(self) -> str:
        return f"ComputedStyle({self._properties!r})"


# --- CSS text ---


def split_selector_list(selector_text: str) -> List[str]:
    """Split `a, b:not(c, d)` on top-level commas only."""
    parts: List[str] = []
    depth = 0
    current = []
    for ch in selector_text:
        if ch in "([":
            depth += 1
        elif ch in ")]":
            depth = max(0, depth - 1)
        if ch == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
            continue
        current.append(ch)
    parts.append("".join(current).strip())
    return [p for p in parts if p]


def selector_specificity(selector: str) -> Specificity:
    """Approximate (ids, classes/attributes/pseudo-classes, types) count."""
    ids = len(_ID_SELECTOR.findall(selector))
    without_ids = _ID_SELECTOR.sub(" ", selector)
    classes = len(_CLASS_ATTR_PSEUDO.findall(without_ids))
    stripped = _CLASS_ATTR_PSEUDO.sub(" ", without_ids)
    types = len([t for t in _TYPE_SELECTOR.findall(stripped) if t.lower() not in ("not", "is", "where")])
    return ids, classes, types


def parse_declarations(text: str) -> Tuple[Dict[str, str], Set[str]]:
    """Parse `prop: value; ...` into an ordered dict and the set of !important names."""
    declarations: Dict[str, str] = {}
    important: Set[str] = set()
    for chunk in _COMMENT_PATTERN.sub("", text or "").split(";"):
        if ":" not in chunk:
            if chunk.strip():
                logger.debug("Skipping malformed declaration %r", chunk.strip())
            continue
        name, value = chunk.split(":", 1)
        name = name.strip().lower()
        value = " ".join(value.split())
        is_important = False
        if value.lower().endswith("!important"):
            value = value[: -len("!important")].strip()
            is_important = True
        if not name or not value:
            continue
        if name == "background":
            color = _COLOR_TOKEN_PATTERN.search(value)
            if color:
                _set_declaration(declarations, important, "background-color", color.group(0), is_important)
        _set_declaration(declarations, important, name, value, is_important)
    return declarations, important


def _set_declaration(declarations: Dict[str, str], important: Set[str], name: str, value: str, is_important: bool):
    # A later normal declaration does not override an earlier !important one.
    if name in important and not is_important:
        return
    declarations[name] = value
    if is_important:
        important.add(name)


def _iter_blocks(css: str) -> Iterator[Tuple[str, str]]:
    """Yield (prelude, body) for each top-level `prelude { body }` block.

    Statement at-rules (`@import ...;`) are skipped, as is an unterminated
    trailing block.
    """
    depth = 0
    start = 0
    prelude = ""
    body_start = 0
    for i, ch in enumerate(css):
        if ch == "{":
            if depth == 0:
                prelude = css[start:i]
                body_start = i + 1
            depth += 1
        elif ch == "}":
            if depth == 0:
                start = i + 1
                continue
            depth -= 1
            if depth == 0:
                yield prelude.strip(), css[body_start:i]
                start = i + 1
        elif ch == ";" and depth == 0:
            start = i + 1
    if depth:
        logger.debug("Dropping unterminated CSS block after %r", prelude.strip()[:60])


def parse_stylesheet(css: str, sheet_index: int = 0) -> List[StyleRule]:
    """Parse CSS text into flat style rules; nested @media blocks are flattened."""
    rules: List[StyleRule] = []

    def visit(text: str) -> None:
        for prelude, body in _iter_blocks(text):
            if prelude.startswith("@"):
                keyword = prelude[1:].split(None, 1)[0].lower() if len(prelude) > 1 else ""
                if keyword in _GROUPING_AT_RULES:
                    visit(body)
                continue
            if not prelude:
                continue
            declarations, important = parse_declarations(body)
            rules.append(StyleRule(
                selector_text=" ".join(prelude.split()),
                declarations=declarations,
                sheet_index=sheet_index,
                rule_index=len(rules),
                important=important,
            ))

    visit(_COMMENT_PATTERN.sub("", css or ""))
    return rules


# --- Document ---


class Document:
    """A parsed page: element tree, stylesheets and computed styles."""

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup
        self.stylesheets: List[Stylesheet] = self._collect_stylesheets()
        self._matches: Optional[Dict[int, List[Tuple[tuple, StyleRule]]]] = None
        self._style_cache: Dict[int, ComputedStyle] = {}

    # Tree access

    @property
    def root(self) -> Optional[Tag]:
        return self.soup.find("html")

    @property
    def head(self) -> Optional[Tag]:
        return self.soup.find("head")

    @property
    def body(self) -> Optional[Tag]:
        return self.soup.find("body")

    @property
    def title(self) -> Optional[Tag]:
        return self.soup.find("title")

    def elements(self) -> List[Tag]:
        """Every element in document order."""
        return self.soup.find_all(True)

    def find_all(self, *args, **kwargs) -> List[Tag]:
        return self.soup.find_all(*args, **kwargs)

    def select(self, css: str, scope: Optional[Tag] = None) -> List[Tag]:
        """Elements matching a CSS selector; an unsupported selector matches nothing."""
        try:
            return (self.soup if scope is None else scope).select(css)
        except (SelectorSyntaxError, NotImplementedError, ValueError) as exc:
            logger.debug("Selector %r not supported: %s", css, exc)
            return []

    def select_one(self, css: str, scope: Optional[Tag] = None) -> Optional[Tag]:
        found = self.select(css, scope)
        return found[0] if found else None

    def get_element_by_id(self, element_id: str) -> Optional[Tag]:
        if not element_id:
            return None
        return self.soup.find(True, attrs={"id": element_id})

    @staticmethod
    def has_attr(tag: Tag, name: str) -> bool:
        """Presence test; an empty attribute still counts as present."""
        return tag.has_attr(name)

    @staticmethod
    def attr(tag: Tag, name: str) -> Optional[str]:
        return attribute_value(tag, name)

    # Stylesheets

    def _collect_stylesheets(self) -> List[Stylesheet]:
        sheets: List[Stylesheet] = []
        for node in self.soup.find_all(["style", "link"]):
            if node.name == "style":
                css_type = (attribute_value(node, "type") or "text/css").strip().lower()
                if css_type != "text/css":
                    continue
                sheets.append(Stylesheet(
                    index=len(sheets),
                    rules=parse_stylesheet(node.get_text(), len(sheets)),
                ))
            else:
                rel = [r.lower() for r in (attribute_value(node, "rel") or "").split()]
                if "stylesheet" not in rel:
                    continue
                href = attribute_value(node, "href")
                logger.debug("Linked stylesheet %r is not fetched; treating as unavailable", href)
                sheets.append(Stylesheet(index=len(sheets), href=href, available=False))
        return sheets

    def style_rules(self) -> Iterator[StyleRule]:
        """All rules of all available stylesheets, in source order."""
        for sheet in self.stylesheets:
            if sheet.available:
                yield from sheet.rules

    # Computed style

    def _build_matches(self) -> Dict[int, List[Tuple[tuple, StyleRule]]]:
        """Map element identity -> [(cascade key, rule)] for every matching selector."""
        matches: Dict[int, List[Tuple[tuple, StyleRule]]] = {}
        order = 0
        for rule in self.style_rules():
            for selector in rule.selectors:
                order += 1
                if _PSEUDO_ELEMENT.search(selector):
                    continue
                specificity = selector_specificity(selector)
                for tag in self.select(selector):
                    matches.setdefault(id(tag), []).append(((specificity, order), rule))
        return matches

    def _cascade(self, tag: Tag) -> Dict[str, str]:
        """Declared values for one element, before inheritance."""
        if self._matches is None:
            self._matches = self._build_matches()

        # (important, inline, specificity, order) -> later entries win
        candidates: List[Tuple[tuple, str, str]] = []
        for (specificity, order), rule in self._matches.get(id(tag), []):
            for name, value in rule.declarations.items():
                candidates.append(((name in rule.important, 0, specificity, order), name, value))

        inline = attribute_value(tag, "style")
        if inline:
            declarations, important = parse_declarations(inline)
            for name, value in declarations.items():
                candidates.append(((name in important, 1, (0, 0, 0), 0), name, value))

        resolved: Dict[str, str] = {}
        for _, name, value in sorted(candidates, key=lambda c: c[0]):
            resolved[name] = value
        return resolved

    def computed_style(self, tag: Tag) -> ComputedStyle:
        """Resolved style for an element, including inherited properties.

        An element no stylesheet reaches simply gets an empty style.
        """
        cached = self._style_cache.get(id(tag))
        if cached is not None:
            return cached

        # Resolve the uncached ancestors top-down so deep trees need no recursion.
        chain = [tag]
        for ancestor in tag.parents:
            if ancestor is self.soup or id(ancestor) in self._style_cache:
                break
            chain.append(ancestor)
        for node in reversed(chain):
            self._style_cache[id(node)] = self._resolve_style(node)
        return self._style_cache[id(tag)]

    def _resolve_style(self, tag: Tag) -> ComputedStyle:
        """Style of one element whose parent style is already cached."""
        properties = self._cascade(tag)
        parent = tag.parent
        parent_style = None
        if isinstance(parent, Tag) and parent is not self.soup:
            parent_style = self._style_cache.get(id(parent))

        for name, value in list(properties.items()):
            if value.lower() == "inherit":
                inherited = parent_style.get(name) if parent_style is not None else None
                if inherited is None:
                    del properties[name]
                else:
                    properties[name] = inherited
        if parent_style is not None:
            for name in INHERITED_PROPERTIES:
                if name not in properties and parent_style.get(name) is not None:
                    properties[name] = parent_style.get(name)

        return ComputedStyle(properties)

    def effective_background(self, tag: Tag) -> Optional[str]:
        """First non-transparent background color on the element or an ancestor."""
        node: Optional[Tag] = tag
        while isinstance(node, Tag) and node is not self.soup:
            background = self.computed_style(node).background_color
            if background and not is_transparent(background):
                if parse_color(background) is None:
                    logger.debug("Unresolvable background %r on <%s>", background, node.name)
                return background
            node = node.parent
        return None


def parse(markup: str) -> Document:
    """Parse a markup string into a Document.

    Raises MarkupParseError when no element tree can be built at all.
    """
    if not isinstance(markup, str):
        raise MarkupParseError(f"Markup must be a string, got {type(markup).__name__}")
    if not markup.strip():
        raise MarkupParseError("Markup is empty")
    try:
        soup = BeautifulSoup(markup, PARSER)
    except (ParserRejectedMarkup, ValueError) as exc:
        raise MarkupParseError(f"Could not parse markup: {exc}") from exc
    if soup.find(True) is None:
        raise MarkupParseError("Markup contains no elements")
    return Document(soup)
