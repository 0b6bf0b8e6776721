"""
Parsing of gemtext, the line oriented markup served with the `text/gemini` MIME type.

Every line is classified by its prefix, in this order: preformatting fence,
link, heading (longest marker first), list item, quote, plain text.

Parsing policy:

- Consecutive list item lines are grouped into a single UnorderedList.
- Links are stored target first; a link without a label uses its target as label.
- With STRIP_MARKER_WHITESPACE, whitespace between a heading, list, quote or
  fence marker and its text is removed. Trailing whitespace is always kept.
"""
from collections.abc import Iterator
from dataclasses import dataclass

from .errors import GemtextFormatError

STRIP_MARKER_WHITESPACE = True

FENCE_MARKER = "```"
LINK_MARKER = "=>"
LIST_MARKER = "*"
QUOTE_MARKER = ">"

# Unicode White_Space; str.isspace also counts the \x1c-\x1f separators.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000"
)


@dataclass(frozen=True)
class Text:
    text: str

@dataclass(frozen=True)
class Link:
    target: str
    label: str

@dataclass(frozen=True)
class Heading:
    text: str

@dataclass(frozen=True)
class Subheading:
    text: str

@dataclass(frozen=True)
class Subsubheading:
    text: str

@dataclass(frozen=True)
class UnorderedList:
    items: tuple[str, ...]

@dataclass(frozen=True)
class BlockQuote:
    text: str

@dataclass(frozen=True)
class Preformatted:
    """
    A fenced block. `text` holds the block's lines joined by newlines and `span`
    the (start, end) offsets of those lines in the parsed source, raw `\\r`s included.
    The alt text is kept even though the HTML renderer does not use it.
    """
    alt_text: str
    text: str
    span: tuple[int, int]


Element = Text | Link | Heading | Subheading | Subsubheading | UnorderedList | BlockQuote | Preformatted

_HEADING_MARKERS = (
    ("###", Subsubheading),
    ("##", Subheading),
    ("#", Heading),
)


def _lines(source: str) -> Iterator[tuple[int, int, str]]:
    """Yields (start, end, line) for each `\\n` delimited line, dropping a trailing `\\r`."""
    start = 0
    while start < len(source):
        end = source.find("\n", start)
        if end == -1:
            end = len(source)
        yield start, end, source[start:end].removesuffix("\r")
        start = end + 1


def _marker_text(line: str, marker: str) -> str:
    text = line[len(marker):]
    return text.lstrip(WHITESPACE) if STRIP_MARKER_WHITESPACE else text


def _parse_link(line: str) -> Link:
    text = line[len(LINK_MARKER):].lstrip(WHITESPACE)
    if not text:
        raise GemtextFormatError(
            f"Invalid link format, there must be something after =>. Line: {line.strip()}"
        )

    split_at = next((i for i, char in enumerate(text) if char in WHITESPACE), len(text))
    target, label = text[:split_at], text[split_at:].lstrip(WHITESPACE)
    return Link(target=target, label=label or target)


def _parse_line(line: str) -> Element:
    if line.startswith(LINK_MARKER):
        return _parse_link(line)

    for marker, heading in _HEADING_MARKERS:
        if line.startswith(marker):
            return heading(_marker_text(line, marker))

    if line.startswith(QUOTE_MARKER):
        return BlockQuote(_marker_text(line, QUOTE_MARKER))

    return Text(line)


def _read_preformatted(source: str, fence: str, fence_end: int, lines: Iterator[tuple[int, int, str]]) -> Preformatted:
    # The closing fence is consumed; an unclosed block runs to the end of the source.
    block: list[str] = []
    span_start = min(fence_end + 1, len(source))
    span_end = span_start

    for _start, end, line in lines:
        if line.startswith(FENCE_MARKER):
            break
        block.append(line)
        span_end = end

    return Preformatted(
        alt_text=_marker_text(fence, FENCE_MARKER),
        text="\n".join(block),
        span=(span_start, span_end),
    )


def parse_gemtext(source: str) -> tuple[Element, ...]:
    elements: list[Element] = []
    list_items: list[str] = []
    lines = _lines(source)

    for _start, end, line in lines:
        if line.startswith(LIST_MARKER):
            list_items.append(_marker_text(line, LIST_MARKER))
            continue

        if list_items:
            elements.append(UnorderedList(tuple(list_items)))
            list_items = []

        if line.startswith(FENCE_MARKER):
            elements.append(_read_preformatted(source, line, end, lines))
        else:
            elements.append(_parse_line(line))

    if list_items:
        elements.append(UnorderedList(tuple(list_items)))

    return tuple(elements)


@dataclass(frozen=True)
class Gemtext:
    elements: tuple[Element, ...]

    @classmethod
    def parse(cls, source: str) -> "Gemtext":
        return cls(parse_gemtext(source))

    def to_html(self) -> str:
        from .render import render_html

        return render_html(self.elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)
