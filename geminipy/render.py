from collections.abc import Callable, Iterable

from .gemtext import (
    BlockQuote,
    Element,
    Heading,
    Link,
    Preformatted,
    Subheading,
    Subsubheading,
    Text,
    UnorderedList,
)


def _unordered_list(element: UnorderedList) -> str:
    items = "".join(f"<li>{item}</li>\n" for item in element.items)
    return f"<ul>\n{items}</ul>"


_RENDERERS: dict[type, Callable] = {
    Text: lambda e: f"<p>{e.text}</p>",
    Link: lambda e: f'<a href="{e.target}">{e.label}</a>',
    Heading: lambda e: f"<h1>{e.text}</h1>",
    Subheading: lambda e: f"<h2>{e.text}</h2>",
    Subsubheading: lambda e: f"<h3>{e.text}</h3>",
    UnorderedList: _unordered_list,
    BlockQuote: lambda e: f"<blockquote>{e.text}</blockquote>",
    Preformatted: lambda e: f"<pre>{e.text}</pre>",
}


def render_html(elements: Iterable[Element]) -> str:
    """
    Renders parsed gemtext as HTML, one block per element, each followed by a newline.

    Content is emitted as is without escaping; sanitize untrusted documents first.
    """
    return "".join(f"{_RENDERERS[type(element)](element)}\n" for element in elements)
