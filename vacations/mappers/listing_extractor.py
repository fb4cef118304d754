"""Extract listing cards from an Airbnb search results page.

Airbnb's markup is not a stable contract, so every field is read through a
chain of strategies: structural ``data-testid`` selectors first, then textual
fallbacks (currency symbol, star glyph). A strategy returns ``None`` when it
finds nothing usable and the next one is tried.
"""

import re
from collections.abc import Callable, Sequence
from urllib.parse import urljoin, urlsplit, urlunsplit

from bs4 import BeautifulSoup, Tag

from vacations.schemas.search import Listing

BASE_URL = "https://www.airbnb.com"

LISTING_ANCHOR_SELECTOR = 'a[href*="/rooms/"]'
TITLE_SELECTOR = '[data-testid="listing-card-title"]'
PRICE_SELECTOR = '[data-testid="price-availability-row"]'
RATING_LABEL_SELECTOR = '[aria-label*="rating" i]'

PLACEHOLDER_TITLE = "Listing"

_CURRENCY_RE = re.compile(r"[$€£¥₹]")
_STAR = "★"

Strategy = Callable[[Tag], str | None]


def _clean(text: str | None) -> str | None:
    """Collapse whitespace; empty text counts as missing."""
    if not text:
        return None
    cleaned = " ".join(text.split())
    return cleaned or None


def _select_text(anchor: Tag, selector: str) -> str | None:
    el = anchor.select_one(selector)
    return _clean(el.get_text()) if el else None


def _first_span_text(anchor: Tag, predicate: Callable[[str], bool]) -> str | None:
    for span in anchor.find_all("span"):
        text = span.get_text()
        if predicate(text):
            return _clean(text)
    return None


# --- title ---


def title_from_card(anchor: Tag) -> str | None:
    return _select_text(anchor, TITLE_SELECTOR)


def title_from_anchor_text(anchor: Tag) -> str | None:
    """First line of the anchor's visible text."""
    text = anchor.get_text().strip()
    return _clean(text.split("\n")[0])


# --- price ---


def price_from_row(anchor: Tag) -> str | None:
    return _select_text(anchor, PRICE_SELECTOR)


def price_from_currency_text(anchor: Tag) -> str | None:
    return _first_span_text(anchor, lambda text: bool(_CURRENCY_RE.search(text)))


# --- rating ---


def rating_from_aria_label(anchor: Tag) -> str | None:
    el = anchor.select_one(RATING_LABEL_SELECTOR)
    return _clean(el.get("aria-label")) if el else None


def rating_from_star_text(anchor: Tag) -> str | None:
    return _first_span_text(anchor, lambda text: _STAR in text)


TITLE_STRATEGIES: tuple[Strategy, ...] = (title_from_card, title_from_anchor_text)
PRICE_STRATEGIES: tuple[Strategy, ...] = (price_from_row, price_from_currency_text)
RATING_STRATEGIES: tuple[Strategy, ...] = (rating_from_aria_label, rating_from_star_text)


def first_match(anchor: Tag, strategies: Sequence[Strategy]) -> str | None:
    for strategy in strategies:
        value = strategy(anchor)
        if value:
            return value
    return None


def canonical_url(href: str, base_url: str = BASE_URL) -> str:
    """Absolute URL with query string and fragment removed."""
    parts = urlsplit(urljoin(base_url, href))
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))


def extract_listings(html: str, base_url: str = BASE_URL) -> list[Listing]:
    soup = BeautifulSoup(html, "html.parser")
    found: dict[str, Listing] = {}

    for anchor in soup.select(LISTING_ANCHOR_SELECTOR):
        href = anchor.get("href")
        if not href:
            continue

        url = canonical_url(href, base_url)
        if url in found:
            continue

        found[url] = Listing(
            title=first_match(anchor, TITLE_STRATEGIES) or PLACEHOLDER_TITLE,
            url=url,
            price=first_match(anchor, PRICE_STRATEGIES),
            rating=first_match(anchor, RATING_STRATEGIES),
        )

    return list(found.values())
