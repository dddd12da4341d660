from __future__ import annotations

import logging
from typing import Callable, Dict, List

from bs4 import BeautifulSoup
from bs4.element import Tag

from .types import ALDI, TESCO, Product, RetailerProfile
from .unescape import unescape_listing


logger = logging.getLogger(__name__)

ALDI_TILE_PREFIX = "product-tile-"
ALDI_TILE_SELECTOR = f'[id^="{ALDI_TILE_PREFIX}"]'
ALDI_NAME_SELECTOR = ".product-tile__name p"
ALDI_BRAND_SELECTOR = ".product-tile__brandname p"
ALDI_AMOUNT_SELECTOR = ".product-tile__unit-of-measurement p"

TESCO_ITEM_SELECTOR = "#list-content > li"
TESCO_LINK_SELECTOR = "._64Yvfa_titleContainer h2 a"


def to_title_case(text: str) -> str:
    # title(), not upper(): "ß".upper() is "SS" and would not survive a second pass
    return " ".join(word[:1].title() + word[1:].lower() for word in text.split())


def _text(el: Tag, selector: str) -> str:
    # Text of every match, concatenated, like jQuery-style .text()
    return "".join(match.get_text() for match in el.select(selector)).strip()


def _last_path_segment(href: str) -> str:
    return href.split("/")[-1]


def extract_aldi_products(html: str, profile: RetailerProfile = ALDI) -> List[Product]:
    soup = BeautifulSoup(unescape_listing(html), "lxml")

    products: List[Product] = []
    for tile in soup.select(ALDI_TILE_SELECTOR):
        # "product-tile-000000000000622208" -> "000000000000622208"
        source_ref = (tile.get("id") or "").replace(ALDI_TILE_PREFIX, "", 1)
        if not source_ref:
            logger.debug("Skipping tile without product reference")
            continue

        name = _text(tile, ALDI_NAME_SELECTOR)
        if not name:
            logger.debug("Skipping tile %s: no product name", source_ref)
            continue

        brand = to_title_case(_text(tile, ALDI_BRAND_SELECTOR))
        products.append(
            Product(
                name=name,
                brand=brand or profile.fallback_brand,
                amount=_text(tile, ALDI_AMOUNT_SELECTOR),
                source_id=profile.source_id,
                source_ref=source_ref,
                country=profile.country,
                categories_tags=profile.categories_tags,
                categories_en=profile.categories_en,
            )
        )
    return products


def extract_tesco_products(html: str, profile: RetailerProfile = TESCO) -> List[Product]:
    soup = BeautifulSoup(html, "lxml")

    products: List[Product] = []
    for item in soup.select(TESCO_ITEM_SELECTOR):
        links = item.select(TESCO_LINK_SELECTOR)
        if not links:
            logger.debug("Skipping list item without a title link")
            continue

        name = "".join(link.get_text() for link in links).strip()
        source_ref = _last_path_segment(links[0].get("href") or "")
        if not name or not source_ref:
            logger.debug("Skipping list item: name=%r ref=%r", name, source_ref)
            continue

        products.append(
            Product(
                name=name,
                brand=profile.fallback_brand,
                source_id=profile.source_id,
                source_ref=source_ref,
                country=profile.country,
                categories_tags=profile.categories_tags,
                categories_en=profile.categories_en,
            )
        )
    return products


EXTRACTORS: Dict[str, Callable[[str, RetailerProfile], List[Product]]] = {
    ALDI.key: extract_aldi_products,
    TESCO.key: extract_tesco_products,
}


def extract_products(profile: RetailerProfile, html: str) -> List[Product]:
    extractor = EXTRACTORS[profile.key]
    products = extractor(html, profile)
    logger.debug("Extracted %d %s products", len(products), profile.display_name)
    return products
