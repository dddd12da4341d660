"""
Tests for the per-retailer product extractors.
"""
import pytest

from listings.extract import (
    extract_aldi_products,
    extract_products,
    extract_tesco_products,
    to_title_case,
)
from listings.types import ALDI, TESCO


ALDI_HTML = """
<html><body>
<div class="grid">
  <div id="product-tile-000000000000622208">
    <div class="product-tile__name"><p> Nature's Pick Bananas </p></div>
    <div class="product-tile__brandname"><p>nature's PICK</p></div>
    <div class="product-tile__unit-of-measurement"><p> 5 pack </p></div>
  </div>
  <div id="product-tile-000000000000111111">
    <div class="product-tile__brandname"><p>ghost</p></div>
  </div>
  <div id="product-tile-">
    <div class="product-tile__name"><p>No reference</p></div>
  </div>
  <div id="product-tile-000000000000222222">
    <div class="product-tile__name"><p>Carrots</p></div>
  </div>
</div>
</body></html>
"""

TESCO_HTML = """
<html><body>
<ul id="list-content">
  <li>
    <div class="_64Yvfa_titleContainer">
      <h2><a href="/groceries/en-GB/products/254656543"> Tesco Organic Bananas, Loose </a></h2>
    </div>
  </li>
  <li><p>Sponsored</p></li>
  <li>
    <div class="_64Yvfa_titleContainer"><h2><a href="/groceries/en-GB/products/300">   </a></h2></div>
  </li>
  <li>
    <div class="_64Yvfa_titleContainer"><h2><a href="/groceries/en-GB/products/">Apples</a></h2></div>
  </li>
  <li>
    <div class="_64Yvfa_titleContainer"><h2><a href="/groceries/en-GB/products/299">Organic "Pink" Lady</a></h2></div>
  </li>
</ul>
<ul id="recommended">
  <li><div class="_64Yvfa_titleContainer"><h2><a href="/p/1">Elsewhere</a></h2></div></li>
</ul>
</body></html>
"""


class TestToTitleCase:
    """Test brand title-casing."""

    def test_mixed_case(self):
        assert to_title_case("mc DONALD's farm") == "Mc Donald's Farm"

    def test_idempotent(self):
        once = to_title_case("mc DONALD's farm")
        assert to_title_case(once) == once

    def test_collapses_whitespace(self):
        assert to_title_case("  the   FOOD\twarehouse ") == "The Food Warehouse"

    def test_empty(self):
        assert to_title_case("   ") == ""

    def test_expanding_first_letter_is_idempotent(self):
        """Characters whose upper case is several letters still title-case stably"""
        once = to_title_case("ßio organic")
        assert once == "Ssio Organic"
        assert to_title_case(once) == once


class TestExtractAldi:
    """Test Aldi tile extraction."""

    def test_skips_incomplete_tiles(self):
        """Tiles without a name or reference produce nothing"""
        products = extract_aldi_products(ALDI_HTML)
        assert [p.source_ref for p in products] == ["000000000000622208", "000000000000222222"]

    def test_populated_tile(self):
        product = extract_aldi_products(ALDI_HTML)[0]
        assert product.name == "Nature's Pick Bananas"
        assert product.brand == "Nature's Pick"
        assert product.amount == "5 pack"
        assert product.source_id == 2
        assert product.country == "GB"
        assert product.categories_en == "Fresh Food"
        assert product.categories_tags == ""

    def test_brand_falls_back_to_retailer(self):
        product = extract_aldi_products(ALDI_HTML)[1]
        assert product.brand == "Aldi"
        assert product.amount == ""

    def test_escaped_listing(self):
        """Listings saved as escaped rich text are decoded first"""
        html = (
            '<p class="p1"><span class="s1">'
            '&lt;div id="product-tile-9"&gt;'
            '&lt;div class="product-tile__name"&gt;&lt;p&gt;Oat Milk&lt;/p&gt;&lt;/div&gt;'
            '&lt;div class="product-tile__brandname"&gt;&lt;p&gt;BRAMWELLS&lt;/p&gt;&lt;/div&gt;'
            "&lt;/div&gt;</span></p>"
        )
        products = extract_aldi_products(html)
        assert len(products) == 1
        assert products[0].source_ref == "9"
        assert products[0].name == "Oat Milk"
        assert products[0].brand == "Bramwells"

    def test_no_tiles(self):
        assert extract_aldi_products("<html><body><p>Nothing here</p></body></html>") == []

    def test_bare_escaped_listing(self):
        """An escaped listing with no wrapper element is still decoded"""
        html = (
            "&lt;div id=&quot;product-tile-5&quot;&gt;"
            "&lt;div class=&quot;product-tile__name&quot;&gt;&lt;p&gt;Kale&lt;/p&gt;&lt;/div&gt;"
            "&lt;/div&gt;"
        )
        products = extract_aldi_products(html)
        assert [(p.source_ref, p.name) for p in products] == [("5", "Kale")]


class TestExtractTesco:
    """Test Tesco list item extraction."""

    def test_document_order_and_guards(self):
        products = extract_tesco_products(TESCO_HTML)
        assert [p.source_ref for p in products] == ["254656543", "299"]

    def test_populated_item(self):
        product = extract_tesco_products(TESCO_HTML)[0]
        assert product.name == "Tesco Organic Bananas, Loose"
        assert product.source_id == 3
        assert product.country == "GB"
        assert product.brand == ""
        assert product.amount == ""
        assert product.categories_tags == "Fresh Food > Fresh Fruit, Organic Fruit & Nuts"
        assert product.categories_en == product.categories_tags

    def test_ignores_other_lists(self):
        names = [p.name for p in extract_tesco_products(TESCO_HTML)]
        assert "Elsewhere" not in names


class TestExtractProducts:
    """Test dispatch by retailer profile."""

    @pytest.mark.parametrize(
        "profile, html, count",
        [(ALDI, ALDI_HTML, 2), (TESCO, TESCO_HTML, 2)],
    )
    def test_dispatch(self, profile, html, count):
        products = extract_products(profile, html)
        assert len(products) == count
        assert all(p.source_id == profile.source_id for p in products)
