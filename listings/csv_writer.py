from __future__ import annotations

import os
from typing import Dict, Iterable, Union

from .types import CSV_COLUMNS, Product


# A bare "\r" is a record break for most CSV readers
QUOTED_CHARS = (",", '"', "\n", "\r")


def escape_csv_field(value: Union[str, int]) -> str:
    text = str(value)
    if any(char in text for char in QUOTED_CHARS):
        return '"' + text.replace('"', '""') + '"'
    return text


def product_to_row(product: Product) -> Dict[str, Union[str, int]]:
    return {
        "barcode": "",
        "product_name": product.name,
        "amount": product.amount,
        "unit": "",
        "brand": product.brand,
        "categories_tags": product.categories_tags,
        "categories_en": product.categories_en,
        "countries": product.country,
        "source_id": product.source_id,
        "source_ref": product.source_ref,
    }


def row_to_line(row: Dict[str, Union[str, int]]) -> str:
    return ",".join(escape_csv_field(row[column]) for column in CSV_COLUMNS)


def write_products_to_csv(products: Iterable[Product], out_path: str) -> bool:
    """
    Append products to ``out_path``, writing the header first if the file is new.

    Returns True when the file was created by this call.
    """
    is_new = not os.path.exists(out_path)

    content = ",".join(CSV_COLUMNS) + "\n" if is_new else ""
    lines = [row_to_line(product_to_row(p)) for p in products]
    if lines:
        content += "\n".join(lines) + "\n"

    # newline="" keeps Unix line endings on every platform
    with open(out_path, "a", encoding="utf-8", newline="") as fh:
        fh.write(content)
    return is_new
