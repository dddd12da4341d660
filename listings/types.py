from dataclasses import dataclass
from typing import Optional, Union


CSV_COLUMNS = [
    "barcode",
    "product_name",
    "amount",
    "unit",
    "brand",
    "categories_tags",
    "categories_en",
    "countries",
    "source_id",
    "source_ref",
]


@dataclass
class Product:
    name: str
    source_id: Union[int, str]
    source_ref: str
    country: str
    brand: str = ""
    amount: str = ""
    categories_tags: str = ""
    categories_en: str = ""


@dataclass(frozen=True)
class RetailerProfile:
    """Constant metadata attached to every product of one retailer."""

    key: str
    display_name: str
    source_id: Union[int, str]
    country: str = "GB"
    fallback_brand: str = ""
    categories_tags: str = ""
    categories_en: str = ""
    # None means the output path must be given on the command line
    default_output: Optional[str] = None


TESCO_SHELF = "Fresh Food > Fresh Fruit"
TESCO_AISLE = "Organic Fruit & Nuts"


ALDI = RetailerProfile(
    key="aldi",
    display_name="Aldi",
    source_id=2,
    fallback_brand="Aldi",
    categories_en="Fresh Food",
    default_output="main.csv",
)

TESCO = RetailerProfile(
    key="tesco",
    display_name="Tesco",
    source_id=3,
    categories_tags=f"{TESCO_SHELF}, {TESCO_AISLE}",
    categories_en=f"{TESCO_SHELF}, {TESCO_AISLE}",
)

PROFILES = {profile.key: profile for profile in (ALDI, TESCO)}
