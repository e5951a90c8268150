from typing import Optional

# Catalog filter value meaning "every category"
ALL_CATEGORIES = "Semua"


def filter_products(products: list[dict], search: Optional[str] = None, category: Optional[str] = None) -> list[dict]:
    """Case-insensitive name search combined with an exact category match."""
    needle = (search or "").strip().lower()
    filtered = []
    for p in products:
        if needle and needle not in p["name"].lower():
            continue
        if category and category != ALL_CATEGORIES and p["category"] != category:
            continue
        filtered.append(p)
    return filtered
