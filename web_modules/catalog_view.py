"""
Pure helpers behind the storefront views: filtering, ordering, formatting.
"""

from typing import Dict, Iterable, List, Optional

from web_modules.models import Category, Product


def matches_category(product: Product, category_id: Optional[int]) -> bool:
    return category_id is None or product.category_id == category_id


def matches_query(product: Product, query: Optional[str]) -> bool:
    """Case-insensitive substring match on the product name."""
    if not query or not query.strip():
        return True
    return query.strip().casefold() in product.name.casefold()


def filter_products(
    products: Iterable[Product],
    category_id: Optional[int] = None,
    query: Optional[str] = None,
) -> List[Product]:
    """Products passing both the category filter and the search query, in input order."""
    return [
        p for p in products
        if matches_category(p, category_id) and matches_query(p, query)
    ]


def sort_categories(categories: Iterable[Category]) -> List[Category]:
    return sorted(categories, key=lambda c: (c.display_order, c.id or 0))


def category_names(categories: Iterable[Category]) -> Dict[int, str]:
    return {c.id: c.name for c in categories if c.id is not None}


def format_price(price: float, currency: str = "") -> str:
    """``1234.5`` -> ``"1 234.50 RUB"``; whole amounts drop the decimals."""
    if float(price).is_integer():
        text = f"{int(price):,}"
    else:
        text = f"{price:,.2f}"
    text = text.replace(",", " ")
    return f"{text} {currency}".strip()


def specs_to_rows(specifications: Dict[str, str]) -> List[Dict[str, str]]:
    """Editable key/value rows with one trailing blank row."""
    rows = [{"key": k, "value": v} for k, v in specifications.items()]
    rows.append({"key": "", "value": ""})
    return rows


def rows_to_specs(rows: Iterable[Dict[str, str]]) -> Dict[str, str]:
    """Collapse editor rows back to a mapping; incomplete rows are dropped."""
    specs = {}
    for row in rows:
        key = (row.get("key") or "").strip()
        value = (row.get("value") or "").strip()
        if key and value:
            specs[key] = value
    return specs
