"""Read-only loan product catalog."""

from loanmatch.catalog.products import PRODUCTS, PRODUCTS_BY_ID, get_product

__all__ = ["PRODUCTS", "PRODUCTS_BY_ID", "get_product"]
