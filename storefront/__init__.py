# storefront/__init__.py
from .app import Storefront, build_storefront

__all__ = ["Storefront", "build_storefront"]
