from hermes_sdk.apis.commerce.catalog import CatalogApi
from hermes_sdk.apis.commerce.identity import IdentityApi
from hermes_sdk.apis.commerce.taxonomy import TaxonomyApi
from hermes_sdk.apis.commerce.translation import TranslationApi

__all__ = ["CatalogApi", "IdentityApi", "TaxonomyApi", "TranslationApi"]
