"""
Library-wide constants
"""

# eBay REST hosts per environment
EBAY_API_BASE_SANDBOX = "https://api.sandbox.ebay.com"
EBAY_API_BASE_PRODUCTION = "https://api.ebay.com"

# Identity and Finances live on the "apiz" hosts
EBAY_APIZ_BASE_SANDBOX = "https://apiz.sandbox.ebay.com"
EBAY_APIZ_BASE_PRODUCTION = "https://apiz.ebay.com"

# Buy Order (guest checkout) lives on the "apix" hosts
EBAY_APIX_BASE_SANDBOX = "https://apix.sandbox.ebay.com"
EBAY_APIX_BASE_PRODUCTION = "https://apix.ebay.com"

EBAY_TOKEN_PATH = "/identity/v1/oauth2/token"

# Application (client credentials) scope; works with any eBay keyset
EBAY_SCOPES = [
    "https://api.ebay.com/oauth/api_scope",
]

DEFAULT_MARKETPLACE_ID = "EBAY_US"

# Used when the token endpoint omits expires_in
DEFAULT_TOKEN_LIFETIME = 7200

# Refresh this many seconds before the token actually expires
DEFAULT_TOKEN_SAFETY_MARGIN = 60.0

DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 2
DEFAULT_BACKOFF_BASE = 0.5
DEFAULT_BACKOFF_MAX = 8.0
DEFAULT_RETRY_STATUSES = (429, 503)

# Methods retried on transport failure without an explicit retry_safe flag
IDEMPOTENT_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})

HEADER_MARKETPLACE_ID = "X-EBAY-C-MARKETPLACE-ID"
HEADER_END_USER_CTX = "X-EBAY-C-ENDUSERCTX"
HEADER_CONTENT_LANGUAGE = "Content-Language"
HEADER_ACCEPT_LANGUAGE = "Accept-Language"
