from concurrent.futures import ThreadPoolExecutor

import httpx
import pytest
import pytest_asyncio

from hermes_sdk import EbayClient
from hermes_sdk.apis import BrowseApi, InventoryApi, TaxonomyApi
from hermes_sdk.core.errors import DecodeError, TransportError
from hermes_sdk.schemas.browse import Item, SearchPagedCollection

FAMILIES = [
    "browse", "feed", "marketing", "offer", "order",
    "catalog", "identity", "taxonomy", "translation",
    "account", "analytics", "compliance", "finances", "fulfillment",
    "inventory", "metadata", "negotiation", "recommendation",
]


@pytest_asyncio.fixture
async def client(config, http_client, sleep, clock):
    async with EbayClient(config, http_client=http_client, sleep=sleep, clock=clock) as ebay:
        yield ebay


@pytest.mark.asyncio
async def test_families_are_built_lazily_and_once(client):
    assert client._apis == {}

    browse = client.browse

    assert isinstance(browse, BrowseApi)
    assert client.browse is browse
    assert list(client._apis) == ["browse"]


@pytest.mark.asyncio
async def test_all_families_share_one_executor(client):
    apis = [getattr(client, name) for name in FAMILIES]

    assert len({id(api) for api in apis}) == len(FAMILIES)
    assert all(api.executor is client.executor for api in apis)


@pytest.mark.asyncio
async def test_concurrent_first_access_builds_one_instance(client):
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: client.inventory, range(32)))

    assert all(api is results[0] for api in results)
    assert isinstance(results[0], InventoryApi)


@pytest.mark.asyncio
async def test_token_reused_across_calls_until_expiry(client, fake_ebay, clock):
    fake_ebay.expires_in = 3600

    await client.account.get_kyc()
    clock.advance(10)
    await client.account.get_kyc()
    assert fake_ebay.token_calls == 1

    clock.advance(3600)
    await client.account.get_kyc()

    assert fake_ebay.token_calls == 2
    assert [r.headers["Authorization"] for r in fake_ebay.requests] == ["Bearer t1", "Bearer t1", "Bearer t2"]


@pytest.mark.asyncio
async def test_search_items_shortcut(client, fake_ebay):
    fake_ebay.queue(
        httpx.Response(
            200,
            json={
                "total": 1,
                "itemSummaries": [
                    {"itemId": "v1|110|0", "title": "iPhone 13", "price": {"value": "399.99", "currency": "USD"}},
                ],
            },
        )
    )

    result = await client.search_items("iphone", limit=5)

    assert isinstance(result, SearchPagedCollection)
    assert result.total == 1
    assert result.item_summaries[0].item_id == "v1|110|0"
    assert result.item_summaries[0].price.value == "399.99"
    request = fake_ebay.requests[0]
    assert request.url.path == "/buy/browse/v1/item_summary/search"
    assert request.url.params["q"] == "iphone"
    assert request.url.params["limit"] == "5"


@pytest.mark.asyncio
async def test_get_item_shortcut(client, fake_ebay):
    fake_ebay.queue(httpx.Response(200, json={"itemId": "v1|110|0", "title": "Camera", "categoryId": "31388"}))

    item = await client.get_item("v1|110|0")

    assert isinstance(item, Item)
    assert item.category_id == "31388"
    assert b"/buy/browse/v1/item/v1%7C110%7C0" == fake_ebay.requests[0].url.raw_path


@pytest.mark.asyncio
async def test_get_categories_resolves_default_tree(client, fake_ebay):
    fake_ebay.queue(
        httpx.Response(200, json={"categoryTreeId": "0", "categoryTreeVersion": "119"}),
        httpx.Response(
            200,
            json={
                "categoryTreeId": "0",
                "rootCategoryNode": {
                    "category": {"categoryId": "0", "categoryName": "Root"},
                    "childCategoryTreeNodes": [
                        {"category": {"categoryId": "20081", "categoryName": "Antiques"}, "leafCategoryTreeNode": False},
                    ],
                },
            },
        ),
    )

    tree = await client.get_categories()

    assert tree.root_category_node.child_category_tree_nodes[0].category.category_name == "Antiques"
    first, second = fake_ebay.requests
    assert first.url.path == "/commerce/taxonomy/v1/get_default_category_tree_id"
    assert first.url.params["marketplace_id"] == "EBAY_US"
    assert second.url.path == "/commerce/taxonomy/v1/category_tree/0"


@pytest.mark.asyncio
async def test_inventory_sku_stays_one_segment(client, fake_ebay):
    await client.inventory.create_or_replace_inventory_item("BOX/12", {"availability": {}}, content_language="en-GB")

    request = fake_ebay.requests[0]
    assert request.method == "PUT"
    assert request.url.raw_path == b"/sell/inventory/v1/inventory_item/BOX%2F12"
    assert request.headers["Content-Language"] == "en-GB"


@pytest.mark.asyncio
async def test_feed_returns_bytes_with_range(client, fake_ebay):
    fake_ebay.queue(httpx.Response(206, content=b"gz-chunk"))

    data = await client.feed.get_item_feed("EBAY_US", "bytes=0-1023", "NEWLY_LISTED", "625", date="20240101")

    assert data == b"gz-chunk"
    request = fake_ebay.requests[0]
    assert request.url.path == "/buy/feed/v1_beta/item"
    assert request.headers["Range"] == "bytes=0-1023"
    assert request.url.params["feed_scope"] == "NEWLY_LISTED"


@pytest.mark.asyncio
async def test_families_on_other_hosts(client, fake_ebay):
    await client.identity.get_user()
    await client.finances.get_seller_funds_summary("EBAY_US")
    await client.order.get_guest_purchase_order("PO-1")

    hosts = [r.url.host for r in fake_ebay.requests]
    assert hosts == ["apiz.sandbox.ebay.com", "apiz.sandbox.ebay.com", "apix.sandbox.ebay.com"]
    assert fake_ebay.requests[0].url.path == "/commerce/identity/v1/user/"


@pytest.mark.asyncio
async def test_marketplace_header_per_call(client, fake_ebay):
    await client.compliance.get_product_adoption_violations("EBAY_DE", limit=50)

    request = fake_ebay.requests[0]
    assert request.url.path == "/sell/compliance/v1/listing_violation"
    assert request.url.params["compliance_type"] == "PRODUCT_ADOPTION"
    assert request.headers["X-EBAY-C-MARKETPLACE-ID"] == "EBAY_DE"


@pytest.mark.asyncio
async def test_analytics_defect_rate_shortcut(client, fake_ebay):
    await client.analytics.get_current_defect_rate("EBAY_US")

    request = fake_ebay.requests[0]
    assert request.url.path == "/sell/analytics/v1/customer_service_metric/DEFECT_RATE/CURRENT"
    assert request.url.params["evaluation_marketplace_id"] == "EBAY_US"


@pytest.mark.asyncio
async def test_metadata_marketplace_path(client, fake_ebay):
    await client.metadata.get_return_policies("EBAY_US", filter="categoryIds:{183454}")

    assert fake_ebay.requests[0].url.path == "/sell/metadata/v1/marketplace/EBAY_US/get_return_policies"


@pytest.mark.asyncio
async def test_fulfillment_get_orders_params(client, fake_ebay):
    await client.fulfillment.get_orders(filter="orderfulfillmentstatus:{NOT_STARTED}", limit=10)

    params = fake_ebay.requests[0].url.params
    assert params["filter"] == "orderfulfillmentstatus:{NOT_STARTED}"
    assert params["limit"] == "10"
    assert "offset" not in params


@pytest.mark.asyncio
async def test_check_compatibility_is_retried(client, fake_ebay, sleep):
    fake_ebay.queue(
        httpx.ConnectError("connection reset"),
        httpx.Response(200, json={"compatibilityStatus": "COMPATIBLE"}),
    )

    result = await client.browse.check_compatibility("v1|1|0", [{"name": "Make", "value": "Honda"}])

    assert result.compatibility_status == "COMPATIBLE"
    assert sleep.delays == [0.5]


@pytest.mark.asyncio
async def test_place_proxy_bid_is_not_retried(client, fake_ebay, sleep):
    fake_ebay.queue(httpx.ConnectError("connection reset"))

    with pytest.raises(TransportError):
        await client.offer.place_proxy_bid("v1|1|0", "EBAY_US", {"maxAmount": {"currency": "USD", "value": "10.00"}})

    assert len(fake_ebay.requests) == 1
    assert sleep.delays == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response, expected",
    [
        (httpx.Response(200, json={"itemId": "v1|1|0", "auctionStatus": "ACTIVE"}), True),
        (httpx.Response(200, json={"itemId": "v1|1|0", "auctionStatus": "ENDED"}), False),
        (httpx.Response(200, json={"itemId": "v1|1|0"}), False),
        (httpx.Response(404, json={"errors": [{"errorId": 120017, "message": "No bidding"}]}), False),
    ],
)
async def test_can_bid_on_item(client, fake_ebay, response, expected):
    fake_ebay.queue(response)

    assert await client.offer.can_bid_on_item("v1|1|0", "EBAY_US") is expected


@pytest.mark.asyncio
async def test_translate_text(client, fake_ebay):
    fake_ebay.queue(
        httpx.Response(
            200,
            json={
                "from": "en",
                "to": "de",
                "translations": [{"originalText": "red shoes", "translatedText": "rote Schuhe"}],
            },
        )
    )

    assert await client.translation.translate_text("red shoes", "en", "de") == "rote Schuhe"

    body = fake_ebay.requests[0].content
    assert b'"from"' in body
    assert b'"translationContext"' in body


@pytest.mark.asyncio
async def test_translate_text_without_result(client, fake_ebay):
    fake_ebay.queue(httpx.Response(200, json={"translations": []}))

    with pytest.raises(DecodeError):
        await client.translation.translate_text("red shoes", "en", "de")


@pytest.mark.asyncio
async def test_taxonomy_suggestions(client, fake_ebay):
    fake_ebay.queue(
        httpx.Response(
            200,
            json={
                "categoryTreeId": "0",
                "categorySuggestions": [{"category": {"categoryId": "9355", "categoryName": "Cell Phones"}}],
            },
        )
    )

    api = client.taxonomy
    result = await api.get_category_suggestions("0", "iphone")

    assert isinstance(api, TaxonomyApi)
    assert result.category_suggestions[0].category.category_id == "9355"


@pytest.mark.asyncio
async def test_owned_http_client_closed_on_exit(config):
    ebay = EbayClient(config)
    async with ebay:
        pass

    assert ebay._http.is_closed


@pytest.mark.asyncio
async def test_injected_http_client_left_open(config, http_client):
    async with EbayClient(config, http_client=http_client):
        pass

    assert not http_client.is_closed
