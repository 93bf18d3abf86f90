"""Tests for the Warcraft Logs GraphQL client."""

import httpx
import pytest
import pytest_asyncio

from guild_leaderboard.core.exceptions import (
    AuthenticationError,
    GuildNotFoundError,
    NetworkError,
    UpstreamProtocolError,
)
from guild_leaderboard.domain.leaderboard.models import GuildMember
from guild_leaderboard.infrastructure.api.warcraftlogs import WarcraftLogsClient

from tests.helpers import API_URL, GraphQLStub, encounter, roster_member, zone_rankings


def make_client(handler, max_retries=1):
    return WarcraftLogsClient(
        api_url=API_URL,
        max_retries=max_retries,
        retry_wait_min=0,
        retry_wait_max=0,
        transport=httpx.MockTransport(handler),
    )


@pytest_asyncio.fixture
async def stub_client():
    stubs = {}

    async def factory(stub, max_retries=1):
        client = make_client(stub, max_retries=max_retries)
        stubs[id(client)] = client
        return client

    yield factory

    for client in stubs.values():
        await client.close()


@pytest.mark.asyncio
async def test_roster_query_sends_bearer_token_and_variables(stub_client):
    seen = []
    stub = GraphQLStub(members=[roster_member(1, "Alpha"), roster_member(2, "Bravo", hidden=True)])

    def handler(request):
        seen.append(request)
        return stub(request)

    client = await stub_client(handler)
    roster = await client.fetch_guild_roster("token-1", "Test Guild", "area-52", "us")

    assert [member.name for member in roster] == ["Alpha", "Bravo"]
    assert roster[1].hidden is True
    assert seen[0].headers["Authorization"] == "Bearer token-1"
    assert str(seen[0].url) == API_URL
    assert stub.requests[0]["variables"] == {
        "guildName": "Test Guild",
        "serverRegion": "us",
        "serverSlug": "area-52",
    }


@pytest.mark.asyncio
async def test_missing_guild_raises_guild_not_found(stub_client):
    client = await stub_client(GraphQLStub(guild_found=False))

    with pytest.raises(GuildNotFoundError) as exc_info:
        await client.fetch_guild_roster("token", "Nobody", "area-52", "us")

    error = exc_info.value
    assert error.status_code == 404
    assert error.message == 'Could not find guild "Nobody" on area-52-us'


@pytest.mark.asyncio
async def test_graphql_errors_raise_upstream_protocol_error(stub_client):
    errors = [{"message": "Guild name is required"}]
    client = await stub_client(GraphQLStub(roster_errors=errors))

    with pytest.raises(UpstreamProtocolError) as exc_info:
        await client.fetch_guild_roster("token", "Test Guild", "area-52", "us")

    assert exc_info.value.errors == errors
    assert exc_info.value.to_dict()["details"]["errors"] == errors
    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_non_2xx_raises_upstream_protocol_error(stub_client):
    client = await stub_client(GraphQLStub(catalog_status=503))

    with pytest.raises(UpstreamProtocolError) as exc_info:
        await client.fetch_class_catalog("token")

    assert exc_info.value.upstream_status == 503


@pytest.mark.asyncio
async def test_unauthorized_raises_authentication_error(stub_client):
    client = await stub_client(lambda request: httpx.Response(401, json={"error": "Unauthenticated."}))

    with pytest.raises(AuthenticationError):
        await client.fetch_class_catalog("expired")


@pytest.mark.asyncio
async def test_class_catalog_is_keyed_by_class_and_spec_id(stub_client):
    client = await stub_client(GraphQLStub())

    catalog = await client.fetch_class_catalog("token")

    mage = catalog.lookup(8)
    assert mage.name == "Mage"
    assert mage.spec(64).slug == "frost"
    assert catalog.lookup(1234).name == "Unknown"


@pytest.mark.asyncio
async def test_character_rankings_use_member_region(stub_client):
    stub = GraphQLStub(characters={
        "Alpha": {
            "zoneRankings": zone_rankings(91.2, encounters=[encounter("Boss1", 91.2)]),
            "gameData": {"itemLevel": 489},
        }
    })
    client = await stub_client(stub)
    member = GuildMember.model_validate(roster_member(1, "Alpha", region="eu"))

    result = await client.fetch_character_rankings("token", member, "us", 39, 4)

    assert result.rounded_score == 91
    assert result.item_level == 489
    assert stub.requests[0]["variables"] == {
        "name": "Alpha",
        "serverSlug": "area-52",
        "serverRegion": "eu",
        "zoneID": 39,
        "difficulty": 4,
    }


@pytest.mark.asyncio
async def test_character_rankings_fall_back_to_configured_region(stub_client):
    stub = GraphQLStub(characters={"Alpha": None})
    client = await stub_client(stub)
    member = GuildMember.model_validate(roster_member(1, "Alpha", region=None))

    result = await client.fetch_character_rankings("token", member, "us", 39, 4)

    assert result.spec == "Unknown"
    assert stub.requests[0]["variables"]["serverRegion"] == "us"


@pytest.mark.asyncio
async def test_transport_errors_are_retried_then_raise_network_error(stub_client):
    attempts = []

    def handler(request):
        attempts.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    client = await stub_client(handler, max_retries=3)

    with pytest.raises(NetworkError) as exc_info:
        await client.fetch_class_catalog("token")

    assert len(attempts) == 3
    assert exc_info.value.endpoint == ""


@pytest.mark.asyncio
async def test_transient_failure_recovers_on_retry(stub_client):
    stub = GraphQLStub()
    attempts = []

    def handler(request):
        attempts.append(request)
        if len(attempts) == 1:
            raise httpx.ReadTimeout("timed out", request=request)
        return stub(request)

    client = await stub_client(handler, max_retries=2)

    catalog = await client.fetch_class_catalog("token")

    assert len(catalog) == 3
    assert len(attempts) == 2


@pytest.mark.asyncio
async def test_catalog_with_non_object_class_raises_upstream_protocol_error(stub_client):
    client = await stub_client(GraphQLStub(classes=[None]))

    with pytest.raises(UpstreamProtocolError):
        await client.fetch_class_catalog("token")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error_type",
    [httpx.TooManyRedirects, httpx.DecodingError],
)
async def test_non_transport_request_errors_raise_network_error(stub_client, error_type):
    attempts = []

    def handler(request):
        attempts.append(request)
        raise error_type("bad response", request=request)

    client = await stub_client(handler, max_retries=3)

    with pytest.raises(NetworkError) as exc_info:
        await client.fetch_class_catalog("token")

    # only timeouts and connection errors are retried
    assert len(attempts) == 1
    assert isinstance(exc_info.value.original_exception, error_type)
