"""GraphQL endpoint tests."""

from unittest.mock import AsyncMock

from falcon.testing import TestClient

from quoteserve.domain.exceptions import FetchFailure, StorageFailure

from tests.api.conftest import build_app
from tests.conftest import FakeUnitOfWork, make_quote, make_uow_factory

QUOTE_FIELDS = "id content author tags likes source createdAt updatedAt"


def _seed(fake_uow: FakeUnitOfWork, *quotes) -> None:
    for quote in quotes:
        fake_uow.quotes._by_id[quote.id] = quote


def _gql(client: TestClient, query: str, variables: dict | None = None):
    body = {"query": query}
    if variables is not None:
        body["variables"] = variables
    return client.simulate_post("/graphql", json=body)


class TestQuoteQuery:
    def test_found(self, client: TestClient, fake_uow: FakeUnitOfWork) -> None:
        _seed(fake_uow, make_quote("q1", tags=["b", "a"], likes=2))

        result = _gql(client, f'{{ quote(id: "q1") {{ {QUOTE_FIELDS} }} }}')

        assert result.status_code == 200
        quote = result.json["data"]["quote"]
        assert quote["id"] == "q1"
        assert quote["tags"] == ["b", "a"]
        assert quote["likes"] == 2
        assert quote["createdAt"] == "2026-01-01T00:00:00+00:00"
        assert "errors" not in result.json

    def test_not_found(self, client: TestClient) -> None:
        result = _gql(client, '{ quote(id: "missing") { id } }')

        assert result.status_code == 200
        assert result.json["data"] is None
        error = result.json["errors"][0]
        assert error["extensions"]["code"] == "NOT_FOUND"
        assert error["path"] == ["quote"]

    def test_reaches_ids_shadowed_by_rest_routes(
        self, client: TestClient, fake_uow: FakeUnitOfWork
    ) -> None:
        """An id equal to a literal REST segment is still readable by id."""
        _seed(fake_uow, make_quote("stats", content="Numbers never lie."))

        result = _gql(client, "query Get($id: String!) { quote(id: $id) { id content } }", {"id": "stats"})

        assert result.json["data"]["quote"] == {"id": "stats", "content": "Numbers never lie."}
        assert "total_quotes" in client.simulate_get("/v1/quotes/stats").json


class TestSelectionQueries:
    def test_random_quote_is_stored(self, client: TestClient, fake_uow: FakeUnitOfWork) -> None:
        result = _gql(client, "{ randomQuote { id author } }")

        assert result.json["data"]["randomQuote"] == {"id": "ext-1", "author": "Abraham Lincoln"}
        assert "ext-1" in fake_uow.quotes._by_id

    def test_smart_quote_fetches_on_empty_store(
        self, client: TestClient, mock_quote_provider: AsyncMock
    ) -> None:
        result = _gql(client, "{ smartQuote(preferLiked: true) { id } }")

        assert result.json["data"]["smartQuote"]["id"] == "ext-1"
        mock_quote_provider.fetch_random_quote.assert_awaited_once()

    def test_smart_quote_uses_store(
        self, client: TestClient, fake_uow: FakeUnitOfWork, mock_quote_provider: AsyncMock
    ) -> None:
        _seed(fake_uow, make_quote("stored", likes=1))

        result = _gql(client, "{ smartQuote { id } }")

        assert result.json["data"]["smartQuote"]["id"] == "stored"
        mock_quote_provider.fetch_random_quote.assert_not_awaited()

    def test_smart_quote_with_stats(self, client: TestClient, fake_uow: FakeUnitOfWork) -> None:
        _seed(fake_uow, make_quote("solo", likes=3))

        result = _gql(
            client,
            "{ smartQuoteWithStats(preferLiked: true) "
            "{ quote { id } isNew totalQuotes averageLikes popularity } }",
        )

        assert result.json["data"]["smartQuoteWithStats"] == {
            "quote": {"id": "solo"},
            "isNew": False,
            "totalQuotes": 1,
            "averageLikes": 3.0,
            "popularity": "medium",
        }

    def test_popular_quotes(self, client: TestClient, fake_uow: FakeUnitOfWork) -> None:
        _seed(
            fake_uow,
            make_quote("one", likes=1),
            make_quote("ten", likes=10),
            make_quote("five", likes=5),
        )

        result = _gql(client, "{ popularQuotes(limit: 2) { id likes } }")

        assert result.json["data"]["popularQuotes"] == [
            {"id": "ten", "likes": 10},
            {"id": "five", "likes": 5},
        ]

    def test_stats(self, client: TestClient, fake_uow: FakeUnitOfWork) -> None:
        _seed(fake_uow, make_quote("a", likes=2), make_quote("b", likes=4))

        result = _gql(client, "{ stats { totalQuotes totalLikedQuotes averageLikes } }")

        assert result.json["data"]["stats"] == {
            "totalQuotes": 2,
            "totalLikedQuotes": 2,
            "averageLikes": 3.0,
        }


class TestSimilarQuotes:
    def test_ranked(self, client: TestClient, mock_quote_provider: AsyncMock) -> None:
        mock_quote_provider.fetch_candidate_batch.return_value = [
            make_quote("noise", content="zzz"),
            make_quote("match", content="Hope is the thing with feathers."),
        ]

        result = _gql(
            client,
            '{ similarQuotes(content: "Hope is the thing with feathers", limit: 3) '
            "{ quote { id } similarity } }",
        )

        scored = result.json["data"]["similarQuotes"]
        assert [s["quote"]["id"] for s in scored] == ["match"]
        assert 0.2 < scored[0]["similarity"] <= 1.0

    def test_invalid_limit(self, client: TestClient) -> None:
        result = _gql(client, '{ similarQuotes(content: "hope", limit: 50) { similarity } }')

        assert result.json["errors"][0]["extensions"]["code"] == "BAD_USER_INPUT"

    def test_fetch_failure_is_empty(self, client: TestClient, mock_quote_provider: AsyncMock) -> None:
        mock_quote_provider.fetch_candidate_batch.side_effect = FetchFailure("down")

        result = _gql(client, '{ similarQuotes(content: "hope") { similarity } }')

        assert result.json["data"]["similarQuotes"] == []
        assert "errors" not in result.json


class TestLikeMutation:
    def test_like(self, client: TestClient, fake_uow: FakeUnitOfWork) -> None:
        _seed(fake_uow, make_quote("q1", likes=4))

        result = _gql(client, 'mutation { likeQuote(id: "q1") { success likes } }')

        assert result.json["data"]["likeQuote"] == {"success": True, "likes": 5}
        assert fake_uow.quotes._by_id["q1"].likes == 5

    def test_like_missing(self, client: TestClient, fake_uow: FakeUnitOfWork) -> None:
        result = _gql(client, 'mutation { likeQuote(id: "missing") { likes } }')

        assert result.json["errors"][0]["extensions"]["code"] == "NOT_FOUND"
        assert fake_uow.quotes._by_id == {}


class TestRequestHandling:
    def test_missing_query(self, client: TestClient) -> None:
        assert client.simulate_post("/graphql", json={"variables": {}}).status_code == 400

    def test_malformed_json(self, client: TestClient) -> None:
        result = client.simulate_post(
            "/graphql", body="{nope", headers={"Content-Type": "application/json"}
        )
        assert result.status_code == 400

    def test_variables_must_be_object(self, client: TestClient) -> None:
        result = client.simulate_post("/graphql", json={"query": "{ stats { totalQuotes } }", "variables": [1]})
        assert result.status_code == 400

    def test_syntax_error_reported(self, client: TestClient) -> None:
        result = _gql(client, "{ stats { ")

        assert result.status_code == 200
        assert result.json["data"] is None
        assert result.json["errors"]

    def test_storage_failure_is_opaque(self, mock_quote_provider: AsyncMock, sampler, scorer) -> None:
        uow = FakeUnitOfWork()
        uow.quotes.count = AsyncMock(side_effect=StorageFailure("database unavailable"))

        client = TestClient(build_app(make_uow_factory(uow), mock_quote_provider, sampler, scorer))
        result = _gql(client, "{ stats { totalQuotes } }")

        error = result.json["errors"][0]
        assert error["extensions"]["code"] == "INTERNAL_SERVER_ERROR"
        assert "database" not in result.text
