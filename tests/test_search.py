from __future__ import annotations

import pytest
from opensearchpy import Q

from es_operations.errors import DecodeError, UnexpectedStatusError
from es_operations.search import SearchQueryOperation, SearchType, SearchURIOperation

SEARCH_BODY = {
    "_shards": {"total": 5, "successful": 5, "failed": 0},
    "hits": {
        "total": 1,
        "hits": [
            {
                "_index": "notes",
                "_type": "note",
                "_id": "1",
                "_score": 0.9,
                "_source": {"title": "hello"},
            }
        ],
    },
}


def test_uri_search_renders_options_in_order(make_transport):
    request = (
        SearchURIOperation(make_transport())
        .with_indexes(["notes", "archive"])
        .with_types(["note"])
        .with_query("title:hello")
        .with_default_operator("AND")
        .with_fields(["title", "tags"])
        .with_sort("date:desc")
        .with_from(10)
        .with_size(5)
        .with_search_type(SearchType.QUERY_THEN_FETCH)
        .build()
    )

    assert request.method == "GET"
    assert request.body is None
    assert request.path == (
        "/notes,archive/note/_search"
        "?q=title%3Ahello&default_operator=AND&fields=title%2Ctags"
        "&sort=date%3Adesc&from=10&size=5&search_type=query_then_fetch"
    )


def test_uri_search_across_all_indexes(make_transport):
    assert SearchURIOperation(make_transport()).build().path == "/_search"


def test_uri_search_send(make_transport):
    transport = make_transport(200, SEARCH_BODY)

    result = SearchURIOperation(transport).with_indexes(["notes"]).with_query("hello").send()

    assert transport.calls == [("GET", "/notes/_search?q=hello", None)]
    assert result.hits.total == 1
    hit = result.hits.hits[0]
    assert (hit.index, hit.doc_type, hit.id, hit.score) == ("notes", "note", "1", 0.9)
    assert hit.source == {"title": "hello"}


def test_query_search_defaults():
    op = SearchQueryOperation(transport=None)
    assert op.build().body == {"from": 0, "size": 10}


def test_query_search_min_score_keeps_paging():
    body = SearchQueryOperation(transport=None).with_min_score(0.5).build().body
    assert body == {"from": 0, "size": 10, "min_score": 0.5}


def test_query_search_full_body(make_transport):
    request = (
        SearchQueryOperation(make_transport())
        .with_indexes(["notes"])
        .with_query(Q("match", title="hello"))
        .with_timeout("1s")
        .with_from(20)
        .with_size(50)
        .with_terminate_after(1000)
        .with_stats(["group1", SearchType.QUERY_AND_FETCH.value])
        .with_routing("u1")
        .with_query_cache("true")
        .build()
    )

    assert request.method == "POST"
    assert request.path == "/notes/_search?routing=u1&query_cache=true"
    assert request.body == {
        "from": 20,
        "size": 50,
        "query": {"match": {"title": "hello"}},
        "timeout": "1s",
        "terminate_after": 1000,
        "stats": ["group1", "query_and_fetch"],
    }


def test_query_is_never_duplicated_into_query_string(make_transport):
    request = (
        SearchQueryOperation(make_transport())
        .with_query({"match_all": {}})
        .build()
    )
    assert "q=" not in request.path
    assert request.path == "/_search"


def test_query_search_send(make_transport):
    transport = make_transport(200, SEARCH_BODY)

    result = SearchQueryOperation(transport).with_query({"match_all": {}}).send()

    method, path, body = transport.calls[0]
    assert (method, path) == ("POST", "/_search")
    assert body == {"from": 0, "size": 10, "query": {"match_all": {}}}
    assert result.shards.successful == 5


@pytest.mark.parametrize("operation", [SearchURIOperation, SearchQueryOperation])
def test_search_error_status(make_transport, operation):
    with pytest.raises(UnexpectedStatusError) as excinfo:
        operation(make_transport(400, {"error": "SearchPhaseExecutionException"})).send()
    assert excinfo.value.status_code == 400
    assert excinfo.value.body == {"error": "SearchPhaseExecutionException"}


def test_search_malformed_response(make_transport):
    with pytest.raises(DecodeError):
        SearchURIOperation(make_transport(200, {"hits": {"total": 0, "hits": []}})).send()


@pytest.mark.parametrize("operation", [SearchURIOperation, SearchQueryOperation])
def test_bare_string_targets_are_single_names(make_transport, operation):
    request = operation(make_transport()).with_indexes("logs").with_types("event").build()

    assert request.path.startswith("/logs/event/_search")


def test_bare_string_fields_is_one_field(make_transport):
    request = SearchURIOperation(make_transport()).with_fields("title").build()

    assert request.path == "/_search?fields=title"


def test_search_expects_no_error_statuses(make_transport):
    transport = make_transport(200, SEARCH_BODY)

    SearchURIOperation(transport).send()

    assert transport.ignored == [()]
