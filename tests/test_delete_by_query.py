from __future__ import annotations

import pytest

from es_operations.delete_by_query import DeleteByQueryOperation
from es_operations.errors import UnexpectedStatusError

SHARDS_OK = {"total": 5, "successful": 5, "failed": 0}


def test_query_string_goes_into_q_parameter(make_transport):
    op = (
        DeleteByQueryOperation(make_transport())
        .with_indexes(["logs-1", "logs-2"])
        .with_doc_types(["event"])
        .with_query_string("level:debug")
        .with_routing("r1")
    )

    request = op.build()

    assert request.method == "DELETE"
    assert request.path == "/logs-1,logs-2/event/_query?routing=r1&q=level%3Adebug"
    assert request.body is None


def test_structured_query_goes_into_body_only(make_transport):
    request = (
        DeleteByQueryOperation(make_transport())
        .with_indexes(["logs"])
        .with_query({"term": {"level": "debug"}})
        .with_df("message")
        .build()
    )

    assert request.path == "/logs/_query?df=message"
    assert request.body == {"query": {"term": {"level": "debug"}}}


def test_last_query_wins(make_transport):
    op = DeleteByQueryOperation(make_transport()).with_indexes(["logs"])

    op.with_query({"match_all": {}}).with_query_string("level:info")
    assert op.build().path == "/logs/_query?q=level%3Ainfo"
    assert op.build().body is None

    op.with_query_string("level:info").with_query({"match_all": {}})
    assert op.build().path == "/logs/_query"
    assert op.build().body == {"query": {"match_all": {}}}


def test_default_is_empty_query_string(make_transport):
    assert DeleteByQueryOperation(make_transport()).build().path == "/_query?q="


def test_build_does_not_accumulate_q(make_transport):
    op = DeleteByQueryOperation(make_transport()).with_query_string("x")
    op.build()

    assert op.build().path == "/_query?q=x"
    assert len(op.options) == 0


def test_send_decodes_result(make_transport):
    transport = make_transport(
        200,
        {
            "_indices": {
                "logs": {"_shards": SHARDS_OK},
                "other": {"_shards": {"total": 5, "successful": 3, "failed": 2}},
            }
        },
    )

    result = DeleteByQueryOperation(transport).with_query_string("*").send()

    assert result is not None
    assert result.indices["logs"].shards.failed == 0
    assert result.successful() is False


def test_not_found_means_nothing_matched(make_transport):
    transport = make_transport(404, {"error": "IndexMissingException[[logs] missing]"})

    assert DeleteByQueryOperation(transport).with_indexes(["logs"]).send() is None


def test_other_status_is_an_error(make_transport):
    with pytest.raises(UnexpectedStatusError) as excinfo:
        DeleteByQueryOperation(make_transport(500, None)).send()
    assert excinfo.value.status_code == 500


def test_not_found_is_declared_expected(make_transport):
    transport = make_transport(404, None)

    DeleteByQueryOperation(transport).send()

    assert transport.ignored == [(404,)]


def test_bare_string_targets_are_single_names(make_transport):
    request = (
        DeleteByQueryOperation(make_transport())
        .with_indexes("logs")
        .with_doc_types("event")
        .with_query_string("x")
        .build()
    )

    assert request.path == "/logs/event/_query?q=x"
