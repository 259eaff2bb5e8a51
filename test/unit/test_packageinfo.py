###############################################################################
#
# MIT License
#
# Copyright (c) 2025 Advanced Micro Devices, Inc.
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
#
###############################################################################
import asyncio
import logging
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from pydantic import ValidationError

from pkgquery import (
    InvalidVersionFormat,
    PackageVersionInfo,
    get_latest_package_version,
    get_package_info,
    query_package_versions,
)


def sent_query(connection) -> str:
    connection.query.assert_awaited_once()
    return connection.query.await_args.args[0]


def test_get_package_info(conn_mock):
    res = asyncio.run(get_package_info(conn_mock, "core", "1.2.0.4"))

    assert [type(pkg) for pkg in res] == [PackageVersionInfo, PackageVersionInfo]
    assert [pkg.package_version_number for pkg in res] == ["1.2.0.4", "1.2.0.3"]
    assert res[1].code_coverage == 0
    assert res[1].validation_skipped == "true"

    query = sent_query(conn_mock)
    assert query.endswith(
        "WHERE Package2.Name = 'core' AND MajorVersion = 1 AND MinorVersion = 2 "
        "AND PatchVersion = 0 AND BuildNumber = 4"
    )


def test_get_package_info_all_builds(conn_mock):
    asyncio.run(get_package_info(conn_mock, "core", "1.2.0.4", include_all_builds=True))

    query = sent_query(conn_mock)
    assert "BuildNumber =" not in query
    assert query.endswith("ORDER BY BuildNumber DESC")


def test_get_package_info_by_id(conn_mock):
    asyncio.run(
        get_package_info(
            conn_mock, "core", "1.2.0.4", "04t000000000001AAA", include_all_builds=True
        )
    )

    query = sent_query(conn_mock)
    assert query.endswith("WHERE SubscriberPackageVersionId = '04t000000000001AAA'")
    assert "Package2.Name" not in query
    assert "ORDER BY" not in query


def test_get_package_info_by_id_ignores_version(conn_mock):
    asyncio.run(get_package_info(conn_mock, None, None, "04t000000000001AAA"))
    assert "SubscriberPackageVersionId" in sent_query(conn_mock)


def test_get_package_info_invalid_version(conn_mock):
    with pytest.raises(InvalidVersionFormat):
        asyncio.run(get_package_info(conn_mock, "core", "1.2.0"))
    conn_mock.query.assert_not_called()


def test_get_package_info_missing_name(conn_mock):
    with pytest.raises(ValidationError):
        asyncio.run(get_package_info(conn_mock, "", "1.2.0.4"))
    conn_mock.query.assert_not_called()


def test_get_package_info_no_records(empty_conn_mock):
    assert asyncio.run(get_package_info(empty_conn_mock, "core", "1.2.0.4")) == []


@pytest.mark.parametrize("response", [{}, {"records": None}, SimpleNamespace(records=None), None])
def test_missing_records_returns_empty_list(response):
    connection = MagicMock()
    connection.query = AsyncMock(return_value=response)

    assert asyncio.run(get_package_info(connection, "core", "1.2.0.4")) == []
    assert asyncio.run(get_latest_package_version(connection, "core")) == []


def test_connection_error_propagates():
    class QueryFailure(Exception):
        pass

    connection = MagicMock()
    error = QueryFailure("INVALID_SESSION_ID")
    connection.query = AsyncMock(side_effect=error)

    with pytest.raises(QueryFailure) as exc_info:
        asyncio.run(get_package_info(connection, "core", "1.2.0.4"))
    assert exc_info.value is error

    with pytest.raises(QueryFailure):
        asyncio.run(get_latest_package_version(connection, "core", True))


def test_get_latest_package_version(conn_mock):
    res = asyncio.run(get_latest_package_version(conn_mock, "core"))

    assert [pkg.subscriber_package_version_id for pkg in res] == [
        "04t000000000001AAA",
        "04t000000000002AAA",
    ]
    query = sent_query(conn_mock)
    assert query.endswith("WHERE Package2.Name = 'core' ORDER BY CreatedDate DESC")
    assert "IsReleased =" not in query
    assert "LIMIT" not in query


def test_get_latest_package_version_released_only(conn_mock):
    asyncio.run(get_latest_package_version(conn_mock, "core", released_only=True))

    query = sent_query(conn_mock)
    assert "AND IsReleased = true" in query
    assert query.endswith("ORDER BY CreatedDate DESC")


def test_get_latest_package_version_limit(conn_mock):
    asyncio.run(get_latest_package_version(conn_mock, "core", limit=1))
    assert sent_query(conn_mock).endswith("ORDER BY CreatedDate DESC LIMIT 1")


def test_get_latest_package_version_invalid_limit(conn_mock):
    with pytest.raises(ValidationError):
        asyncio.run(get_latest_package_version(conn_mock, "core", limit=0))
    conn_mock.query.assert_not_called()


def test_invalid_record(conn_mock, query_response):
    del query_response["records"][1]["MajorVersion"]
    with pytest.raises(ValidationError):
        asyncio.run(get_latest_package_version(conn_mock, "core"))


def test_query_logging(conn_mock, logger, caplog):
    with caplog.at_level(logging.DEBUG, logger=logger.name):
        asyncio.run(query_package_versions(conn_mock, "SELECT Id FROM Package2Version", logger))

    assert "Running package version query: SELECT Id FROM Package2Version" in caplog.text
    assert "returned 2 record(s)" in caplog.text


def test_default_logger(conn_mock, caplog):
    with caplog.at_level(logging.INFO, logger="pkgquery"):
        asyncio.run(get_latest_package_version(conn_mock, "core"))
    assert [record.name for record in caplog.records] == ["pkgquery"]
