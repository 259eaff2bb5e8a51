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
import logging
from typing import Optional

from pkgquery.connection import QueryConnection
from pkgquery.constants import DEFAULT_LOGGER
from pkgquery.models import (
    LatestPackageVersionArgs,
    PackageInfoArgs,
    PackageVersionInfo,
    PackageVersionRecord,
    QueryResponse,
)
from pkgquery.querybuilder import build_latest_version_query, build_package_info_query


async def query_package_versions(
    connection: QueryConnection,
    query: str,
    logger: Optional[logging.Logger] = None,
) -> list[PackageVersionInfo]:
    """Run a Package2Version query and map each record, keeping the order of the reply

    Errors raised by the connection are not handled here

    Args:
        connection (QueryConnection): connection to the metadata API
        query (str): query text
        logger (Optional[logging.Logger], optional): python logger instance. Defaults to None.

    Raises:
        pydantic.ValidationError: if a record does not match the Package2Version shape

    Returns:
        list[PackageVersionInfo]: mapped package versions, empty when nothing matched
    """
    if logger is None:
        logger = logging.getLogger(DEFAULT_LOGGER)

    logger.debug("Running package version query: %s", query)
    response = QueryResponse.from_response(await connection.query(query))

    package_versions = [
        PackageVersionRecord.model_validate(record).to_package_version_info()
        for record in response.records
    ]
    logger.info("Package version query returned %d record(s)", len(package_versions))
    return package_versions


async def get_package_info(
    connection: QueryConnection,
    package_name: Optional[str],
    version: Optional[str],
    package_version_id: Optional[str] = None,
    include_all_builds: bool = False,
    logger: Optional[logging.Logger] = None,
) -> list[PackageVersionInfo]:
    """Get the details of a package version

    Args:
        connection (QueryConnection): connection to the metadata API
        package_name (Optional[str]): package name, e.g. salesforce-global-core
        version (Optional[str]): version, e.g. 1.1.0.1
        package_version_id (Optional[str], optional): when set only this version is looked up
            and the other filters are ignored. Defaults to None.
        include_all_builds (bool, optional): list every build of major.minor.patch, highest
            build first, instead of the exact version. Defaults to False.
        logger (Optional[logging.Logger], optional): python logger instance. Defaults to None.

    Raises:
        InvalidVersionFormat: if version is not major.minor.patch.build
        pydantic.ValidationError: if no package name is given without a package version id

    Returns:
        list[PackageVersionInfo]: matching package versions
    """
    args = PackageInfoArgs(
        package_name=package_name,
        version=version,
        package_version_id=package_version_id,
        include_all_builds=include_all_builds,
    )
    return await query_package_versions(connection, build_package_info_query(args), logger)


async def get_latest_package_version(
    connection: QueryConnection,
    package_name: str,
    released_only: bool = False,
    limit: Optional[int] = None,
    logger: Optional[logging.Logger] = None,
) -> list[PackageVersionInfo]:
    """Get the versions of a package, most recently created first

    Args:
        connection (QueryConnection): connection to the metadata API
        package_name (str): package name
        released_only (bool, optional): only include released versions. Defaults to False.
        limit (Optional[int], optional): maximum number of versions. Defaults to None, all versions.
        logger (Optional[logging.Logger], optional): python logger instance. Defaults to None.

    Returns:
        list[PackageVersionInfo]: package versions, the first one is the latest
    """
    args = LatestPackageVersionArgs(
        package_name=package_name, released_only=released_only, limit=limit
    )
    return await query_package_versions(connection, build_latest_version_query(args), logger)
