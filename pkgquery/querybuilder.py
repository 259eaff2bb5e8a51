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
from typing import Iterable, Optional

from pkgquery.constants import PACKAGE_VERSION_FIELDS, PACKAGE_VERSION_OBJECT
from pkgquery.enums import SortOrder
from pkgquery.models import LatestPackageVersionArgs, PackageInfoArgs

QueryValue = str | int | bool

# backslash is escaped first, separately
LITERAL_ESCAPES = {"'": "\\'", "\n": "\\n", "\r": "\\r", "\t": "\\t"}


def quote_literal(value: str) -> str:
    """Quote a string literal for use in a query, escaping quotes and control characters

    Args:
        value (str): raw string value

    Returns:
        str: quoted literal
    """
    escaped = value.replace("\\", "\\\\")
    for char, escape in LITERAL_ESCAPES.items():
        escaped = escaped.replace(char, escape)
    return f"'{escaped}'"


def format_value(value: QueryValue) -> str:
    """Render a filter value as query text

    Args:
        value (QueryValue): string, integer or boolean value

    Raises:
        TypeError: for any other value type

    Returns:
        str: query text for the value
    """
    # bool first, bool is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return quote_literal(value)
    raise TypeError(f"Unsupported query value type: {type(value).__name__}")


class PackageVersionQueryBuilder:
    """Build a SELECT query with equality filters, ordering and an optional limit"""

    def __init__(
        self,
        fields: Iterable[str] = PACKAGE_VERSION_FIELDS,
        sobject: str = PACKAGE_VERSION_OBJECT,
    ):
        self.fields = list(fields)
        self.sobject = sobject
        self.conditions: list[str] = []
        self.order: Optional[tuple[str, SortOrder]] = None
        self.row_limit: Optional[int] = None

    def where_equals(self, field: str, value: QueryValue) -> "PackageVersionQueryBuilder":
        self.conditions.append(f"{field} = {format_value(value)}")
        return self

    def order_by(
        self, field: str, sort_order: SortOrder = SortOrder.ASC
    ) -> "PackageVersionQueryBuilder":
        self.order = (field, sort_order)
        return self

    def limit(self, row_limit: Optional[int]) -> "PackageVersionQueryBuilder":
        if row_limit is not None and (isinstance(row_limit, bool) or row_limit <= 0):
            raise ValueError(f"Invalid query limit: {row_limit}")
        self.row_limit = row_limit
        return self

    def build(self) -> str:
        query = f"SELECT {','.join(self.fields)} FROM {self.sobject}"
        if self.conditions:
            query += " WHERE " + " AND ".join(self.conditions)
        if self.order:
            field, sort_order = self.order
            query += f" ORDER BY {field} {sort_order.value}"
        if self.row_limit is not None:
            query += f" LIMIT {self.row_limit}"
        return query


def build_package_info_query(args: PackageInfoArgs) -> str:
    """Build the query for a package version lookup

    - by package version id when one is set, nothing else is filtered
    - all builds of major.minor.patch, highest build first, when include_all_builds is set
    - otherwise the exact major.minor.patch.build version

    Args:
        args (PackageInfoArgs): lookup arguments

    Raises:
        InvalidVersionFormat: if the version can not be parsed

    Returns:
        str: query text
    """
    builder = PackageVersionQueryBuilder()

    if args.package_version_id:
        return builder.where_equals("SubscriberPackageVersionId", args.package_version_id).build()

    version = args.version_number
    builder.where_equals("Package2.Name", args.package_name)
    builder.where_equals("MajorVersion", version.major)
    builder.where_equals("MinorVersion", version.minor)
    builder.where_equals("PatchVersion", version.patch)

    if args.include_all_builds:
        builder.order_by("BuildNumber", SortOrder.DESC)
    else:
        builder.where_equals("BuildNumber", version.build)

    return builder.build()


def build_latest_version_query(args: LatestPackageVersionArgs) -> str:
    """Build the query listing versions of a package, newest first

    Args:
        args (LatestPackageVersionArgs): listing arguments

    Returns:
        str: query text
    """
    builder = PackageVersionQueryBuilder().where_equals("Package2.Name", args.package_name)
    if args.released_only:
        builder.where_equals("IsReleased", True)
    return builder.order_by("CreatedDate", SortOrder.DESC).limit(args.limit).build()
