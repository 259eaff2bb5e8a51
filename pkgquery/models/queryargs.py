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
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from pkgquery.utils import load_model

from .versionnumber import VersionNumber


class QueryArgs(BaseModel):
    """Base class for query arguments"""

    @classmethod
    def import_args(cls, args_input: dict | str):
        """build query args from a dict or a JSON file

        Args:
            args_input (dict | str): dict of arguments or path to a JSON file

        Returns:
            QueryArgs: query args instance
        """
        return load_model(cls, args_input)


class PackageInfoArgs(QueryArgs):
    """Arguments for looking up package version details

    package_version_id takes precedence over package_name, version and include_all_builds
    """

    package_name: Optional[str] = None
    version: Optional[str] = None
    package_version_id: Optional[str] = None
    include_all_builds: bool = False

    @model_validator(mode="after")
    def validate_filter(self) -> "PackageInfoArgs":
        if self.package_version_id:
            return self

        if not self.package_name:
            raise ValueError("package_name is required when package_version_id is not set")

        return self

    @property
    def version_number(self) -> VersionNumber | None:
        """Parsed version, None when the lookup is by package version id

        Raises:
            InvalidVersionFormat: if version is not a valid package version
        """
        if self.package_version_id:
            return None
        return VersionNumber.parse(self.version or "", require_build=not self.include_all_builds)


class LatestPackageVersionArgs(QueryArgs):
    """Arguments for listing the versions of a package, newest first"""

    package_name: str = Field(min_length=1)
    released_only: bool = False
    limit: Optional[int] = Field(default=None, gt=0)
