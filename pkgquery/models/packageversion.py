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
import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .datamodel import DataModel

PLATFORM_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%f%z"


class PackageVersionInfo(DataModel):
    """Package version details returned to callers

    Attributes:
        subscriber_package_version_id (str): subscriber package version id (04t...)
        package_version_number (str): major.minor.patch.build
        validation_skipped (Optional[str]): validation skipped flag as reported by the platform
        code_coverage (float): apex code coverage percentage, 0 when the coverage object
            is missing or its percentage is null
    """

    model_config = ConfigDict(frozen=True)

    subscriber_package_version_id: str
    package_version_number: str
    major_version: int
    minor_version: int
    patch_version: int
    build_number: int
    name: Optional[str] = None
    tag: Optional[str] = None
    validation_skipped: Optional[str] = None
    created_date: Optional[datetime.datetime] = None
    last_modified_date: Optional[datetime.datetime] = None
    is_released: Optional[bool] = None
    code_coverage: float = 0
    code_coverage_check_passed: Optional[bool] = None


class CodeCoverage(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    apex_code_coverage_percentage: Optional[float] = Field(
        default=None, alias="apexCodeCoveragePercentage"
    )


class PackageVersionRecord(BaseModel):
    """Shape of a single Package2Version record returned by the metadata API"""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    subscriber_package_version_id: str = Field(alias="SubscriberPackageVersionId")
    major_version: int = Field(alias="MajorVersion")
    minor_version: int = Field(alias="MinorVersion")
    patch_version: int = Field(alias="PatchVersion")
    build_number: int = Field(alias="BuildNumber")
    description: Optional[str] = Field(default=None, alias="Description")
    name: Optional[str] = Field(default=None, alias="Name")
    tag: Optional[str] = Field(default=None, alias="Tag")
    created_date: Optional[datetime.datetime] = Field(default=None, alias="CreatedDate")
    last_modified_date: Optional[datetime.datetime] = Field(
        default=None, alias="LastModifiedDate"
    )
    validation_skipped: Optional[str] = Field(default=None, alias="ValidationSkipped")
    is_released: Optional[bool] = Field(default=None, alias="IsReleased")
    code_coverage: Optional[CodeCoverage] = Field(default=None, alias="CodeCoverage")
    has_passed_code_coverage_check: Optional[bool] = Field(
        default=None, alias="HasPassedCodeCoverageCheck"
    )

    @field_validator("validation_skipped", mode="before")
    @classmethod
    def validate_validation_skipped(cls, value) -> Optional[str]:
        """Keep the flag as a string, booleans become 'true' / 'false'

        Args:
            value (Any): raw field value

        Returns:
            Optional[str]: string flag
        """
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, bool):
            return str(value).lower()
        return str(value)

    @field_validator("created_date", "last_modified_date", mode="before")
    @classmethod
    def validate_timestamp(cls, value) -> Optional[datetime.datetime]:
        """Parse platform timestamps and convert them to UTC

        Args:
            value (Any): raw timestamp, e.g. 2022-03-01T10:15:00.000+0000

        Raises:
            ValueError: if the timestamp string can not be parsed

        Returns:
            Optional[datetime.datetime]: timezone aware UTC timestamp
        """
        if value is None:
            return None

        if isinstance(value, str):
            try:
                value = datetime.datetime.strptime(value, PLATFORM_TIMESTAMP_FORMAT)
            except ValueError:
                value = datetime.datetime.fromisoformat(value.replace("Z", "+00:00"))

        if not isinstance(value, datetime.datetime):
            return value

        # naive timestamps are already UTC
        if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
            return value.replace(tzinfo=datetime.timezone.utc)
        return value.astimezone(datetime.timezone.utc)

    @property
    def package_version_number(self) -> str:
        return (
            f"{self.major_version}.{self.minor_version}."
            f"{self.patch_version}.{self.build_number}"
        )

    def to_package_version_info(self) -> PackageVersionInfo:
        """Map the record to the caller facing package version info

        Returns:
            PackageVersionInfo: mapped package version
        """
        code_coverage = 0.0
        if self.code_coverage and self.code_coverage.apex_code_coverage_percentage is not None:
            code_coverage = self.code_coverage.apex_code_coverage_percentage

        return PackageVersionInfo(
            subscriber_package_version_id=self.subscriber_package_version_id,
            package_version_number=self.package_version_number,
            major_version=self.major_version,
            minor_version=self.minor_version,
            patch_version=self.patch_version,
            build_number=self.build_number,
            name=self.name,
            tag=self.tag,
            validation_skipped=self.validation_skipped,
            created_date=self.created_date,
            last_modified_date=self.last_modified_date,
            is_released=self.is_released,
            code_coverage=code_coverage,
            code_coverage_check_passed=self.has_passed_code_coverage_check,
        )
