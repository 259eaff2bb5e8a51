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

from pydantic import BaseModel, ConfigDict, Field

from pkgquery.exceptions import InvalidVersionFormat

VERSION_SEPARATOR = "."


class VersionNumber(BaseModel):
    """Four part package version, major.minor.patch.build

    build is None when the version was parsed without a numeric build segment
    """

    model_config = ConfigDict(frozen=True)

    major: int = Field(ge=0)
    minor: int = Field(ge=0)
    patch: int = Field(ge=0)
    build: Optional[int] = Field(default=None, ge=0)

    @staticmethod
    def _parse_segment(version: str, segment: str, label: str) -> int:
        if not segment.isdecimal():
            raise InvalidVersionFormat(
                version, f"{label} segment '{segment}' is not a non-negative integer"
            )
        return int(segment)

    @classmethod
    def parse(cls, version: str, require_build: bool = True) -> "VersionNumber":
        """Parse a dotted version string

        Args:
            version (str): version string, e.g. 1.2.0.4
            require_build (bool, optional): when False a three segment version is accepted
                and an alphabetic build token (e.g. NEXT) is ignored. Defaults to True.

        Raises:
            InvalidVersionFormat: if the segment count or a segment value is invalid

        Returns:
            VersionNumber: parsed version
        """
        if not isinstance(version, str) or not version.strip():
            raise InvalidVersionFormat(str(version), "version is empty")

        segments = version.strip().split(VERSION_SEPARATOR)
        allowed_counts = (4,) if require_build else (3, 4)
        if len(segments) not in allowed_counts:
            raise InvalidVersionFormat(
                version, f"expected 4 segments separated by '.', found {len(segments)}"
            )

        major, minor, patch = (
            cls._parse_segment(version, segment, label)
            for segment, label in zip(segments[:3], ("major", "minor", "patch"))
        )

        build = None
        if len(segments) == 4:
            if require_build or segments[3].isdecimal():
                build = cls._parse_segment(version, segments[3], "build")
            elif not segments[3].isalpha():
                raise InvalidVersionFormat(
                    version, f"build segment '{segments[3]}' is not a number or a build token"
                )

        return cls(major=major, minor=minor, patch=patch, build=build)

    def __str__(self) -> str:
        parts = [self.major, self.minor, self.patch]
        if self.build is not None:
            parts.append(self.build)
        return VERSION_SEPARATOR.join(str(part) for part in parts)
