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
import json

import pytest
from pydantic import ValidationError

from pkgquery.models import (
    LatestPackageVersionArgs,
    PackageInfoArgs,
    PackageVersionInfo,
    PackageVersionRecord,
)


@pytest.fixture
def package_version(query_response):
    return PackageVersionRecord.model_validate(
        query_response["records"][0]
    ).to_package_version_info()


def test_log_model(tmp_path, package_version):
    log_name = package_version.log_model(str(tmp_path))

    assert log_name == str(tmp_path / "packageversioninfo.json")
    data = json.loads((tmp_path / "packageversioninfo.json").read_text(encoding="utf-8"))
    assert data["subscriber_package_version_id"] == "04t000000000001AAA"
    assert data["package_version_number"] == "1.2.0.4"


def test_log_model_unique_filename(tmp_path, package_version):
    package_version.log_model(str(tmp_path))
    package_version.log_model(str(tmp_path))

    assert (tmp_path / "packageversioninfo.json").is_file()
    assert (tmp_path / "packageversioninfo(1).json").is_file()


def test_import_model(tmp_path, package_version):
    log_name = package_version.log_model(str(tmp_path))

    assert PackageVersionInfo.import_model(log_name) == package_version
    assert PackageVersionInfo.import_model(package_version.model_dump()) == package_version


def test_import_model_invalid_input():
    with pytest.raises(ValueError):
        PackageVersionInfo.import_model(42)


def test_import_args_from_file(tmp_path):
    args_file = tmp_path / "args.json"
    args_file.write_text(
        json.dumps({"package_name": "core", "version": "1.2.0", "include_all_builds": True}),
        encoding="utf-8",
    )

    args = PackageInfoArgs.import_args(str(args_file))
    assert args.include_all_builds is True
    assert str(args.version_number) == "1.2.0"


def test_import_args_from_dict():
    args = LatestPackageVersionArgs.import_args({"package_name": "core", "released_only": True})
    assert args.released_only is True
    assert args.limit is None


def test_package_info_args_requires_name():
    with pytest.raises(ValidationError):
        PackageInfoArgs(version="1.2.0.4")


def test_package_info_args_id_only():
    args = PackageInfoArgs(package_version_id="04t000000000001AAA")
    assert args.version_number is None


def test_latest_args_requires_name():
    with pytest.raises(ValidationError):
        LatestPackageVersionArgs(package_name="")
