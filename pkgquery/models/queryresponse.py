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
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class QueryResponse(BaseModel):
    """Reply of a metadata API query, only the records are used"""

    model_config = ConfigDict(extra="ignore")

    records: list[dict[str, Any]] = Field(default_factory=list)
    total_size: Optional[int] = None
    done: Optional[bool] = None

    @field_validator("records", mode="before")
    @classmethod
    def validate_records(cls, records) -> list:
        if records is None:
            return []
        return records

    @classmethod
    def from_response(cls, response: Any) -> "QueryResponse":
        """Build a query response from a mapping or an object with a records attribute

        Args:
            response (Any): raw reply from the connection

        Returns:
            QueryResponse: validated response, records is always a list
        """
        if isinstance(response, QueryResponse):
            return response
        if response is None:
            return cls()
        if isinstance(response, Mapping):
            return cls(
                records=response.get("records"),
                total_size=response.get("totalSize"),
                done=response.get("done"),
            )
        return cls(records=getattr(response, "records", None))
