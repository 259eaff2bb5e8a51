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
import os
from typing import TypeVar

from pydantic import BaseModel

from pkgquery.utils import get_unique_filename, load_model

TDataModel = TypeVar("TDataModel", bound="DataModel")


class DataModel(BaseModel):
    def log_model(self, log_path: str) -> str:
        """Log data model to a file

        Args:
            log_path (str): log path

        Returns:
            str: path of the file which was written
        """
        log_name = os.path.join(
            log_path,
            get_unique_filename(log_path, f"{self.__class__.__name__.lower()}.json"),
        )

        with open(log_name, "w", encoding="utf-8") as log_file:
            log_file.write(self.model_dump_json(indent=2))

        return log_name

    @classmethod
    def import_model(cls: type[TDataModel], model_input: dict | str) -> TDataModel:
        """import a data model
        if the input is a string, data is read from the JSON file with that name
        if input is a dict, pass key value pairs directly to init function

        Args:
            cls (type[DataModel]): Data model class
            model_input (dict | str): model data input

        Raises:
            ValueError: if model_input has an invalid type

        Returns:
            DataModel: instance of the data model
        """
        return load_model(cls, model_input)
