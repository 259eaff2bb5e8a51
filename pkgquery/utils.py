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
import os
from enum import Enum
from typing import Type, TypeVar

from pydantic import BaseModel

TModel = TypeVar("TModel", bound=BaseModel)


class AutoNameStrEnum(Enum):
    """For enums where the value is the same as the name of the attribute"""

    @staticmethod
    def _generate_next_value_(name, start, count, last_values):
        """Name is the attributes name and the return will be its value"""
        return name


def load_model(model_cls: Type[TModel], model_input: dict | str) -> TModel:
    """build a pydantic model from a dict or from a JSON file

    Args:
        model_cls (Type[TModel]): model class to build
        model_input (dict | str): dict of field values or path to a JSON file

    Raises:
        ValueError: if model_input has an invalid type

    Returns:
        TModel: instance of the model
    """
    if isinstance(model_input, dict):
        return model_cls(**model_input)

    if isinstance(model_input, str):
        with open(model_input, "r", encoding="utf-8") as input_file:
            data = json.load(input_file)
        return model_cls(**data)

    raise ValueError(f"Invalid input for {model_cls.__name__}")


def get_unique_filename(directory, filename) -> str:
    """Checks if the file exists in the directory and returns a new filename if it does.
    Parameters
    ----------
    directory : str
        Directory of the file to be saved
    filename : str
        Proposed name of the file to save, unique filename will be generated based on this
        if it already exists, example: "file.txt" -> "file(1).txt" if "file.txt" already exists
    Returns
    -------
    str
        The new unique filename to save
    """
    filepath = os.path.join(directory, filename)
    if not os.path.isfile(filepath):
        return filename
    name, ext = os.path.splitext(filename)
    count = 1
    while True:
        new_name = f"{name}({count}){ext}"
        new_path = os.path.join(directory, new_name)
        if not os.path.exists(new_path):
            return new_name
        count += 1
