"""Shader source loading and shader setup error codes."""

from __future__ import annotations

import os
from enum import IntEnum
from typing import Optional, Union


class ShaderError(IntEnum):
    """Error codes reported while setting up a shader program."""

    NO_ERROR = 0
    VS_LOAD = 1
    FS_LOAD = 2
    VS_COMPILE = 3
    FS_COMPILE = 4
    SHADER_LINK = 5


_MESSAGES = {
    ShaderError.NO_ERROR: "No error",
    ShaderError.VS_LOAD: "Error loading vertex shader",
    ShaderError.FS_LOAD: "Error loading fragment shader",
    ShaderError.VS_COMPILE: "Error compiling vertex shader",
    ShaderError.FS_COMPILE: "Error compiling fragment shader",
    ShaderError.SHADER_LINK: "Error linking shader",
}


def read_text_file(name: Optional[Union[str, os.PathLike]]) -> str:
    """Return the whole text of the file called name.

    Raises ValueError when no name is given or the file is empty, and
    OSError when the file cannot be opened.
    """
    if name is None:
        raise ValueError("no file name specified")
    with open(name, "r", encoding="utf-8", newline="") as handle:
        content = handle.read()
    if not content:
        raise ValueError(f"{os.fspath(name)}: file is empty")
    return content


def error_string(code: Union[ShaderError, int]) -> str:
    """Return a readable description of a shader error code."""
    try:
        return _MESSAGES[ShaderError(code)]
    except ValueError:
        return f"Unknown error code {int(code)}"