#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Miscellaneous helpers: file lookup, configuration loading and value conversion."""

import json
import logging
import os
import re
from typing import Any, Optional, Union

import yaml

from spiprog.exceptions import SPIProgError

logger = logging.getLogger(__name__)


def get_abs_path(file_path: str, base_dir: Optional[str] = None) -> str:
    """Return a full path to the file.

    :param file_path: File path (absolute or relative).
    :param base_dir: Base directory for relative paths, defaults to current working directory.
    :return: Absolute path to the file with forward slashes.
    """
    if os.path.isabs(file_path):
        return file_path.replace("\\", "/")
    return os.path.abspath(os.path.join(base_dir or os.getcwd(), file_path)).replace("\\", "/")


def find_file(
    file_path: str,
    use_cwd: bool = True,
    search_paths: Optional[list[str]] = None,
    raise_exc: bool = True,
) -> str:
    """Find file in filesystem.

    Search paths take precedence over the current working directory.

    :param file_path: File name, part of file path or full path to search for.
    :param use_cwd: Try current working directory to find the file, defaults to True.
    :param search_paths: List of paths where to search for the file, defaults to None.
    :param raise_exc: Raise exception if file is not found, defaults to True.
    :return: Full absolute path to the found file, empty string if not found and not raising.
    :raises SPIProgError: File not found in any of the search locations.
    """
    path = file_path.replace("\\", "/")
    if os.path.isabs(path):
        if os.path.isfile(path):
            return path
        if raise_exc:
            raise SPIProgError(f"File '{path}' not found")
        return ""
    for dir_candidate in search_paths or []:
        if not dir_candidate:
            continue
        path_candidate = get_abs_path(path, base_dir=dir_candidate)
        if os.path.isfile(path_candidate):
            return path_candidate
    if use_cwd and os.path.isfile(path):
        return get_abs_path(path)
    searched_in: list[str] = []
    if use_cwd:
        searched_in.append(os.path.abspath(os.curdir))
    searched_in.extend(filter(None, search_paths or []))
    err_str = f"File '{path}' not found, Searched in: {', '.join(searched_in)}"
    if not raise_exc:
        logger.debug(err_str)
        return ""
    raise SPIProgError(err_str)


def load_text(path: str, search_paths: Optional[list[str]] = None) -> str:
    """Load text file content into string.

    :param path: Path to the text file to load.
    :param search_paths: List of directories to search for the file, defaults to None.
    :return: Content of the text file as string.
    """
    path = find_file(path, search_paths=search_paths)
    logger.debug(f"Loading text file from {path}")
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def load_configuration(path: str, search_paths: Optional[list[str]] = None) -> dict[str, Any]:
    """Load configuration from YAML or JSON file.

    The content is parsed as JSON first, then as YAML.

    :param path: Path to configuration file (relative or absolute).
    :param search_paths: List of paths where to search for the file, defaults to None.
    :raises SPIProgError: When file cannot be loaded, parsed, or contains invalid format.
    :return: Content of configuration as dictionary.
    """
    try:
        config = load_text(path, search_paths=search_paths)
    except Exception as exc:
        raise SPIProgError(f"Can't load configuration file: {str(exc)}") from exc

    config_data: Optional[Any] = None
    try:
        config_data = json.loads(config)
    except json.JSONDecodeError:
        try:
            config_data = yaml.safe_load(config)
        except (yaml.YAMLError, UnicodeDecodeError):
            pass

    if not config_data:
        raise SPIProgError(f"Can't parse configuration file: {path}")
    if not isinstance(config_data, dict):
        raise SPIProgError(f"Invalid configuration file: {path}")

    return config_data


def value_to_int(value: Union[bytes, bytearray, int, str], default: Optional[int] = None) -> int:
    """Convert value from multiple formats to integer.

    :param value: Input value to convert (int, bytes, bytearray, or str).
    :param default: Default value returned when conversion fails.
    :return: Converted integer value.
    :raises SPIProgError: Unsupported input type or invalid conversion without default.
    """
    if isinstance(value, int):
        return value

    if isinstance(value, (bytes, bytearray)):
        return int.from_bytes(value, "big")

    if isinstance(value, str) and value != "":
        match = re.match(
            r"(?P<prefix>0[box])?(?P<number>[0-9a-f_]+)(?P<suffix>[ul]{0,3})$",
            value.strip().lower(),
        )
        if match:
            base = {"0b": 2, "0o": 8, "0x": 16, None: 10}[match.group("prefix")]
            try:
                return int(match.group("number"), base=base)
            except ValueError:
                pass

    if default is not None:
        return default
    raise SPIProgError(f"Invalid input number type({type(value)}) with value ({value})")


def hex_bytes(data: Union[bytes, bytearray]) -> str:
    """Format binary data as space separated hex bytes.

    :param data: Data to format.
    :return: e.g. ``"ac 53 00 00"``.
    """
    return " ".join(f"{b:02x}" for b in data)
