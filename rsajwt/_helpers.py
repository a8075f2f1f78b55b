# Copyright 2015 Google Inc. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Helper functions for commonly used utilities."""

import base64
import dataclasses
import json
from collections.abc import Mapping

from rsajwt import exceptions


def copy_docstring(source_class):
    """Decorator that copies the methods docstring from another class."""

    def decorator(method):
        """Decorator implementation."""
        if method.__doc__:
            raise ValueError("Method already has a docstring.")

        source_method = getattr(source_class, method.__name__)
        method.__doc__ = source_method.__doc__

        return method

    return decorator


def to_bytes(value, encoding="utf-8"):
    """Converts a string value to bytes, if necessary.

    Args:
        value (Union[str, bytes]): The value to be converted.
        encoding (str): The encoding to use to convert unicode to bytes.
            Defaults to "utf-8".

    Returns:
        bytes: The original value converted to bytes (if unicode) or as
            passed in if it started out as bytes.

    Raises:
        ValueError: If the value could not be converted to bytes.
    """
    result = value.encode(encoding) if isinstance(value, str) else value
    if isinstance(result, bytes):
        return result
    else:
        raise ValueError("{0!r} could not be converted to bytes".format(value))


def from_bytes(value):
    """Converts bytes to a string value, if necessary.

    Args:
        value (Union[str, bytes]): The value to be converted.

    Returns:
        str: The original value converted to unicode (if bytes) or as passed in
            if it started out as unicode.

    Raises:
        ValueError: If the value could not be converted to unicode.
    """
    result = value.decode("utf-8") if isinstance(value, bytes) else value
    if isinstance(result, str):
        return result
    else:
        raise ValueError("{0!r} could not be converted to unicode".format(value))


def unpadded_urlsafe_b64encode(value):
    """Encodes base64 strings removing any padding characters.

    `rfc 7515`_ defines Base64url to NOT include any padding
    characters, but the stdlib doesn't do that by default.

    _rfc7515: https://tools.ietf.org/html/rfc7515#page-6

    Args:
        value (Union[str|bytes]): The bytes-like value to encode

    Returns:
        bytes: The encoded value
    """
    return base64.urlsafe_b64encode(to_bytes(value)).rstrip(b"=")


def to_json_object(value):
    """Converts a claims value into a plain mapping ready for JSON encoding.

    Plain dicts are returned as is and other mappings are copied into a
    dict, since :mod:`json` only encodes dicts. Dataclass instances are converted with
    :func:`dataclasses.asdict`, and objects exposing ``to_json_dict`` are
    asked for their mapping form.

    Args:
        value (Any): The claims value.

    Returns:
        Mapping[str, Any]: The mapping to serialize.

    Raises:
        rsajwt.exceptions.SerializationError: If the value has no JSON object
            representation.
    """
    if isinstance(value, Mapping):
        return value if isinstance(value, dict) else dict(value)

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)

    to_json_dict = getattr(value, "to_json_dict", None)
    if callable(to_json_dict):
        result = to_json_dict()
        if isinstance(result, Mapping):
            return result if isinstance(result, dict) else dict(result)
        raise exceptions.SerializationError(
            "{}.to_json_dict() returned {}, expected a mapping.".format(
                type(value).__name__, type(result).__name__
            )
        )

    raise exceptions.SerializationError(
        "Value of type {} cannot be serialized to a JSON object.".format(
            type(value).__name__
        )
    )


def json_dumps(value):
    """Serializes a value to compact UTF-8 JSON bytes.

    Key order is preserved, no whitespace is emitted, and non-ASCII
    characters are written as UTF-8 rather than ``\\u`` escapes.

    Args:
        value (Any): The value to serialize.

    Returns:
        bytes: The JSON document.

    Raises:
        rsajwt.exceptions.SerializationError: If the value cannot be
            represented as JSON.
    """
    try:
        serialized = json.dumps(
            to_json_object(value),
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        ).encode("utf-8")
    except (TypeError, ValueError) as caught_exc:
        if isinstance(caught_exc, exceptions.SerializationError):
            raise
        new_exc = exceptions.SerializationError(
            "Value cannot be serialized to JSON: {}".format(caught_exc)
        )
        raise new_exc from caught_exc

    return serialized
