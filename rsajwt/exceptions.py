# Copyright 2016 Google LLC
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

"""Exceptions used in the rsajwt package."""

from typing import Any, Optional


class RsaJwtError(Exception):
    """Base class for all rsajwt errors."""


class KeyError(RsaJwtError, ValueError):
    """Used to indicate that key material is malformed, encrypted without a
    password being supplied, or unsupported for RS256 signing."""

    def __init__(self, message: Optional[str] = None, *args: Any) -> None:
        super().__init__(message or "Invalid private key.", *args)


class SerializationError(RsaJwtError, TypeError):
    """Used to indicate that a claims or header value could not be
    serialized to a JSON object."""


class SigningError(RsaJwtError):
    """Used to indicate that the underlying signing operation failed."""


class OSError(RsaJwtError, EnvironmentError):
    """Used to wrap EnvironmentError raised while reading key files."""


class DefaultSignerError(RsaJwtError):
    """Used to indicate that loading a signer from the environment failed."""
