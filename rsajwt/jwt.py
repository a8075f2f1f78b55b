# Copyright 2016 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""JSON Web Tokens

Provides support for creating (encoding) RS256-signed JSON Web Tokens.

To encode a JWT use :func:`build`::

    from rsajwt import crypt
    from rsajwt import jwt

    signer = crypt.load_key(private_key_pem)
    payload = {'some': 'payload'}
    token = jwt.build(payload, signer)

The header always starts with ``{"alg":"RS256","typ":"JWT"}``. Extra header
fields such as ``kid`` can be passed with ``header``; they are appended after
the fixed fields and can never replace ``alg`` or ``typ``.

If you need the raw bytes, as handed to HTTP libraries, use :func:`encode`.

.. _rfc7519: https://tools.ietf.org/html/rfc7519
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional

from rsajwt import _helpers
from rsajwt import crypt
from rsajwt import exceptions

_LOGGER = logging.getLogger(__name__)

_ALGORITHM: str = "RS256"
_TYPE: str = "JWT"
_RESERVED_HEADER_FIELDS: frozenset[str] = frozenset(["alg", "typ"])


def _check_signer(signer: Any) -> None:
    if not isinstance(signer, crypt.Signer):
        raise exceptions.KeyError(
            "Expected a loaded signing key, got {}.".format(type(signer).__name__)
        )
    if signer.algorithm != _ALGORITHM:
        raise exceptions.SigningError(
            "Signer produces {} signatures, only {} is supported.".format(
                signer.algorithm, _ALGORITHM
            )
        )


def make_header(
    signer: crypt.Signer, header: Optional[Mapping[str, Any]] = None
) -> dict[str, Any]:
    """Builds the JOSE header for a token signed by ``signer``.

    Args:
        signer (rsajwt.crypt.Signer): The signer that will sign the token.
        header (Mapping[str, Any]): Additional header fields.

    Returns:
        dict[str, Any]: ``alg`` and ``typ`` followed by the additional
            fields, then ``kid`` when the signer has a key id and no ``kid``
            was supplied.
    """
    result: dict[str, Any] = {"alg": _ALGORITHM, "typ": _TYPE}

    if header is not None:
        for key, value in _helpers.to_json_object(header).items():
            if key in _RESERVED_HEADER_FIELDS:
                _LOGGER.debug("Ignoring header override for reserved field %s", key)
                continue
            result[key] = value

    key_id = signer.key_id
    if key_id is not None and "kid" not in result:
        result["kid"] = key_id

    return result


def encode(
    signer: crypt.Signer,
    payload: Any,
    header: Optional[Mapping[str, Any]] = None,
) -> bytes:
    """Make a signed JWT.

    Args:
        signer (rsajwt.crypt.Signer): The signer used to sign the JWT.
        payload (Any): The JWT payload. A mapping, a dataclass instance, or an
            object with a ``to_json_dict`` method.
        header (Mapping[str, Any]): Additional JWT header fields.

    Returns:
        bytes: The encoded JWT.

    Raises:
        rsajwt.exceptions.KeyError: If ``signer`` is not a loaded signer.
        rsajwt.exceptions.SerializationError: If the payload or header
            cannot be serialized to a JSON object.
        rsajwt.exceptions.SigningError: If signing fails or the signer does
            not produce RS256 signatures.
    """
    _check_signer(signer)

    jose_header = make_header(signer, header)

    segments = [
        _helpers.unpadded_urlsafe_b64encode(_helpers.json_dumps(jose_header)),
        _helpers.unpadded_urlsafe_b64encode(_helpers.json_dumps(payload)),
    ]

    signing_input = b".".join(segments)
    signature = signer.sign(signing_input)
    segments.append(_helpers.unpadded_urlsafe_b64encode(signature))

    _LOGGER.debug("Signed JWT with header fields %s", sorted(jose_header))

    return b".".join(segments)


def build(
    claims: Any,
    key: crypt.Signer,
    header: Optional[Mapping[str, Any]] = None,
) -> str:
    """Make a signed JWT and return it as a string.

    Args:
        claims (Any): The JWT claims, see :func:`encode`.
        key (rsajwt.crypt.Signer): A key loaded with
            :func:`rsajwt.crypt.load_key`.
        header (Mapping[str, Any]): Additional JWT header fields.

    Returns:
        str: The compact serialization
            ``base64url(header).base64url(claims).base64url(signature)``.

    Raises:
        rsajwt.exceptions.KeyError: If ``key`` is not a loaded signer.
        rsajwt.exceptions.SerializationError: If the claims or header
            cannot be serialized to a JSON object.
        rsajwt.exceptions.SigningError: If signing fails or the signer does
            not produce RS256 signatures.
    """
    return encode(key, claims, header=header).decode("ascii")


class Jwt(object):
    """A claims value bound to the key that will sign it.

    Args:
        claims (Any): The JWT claims, see :func:`encode`.
        key (rsajwt.crypt.Signer): The signing key.

    Raises:
        rsajwt.exceptions.KeyError: If ``key`` is not a loaded signer.
        rsajwt.exceptions.SerializationError: If ``claims`` cannot be
            serialized to a JSON object.
    """

    def __init__(self, claims: Any, key: crypt.Signer) -> None:
        _check_signer(key)
        _helpers.json_dumps(claims)
        self._claims = claims
        self._key = key

    @property
    def claims(self) -> Any:
        """Any: The claims carried by the token."""
        return self._claims

    @property
    def algorithm(self) -> str:
        """str: The JWS algorithm of the token."""
        return self._key.algorithm

    def header(self, header: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        """Returns the JOSE header the token will carry."""
        return make_header(self._key, header)

    def finalize(self, header: Optional[Mapping[str, Any]] = None) -> str:
        """Encodes and signs the token.

        Args:
            header (Mapping[str, Any]): Additional JWT header fields.

        Returns:
            str: The signed JWT.
        """
        return build(self._claims, self._key, header=header)

    def __str__(self) -> str:
        return "Jwt: \n header: {} \n body: {}, \n algorithm: {}".format(
            json.dumps(self.header(), indent=2),
            json.dumps(_helpers.to_json_object(self._claims), indent=2, default=repr),
            self.algorithm,
        )

    def __repr__(self) -> str:
        return "{}(algorithm={!r}, key_id={!r})".format(
            type(self).__name__, self.algorithm, self._key.key_id
        )
