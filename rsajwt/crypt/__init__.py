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

"""Cryptography helpers for signing messages.

The simplest way to get a signer is :func:`load_key`::

    signer = crypt.load_key(pem_bytes, key_id='key-1')
    signature = signer.sign(message)

Signers can also be read straight from a PEM file::

    signer = crypt.RSASigner.from_file('private_key.pem')

Encrypted keys take a ``password``. Any failure to parse, decrypt or accept
the key raises :class:`rsajwt.exceptions.KeyError`.
"""

from rsajwt.crypt import base
from rsajwt.crypt import rsa


Signer = base.Signer
RSASigner = rsa.RSASigner


def load_key(pem_bytes, password=None, key_id=None):
    """Parses and validates a PEM-encoded RSA private key.

    Args:
        pem_bytes (Union[str, bytes]): The PKCS#1 or PKCS#8 PEM document.
        password (Union[str, bytes]): The passphrase, if the key is
            encrypted.
        key_id (str): An optional key id, stamped into the ``kid`` header of
            tokens signed with this key.

    Returns:
        rsajwt.crypt.RSASigner: A signer usable by :func:`rsajwt.jwt.build`.

    Raises:
        rsajwt.exceptions.KeyError: If the key is malformed, needs a
            password that was not supplied, is not RSA, or is shorter than
            2048 bits.
    """
    return RSASigner.from_string(pem_bytes, key_id=key_id, password=password)


__all__ = ["RSASigner", "Signer", "load_key"]
