# Copyright 2017 Google LLC
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

"""
RSA cryptography signer.

This file provides a shared wrapper that defers to _cryptography_rsa for the
implementation.
"""

from rsajwt import _helpers
from rsajwt.crypt import _cryptography_rsa
from rsajwt.crypt import base


class RSASigner(base.Signer, base.FromKeyFileMixin):
    """Signs messages with an RSA private key.

    Args:
        private_key (cryptography.hazmat.primitives.asymmetric.rsa.RSAPrivateKey):
            The private key to sign with.
        key_id (str): Optional key ID used to identify this private key. This
            can be useful to associate the private key with its associated
            public key or certificate.

    Raises:
        rsajwt.exceptions.KeyError: if an unrecognized or too short private
            key is provided
    """

    def __init__(self, private_key, key_id=None):
        self._impl = _cryptography_rsa.RSASigner(private_key, key_id=key_id)

    @classmethod
    def _from_impl(cls, impl):
        signer = cls.__new__(cls)
        signer._impl = impl
        return signer

    @property  # type: ignore
    @_helpers.copy_docstring(base.Signer)
    def key_id(self):
        return self._impl.key_id

    @property  # type: ignore
    @_helpers.copy_docstring(base.Signer)
    def algorithm(self):
        return self._impl.algorithm

    @property
    def key_size(self):
        """int: The size of the RSA modulus in bits."""
        return self._impl.key_size

    @_helpers.copy_docstring(base.Signer)
    def sign(self, message):
        return self._impl.sign(message)

    @classmethod
    def from_string(cls, key, key_id=None, password=None):
        """Construct an Signer instance from a private key in PEM format.

        Args:
            key (Union[str, bytes]): Private key in PEM format.
            key_id (str): An optional key id used to identify the private key.
            password (Union[str, bytes]): The passphrase of an encrypted key.

        Returns:
            rsajwt.crypt.RSASigner: The constructed signer.

        Raises:
            rsajwt.exceptions.KeyError: If the key cannot be parsed as PKCS#1
                or PKCS#8 in PEM format, or is not a usable RSA key.
        """
        return cls._from_impl(
            _cryptography_rsa.RSASigner.from_string(
                key, key_id=key_id, password=password
            )
        )
