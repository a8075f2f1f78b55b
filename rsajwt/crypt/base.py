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

"""Base classes for cryptographic signers."""

import abc
import io

from rsajwt import exceptions


class Signer(metaclass=abc.ABCMeta):
    """Abstract base class for cryptographic signers."""

    @property
    @abc.abstractmethod
    def key_id(self):
        """Optional[str]: The key ID used to identify this private key."""
        raise NotImplementedError("Key id must be implemented")  # pragma: NO COVER

    @property
    @abc.abstractmethod
    def algorithm(self):
        """str: The JWS ``alg`` value produced by this signer."""
        raise NotImplementedError("Algorithm must be implemented")  # pragma: NO COVER

    @abc.abstractmethod
    def sign(self, message):
        """Signs a message.

        Args:
            message (Union[str, bytes]): The message to be signed.

        Returns:
            bytes: The signature of the message.
        """
        # pylint: disable=missing-raises-doc,redundant-returns-doc
        # (pylint doesn't recognize that this is abstract)
        raise NotImplementedError("Sign must be implemented")  # pragma: NO COVER


class FromKeyFileMixin(object):
    """Mix-in to enable factory constructors for a Signer."""

    @abc.abstractmethod
    def from_string(cls, key, key_id=None, password=None):
        """Construct an Signer instance from a private key string.

        Args:
            key (Union[str, bytes]): Private key as a string.
            key_id (str): An optional key id used to identify the private key.
            password (Union[str, bytes]): An optional passphrase protecting
                the private key.

        Returns:
            rsajwt.crypt.Signer: The constructed signer.

        Raises:
            rsajwt.exceptions.KeyError: If the key cannot be parsed.
        """
        raise NotImplementedError("from_string must be implemented")  # pragma: NO COVER

    @classmethod
    def from_file(cls, filename, key_id=None, password=None):
        """Creates a Signer instance from a PEM key file.

        Args:
            filename (str): The path to the PEM file.
            key_id (str): An optional key id used to identify the private key.
            password (Union[str, bytes]): An optional passphrase protecting
                the private key.

        Returns:
            rsajwt.crypt.Signer: The constructed signer.

        Raises:
            rsajwt.exceptions.OSError: If the file cannot be read.
            rsajwt.exceptions.KeyError: If the key cannot be parsed.
        """
        try:
            with io.open(filename, "rb") as key_file:
                data = key_file.read()
        except EnvironmentError as caught_exc:
            new_exc = exceptions.OSError(
                "Unable to read private key file {}: {}".format(filename, caught_exc)
            )
            raise new_exc from caught_exc

        return cls.from_string(data, key_id=key_id, password=password)
