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

import os

from cryptography.hazmat.primitives import serialization
import pytest

from rsajwt.crypt import base


DATA_DIR = os.path.join(os.path.dirname(__file__), "data")

# privatekey.pem is a 2048-bit PKCS#1 key. The other fixtures are derived
# from it:
#   $ openssl pkcs8 -topk8 -nocrypt -in privatekey.pem \
#   >    -out pkcs8_privatekey.pem
#   $ openssl pkcs8 -topk8 -v2 aes-256-cbc -passout pass:notasecret \
#   >    -in privatekey.pem -out encrypted_privatekey.pem
#   $ openssl rsa -in privatekey.pem -pubout -out privatekey.pub
# Unrelated keys used to check rejection:
#   $ openssl genrsa -traditional -out small_privatekey.pem 1024
#   $ openssl ecparam -genkey -name prime256v1 -noout \
#   >    -out ec256_privatekey.pem

ENCRYPTED_KEY_PASSWORD = "notasecret"


def _read(name):
    with open(os.path.join(DATA_DIR, name), "rb") as fh:
        return fh.read()


@pytest.fixture
def private_key_bytes():
    return _read("privatekey.pem")


@pytest.fixture
def pkcs8_key_bytes():
    return _read("pkcs8_privatekey.pem")


@pytest.fixture
def encrypted_key_bytes():
    return _read("encrypted_privatekey.pem")


@pytest.fixture
def small_key_bytes():
    return _read("small_privatekey.pem")


@pytest.fixture
def ec256_key_bytes():
    return _read("ec256_privatekey.pem")


@pytest.fixture
def public_key():
    return serialization.load_pem_public_key(_read("privatekey.pub"))


class FakeSigner(base.Signer):
    def __init__(self, algorithm="RS256", key_id=None):
        self._algorithm = algorithm
        self._key_id = key_id

    @property
    def key_id(self):
        return self._key_id

    @property
    def algorithm(self):
        return self._algorithm

    def sign(self, message):
        return b"signed-message"


@pytest.fixture
def fake_signer():
    return FakeSigner()
