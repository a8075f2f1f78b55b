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

"""Environment variables used by :mod:`rsajwt`."""


PRIVATE_KEY_FILE = "RSAJWT_PRIVATE_KEY_FILE"
"""Environment variable defining the location of the PEM private key used by
:func:`rsajwt.default_signer`."""

PRIVATE_KEY_PASSWORD = "RSAJWT_PRIVATE_KEY_PASSWORD"
"""Environment variable holding the passphrase of an encrypted private key."""

KEY_ID = "RSAJWT_KEY_ID"
"""Environment variable defining the key id stamped into the ``kid`` header of
tokens signed by the default signer."""
