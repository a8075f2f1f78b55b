# Copyright 2015 Google Inc.
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

"""Default signer.

Loads the signing key named by the environment.
"""

import logging
import os

from rsajwt import crypt
from rsajwt import environment_vars
from rsajwt import exceptions

_LOGGER = logging.getLogger(__name__)


def default_signer():
    """Gets the signer configured for the current environment.

    The key is read from the PEM file named by the
    ``RSAJWT_PRIVATE_KEY_FILE`` environment variable. An encrypted key is
    decrypted with ``RSAJWT_PRIVATE_KEY_PASSWORD``, and ``RSAJWT_KEY_ID``, if
    set, becomes the signer's key id::

        import rsajwt

        token = rsajwt.build({'sub': 'me'}, rsajwt.default_signer())

    Returns:
        rsajwt.crypt.RSASigner: The configured signer.

    Raises:
        rsajwt.exceptions.DefaultSignerError: If no key file is configured.
        rsajwt.exceptions.OSError: If the key file cannot be read.
        rsajwt.exceptions.KeyError: If the key file does not hold a usable
            RSA private key.
    """
    filename = os.environ.get(environment_vars.PRIVATE_KEY_FILE)
    if not filename:
        raise exceptions.DefaultSignerError(
            "No signing key configured. Set the {} environment variable to "
            "the path of a PEM encoded RSA private key.".format(
                environment_vars.PRIVATE_KEY_FILE
            )
        )

    _LOGGER.debug(
        "Loading signing key from %s set in %s",
        filename,
        environment_vars.PRIVATE_KEY_FILE,
    )

    return crypt.RSASigner.from_file(
        filename,
        key_id=os.environ.get(environment_vars.KEY_ID) or None,
        password=os.environ.get(environment_vars.PRIVATE_KEY_PASSWORD),
    )
