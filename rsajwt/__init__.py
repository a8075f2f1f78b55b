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

"""RS256 JSON Web Token signing library."""

from rsajwt._default import default_signer
from rsajwt.crypt import load_key
from rsajwt.jwt import build
from rsajwt.jwt import Jwt


__version__ = "0.1.0"

__all__ = ["Jwt", "build", "default_signer", "load_key"]

