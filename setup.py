# Copyright 2014 Google Inc.
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

import io
import os

from setuptools import find_packages
from setuptools import setup


DEPENDENCIES = ("cryptography >= 38.0.3",)

testing_extra_require = [
    "pytest",
    "pytest-cov",
]

extras = {"testing": testing_extra_require}

package_root = os.path.abspath(os.path.dirname(__file__))

version = {}
with io.open(os.path.join(package_root, "rsajwt", "__init__.py")) as fp:
    for line in fp:
        if line.startswith("__version__"):
            exec(line, version)

setup(
    name="rsajwt",
    version=version["__version__"],
    author="rsajwt authors",
    description="RS256 JSON Web Token signing library",
    long_description="Builds compact RS256-signed JSON Web Tokens from PEM RSA keys.",
    url="https://github.com/rsajwt/rsajwt",
    packages=find_packages(exclude=("tests*", "docs*")),
    package_data={"rsajwt": ["py.typed"]},
    install_requires=DEPENDENCIES,
    extras_require=extras,
    python_requires=">=3.9",
    license="Apache 2.0",
    keywords="jwt jws rs256 rsa signing",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Topic :: Internet :: WWW/HTTP",
        "Topic :: Security :: Cryptography",
    ],
)
