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

import collections.abc
import dataclasses
import types

import pytest  # type: ignore

from rsajwt import _helpers
from rsajwt import exceptions


class SourceClass(object):
    def func(self):  # pragma: NO COVER
        """example docstring"""


def test_copy_docstring_success():
    def func():  # pragma: NO COVER
        pass

    _helpers.copy_docstring(SourceClass)(func)

    assert func.__doc__ == SourceClass.func.__doc__


def test_copy_docstring_conflict():
    def func():  # pragma: NO COVER
        """existing docstring"""
        pass

    with pytest.raises(ValueError):
        _helpers.copy_docstring(SourceClass)(func)


def test_copy_docstring_non_existing():
    def func2():  # pragma: NO COVER
        pass

    with pytest.raises(AttributeError):
        _helpers.copy_docstring(SourceClass)(func2)


def test_to_bytes_with_bytes():
    value = b"bytes-val"
    assert _helpers.to_bytes(value) == value


def test_to_bytes_with_unicode():
    value = "string-val"
    encoded_value = b"string-val"
    assert _helpers.to_bytes(value) == encoded_value


def test_to_bytes_with_nonstring_type():
    with pytest.raises(ValueError):
        _helpers.to_bytes(object())


def test_from_bytes_with_unicode():
    value = "bytes-val"
    assert _helpers.from_bytes(value) == value


def test_from_bytes_with_bytes():
    value = b"string-val"
    decoded_value = "string-val"
    assert _helpers.from_bytes(value) == decoded_value


def test_from_bytes_with_nonstring_type():
    with pytest.raises(ValueError):
        _helpers.from_bytes(object())


def test_unpadded_urlsafe_b64encode():
    cases = [(b"", b""), (b"a", b"YQ"), (b"aa", b"YWE"), (b"aaa", b"YWFh")]

    for case, expected in cases:
        assert _helpers.unpadded_urlsafe_b64encode(case) == expected


def test_unpadded_urlsafe_b64encode_uses_url_alphabet():
    assert _helpers.unpadded_urlsafe_b64encode(b"\xfb\xff") == b"-_8"


def test_to_json_object_mapping():
    value = collections.OrderedDict([("b", 1), ("a", 2)])
    assert _helpers.to_json_object(value) is value


class ClaimsView(collections.abc.Mapping):
    def __init__(self, data):
        self._data = data

    def __getitem__(self, key):
        return self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)


def test_to_json_object_mapping_proxy():
    value = types.MappingProxyType({"b": 1, "a": 2})
    result = _helpers.to_json_object(value)
    assert type(result) is dict
    assert list(result.items()) == [("b", 1), ("a", 2)]


def test_to_json_object_custom_mapping():
    result = _helpers.to_json_object(ClaimsView({"sub": "me"}))
    assert type(result) is dict
    assert result == {"sub": "me"}


def test_json_dumps_custom_mapping():
    assert _helpers.json_dumps(ClaimsView({"b": 1, "a": 2})) == b'{"b":1,"a":2}'


def test_to_json_object_dataclass():
    @dataclasses.dataclass
    class Claims:
        sub: str
        scopes: list

    assert _helpers.to_json_object(Claims("me", ["a"])) == {
        "sub": "me",
        "scopes": ["a"],
    }


def test_to_json_object_dataclass_type():
    @dataclasses.dataclass
    class Claims:
        sub: str

    with pytest.raises(exceptions.SerializationError):
        _helpers.to_json_object(Claims)


def test_json_dumps_compact():
    assert _helpers.json_dumps({"alg": "RS256", "typ": "JWT"}) == (
        b'{"alg":"RS256","typ":"JWT"}'
    )


def test_json_dumps_utf8():
    assert _helpers.json_dumps({"k": "é"}) == b'{"k":"\xc3\xa9"}'


def test_json_dumps_lone_surrogate():
    with pytest.raises(exceptions.SerializationError):
        _helpers.json_dumps({"k": "\ud800"})


def test_json_dumps_circular():
    value = {}
    value["self"] = value
    with pytest.raises(exceptions.SerializationError):
        _helpers.json_dumps(value)
