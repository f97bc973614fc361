# Copyright 2026, Digi International Inc.
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
#
# THE SOFTWARE IS PROVIDED "AS IS" AND THE AUTHOR DISCLAIMS ALL WARRANTIES
# WITH REGARD TO THIS SOFTWARE INCLUDING ALL IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS. IN NO EVENT SHALL THE AUTHOR BE LIABLE FOR
# ANY SPECIAL, DIRECT, INDIRECT, OR CONSEQUENTIAL DAMAGES OR ANY DAMAGES
# WHATSOEVER RESULTING FROM LOSS OF USE, DATA OR PROFITS, WHETHER IN AN
# ACTION OF CONTRACT, NEGLIGENCE OR OTHER TORTIOUS ACTION, ARISING OUT OF
# OR IN CONNECTION WITH THE USE OR PERFORMANCE OF THIS SOFTWARE.

import io

import pytest

from scm.xmodem.exception import SourceIOException
from scm.xmodem.source import FileSource


class BrokenStream(io.BytesIO):

    def read(self, size=-1):
        raise OSError("device not ready")


def test_path_source(tmp_path):
    path = tmp_path / "firmware.bin"
    path.write_bytes(b"0123456789")
    source = FileSource(str(path))

    assert not source.is_open
    source.open()
    assert source.is_open
    assert source.size == 10
    assert source.read(4) == b"0123"
    assert source.read(100) == b"456789"
    assert source.read(1) == b""
    assert source.read_bytes == 10
    source.close()
    assert not source.is_open


def test_stream_size_counts_from_current_position():
    stream = io.BytesIO(b"headerpayload")
    stream.seek(6)
    source = FileSource(stream)
    source.open()

    assert source.size == 7
    assert source.read(7) == b"payload"


def test_missing_file(tmp_path):
    source = FileSource(tmp_path / "missing.bin")
    with pytest.raises(SourceIOException):
        source.open()
    assert not source.is_open


def test_read_error_is_wrapped():
    source = FileSource(BrokenStream(b"data"))
    source.open()
    with pytest.raises(SourceIOException) as exc_info:
        source.read(1)
    assert isinstance(exc_info.value.__cause__, OSError)


def test_read_before_open(tmp_path):
    with pytest.raises(SourceIOException):
        FileSource(tmp_path / "file.bin").read(1)


def test_close_closes_stream_once():
    stream = io.BytesIO(b"data")
    source = FileSource(stream)
    source.open()
    source.close()
    source.close()

    assert stream.closed
    assert not source.is_open


class NonBlockingStream(io.RawIOBase):

    def readable(self):
        return True

    def read(self, size=-1):
        return None


def test_non_blocking_stream_without_data():
    source = FileSource(NonBlockingStream())
    source.open()
    with pytest.raises(SourceIOException):
        source.read(128)
