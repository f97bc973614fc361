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

import os

from scm.xmodem.exception import SourceIOException

_ERROR_OPEN_SOURCE = "Could not open file '%s': %s"
_ERROR_READ_SOURCE = "Could not read file '%s': %s"
_ERROR_SOURCE_NOT_OPEN = "File source is not open"
_ERROR_NO_DATA = "File '%s' has no data available, non-blocking streams are not supported"


class FileSource(object):
    """
    Sequential reader of the data to transfer. It wraps either a file path,
    opened on :meth:`.open`, or an already open binary stream.

    The reading position only moves forward, there is no way to rewind it.
    """

    def __init__(self, src):
        """
        Class constructor. Instantiates a new :class:`.FileSource` with the given parameters.

        Args:
            src (String, path-like or binary stream): location of the file to
                read, or a stream opened in binary mode. Streams are closed
                together with the source.
        """
        if isinstance(src, (str, bytes, os.PathLike)):
            self._path = os.fsdecode(src)
            self._file = None
        else:
            self._path = getattr(src, "name", repr(src))
            self._file = src
        self._size = None
        self._read_bytes = 0

    def __str__(self):
        return str(self._path)

    def open(self):
        """
        Opens the source (if it is not open yet) and calculates its size.

        Raises:
            SourceIOException: if the file cannot be opened.
        """
        try:
            if self._file is None:
                self._file = open(self._path, "rb")
            self._size = self.__remaining_size(self._file)
        except OSError as exc:
            self.close()
            raise SourceIOException(_ERROR_OPEN_SOURCE % (self._path, str(exc))) from exc

    def read(self, size):
        """
        Reads up to ``size`` bytes from the current position.

        Args:
            size (Integer): maximum number of bytes to read.

        Returns:
            Bytes: the read bytes. An empty value means there is no more data.

        Raises:
            SourceIOException: if the source is not open or cannot be read.
        """
        if self._file is None:
            raise SourceIOException(_ERROR_SOURCE_NOT_OPEN)
        try:
            data = self._file.read(size)
        except (OSError, ValueError) as exc:
            raise SourceIOException(_ERROR_READ_SOURCE % (self._path, str(exc))) from exc
        if data is None:
            raise SourceIOException(_ERROR_NO_DATA % self._path)
        self._read_bytes += len(data)
        return data

    def close(self):
        """
        Closes the source. Closing an already closed source does nothing.
        """
        if self._file is None:
            return
        file, self._file = self._file, None
        file.close()

    @property
    def is_open(self):
        """
        Returns whether the source is open.

        Returns:
            Boolean: ``True`` if the source is open, ``False`` otherwise.
        """
        return self._file is not None

    @property
    def size(self):
        """
        Returns the number of bytes to transfer, if known.

        Returns:
            Integer: the size of the data to transfer, ``None`` if it is unknown.
        """
        return self._size

    @property
    def read_bytes(self):
        """
        Returns the number of bytes read so far.

        Returns:
            Integer: the number of bytes read from the source.
        """
        return self._read_bytes

    @staticmethod
    def __remaining_size(stream):
        seekable = getattr(stream, "seekable", None)
        if seekable is None or not seekable():
            return None
        position = stream.tell()
        end = stream.seek(0, os.SEEK_END)
        stream.seek(position, os.SEEK_SET)
        return end - position
