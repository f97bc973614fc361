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

import abc
from abc import abstractmethod


class XModemCommunicationInterface(metaclass=abc.ABCMeta):
    """
    This class represents the already established link with the remote end
    an XModem transfer is sent through.

    Implementations must not block when reading: the transfer engine polls
    the interface and sleeps between attempts.
    """

    @abstractmethod
    def write_bytes(self, data):
        """
        Writes the given data to the underlying hardware interface.

        Subclasses may throw specific exceptions to signal implementation
        specific hardware errors.

        Args:
            data (Bytearray): The data to write. The whole buffer is written
                or an exception is raised.

        Raises:
            TransportIOException: If there is any error writing the data.
        """

    def write_byte(self, value):
        """
        Writes a single byte to the underlying hardware interface.

        Args:
            value (Integer): The byte to write.

        Raises:
            TransportIOException: If there is any error writing the byte.
        """
        self.write_bytes(bytearray([value & 0xFF]))

    @abstractmethod
    def read_available(self):
        """
        Asynchronous. Reads all bytes received since the last call. May read
        0 bytes, but never waits for data to arrive.

        Returns:
            Bytearray: The bytes read.

        Raises:
            TransportIOException: If there is any error reading.
        """
