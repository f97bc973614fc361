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

from scm.xmodem.models.protocol import ControlByte
from scm.xmodem.util import utils

BLOCK_DATA_SIZE = 128
BLOCK_HEADER_SIZE = 3
BLOCK_SIZE = BLOCK_HEADER_SIZE + BLOCK_DATA_SIZE + 1

_CHECKSUM_INDEX = BLOCK_SIZE - 1


class XModemBlock:
    """
    This class represents a 128 bytes XModem block with checksum
    verification::

        SOH | block number | ~block number | data (128 bytes) | checksum

    The frame is built once and kept, so a retransmission sends exactly the
    same bytes.
    """

    def __init__(self, block_number, data):
        """
        Class constructor. Instantiates a new :class:`.XModemBlock` object.

        Args:
            block_number (Integer): the block number, only its 8 lower bits
                are used.
            data (Bytearray): exactly 128 bytes of (padded) data.

        Raises:
            ValueError: if ``data`` is not 128 bytes long.
        """
        if len(data) != BLOCK_DATA_SIZE:
            raise ValueError("Block data must be %d bytes long" % BLOCK_DATA_SIZE)

        block_number &= 0xFF
        self._frame = bytearray(BLOCK_SIZE)
        self._frame[0] = ControlByte.SOH.code
        self._frame[1] = block_number
        self._frame[2] = ~block_number & 0xFF
        self._frame[BLOCK_HEADER_SIZE:_CHECKSUM_INDEX] = data
        self._frame[_CHECKSUM_INDEX] = calculate_checksum(data)

    def __len__(self):
        return BLOCK_SIZE

    def __str__(self):
        return utils.hex_to_string(self._frame)

    def __eq__(self, other):
        if not isinstance(other, XModemBlock):
            return False
        return self._frame == other._frame

    def __hash__(self):
        return hash(bytes(self._frame))

    def output(self):
        """
        Returns the raw bytes of this block.

        Returns:
            Bytes: the 132 bytes frame to send.
        """
        return bytes(self._frame)

    @property
    def block_number(self):
        """
        Returns the number of this block.

        Returns:
            Integer: the block number (0 to 255).
        """
        return self._frame[1]

    @property
    def data(self):
        """
        Returns the data carried by this block, padding included.

        Returns:
            Bytes: the 128 data bytes.
        """
        return bytes(self._frame[BLOCK_HEADER_SIZE:_CHECKSUM_INDEX])

    @property
    def checksum(self):
        """
        Returns the checksum of this block.

        Returns:
            Integer: the checksum byte.
        """
        return self._frame[_CHECKSUM_INDEX]


class BlockAssembler:
    """
    Helper class used to split the data of a :class:`.FileSource` in XModem
    blocks.
    """

    def __init__(self, source, pad_byte=ControlByte.SUB.code):
        """
        Class constructor. Instantiates a new :class:`.BlockAssembler`.

        Args:
            source (:class:`.FileSource`): the open source to read data from.
            pad_byte (Integer, optional): byte used to fill the last block.
        """
        self._source = source
        self._pad_byte = pad_byte
        self._assembled = 0

    def assemble(self, block_number):
        """
        Reads the next 128 bytes of the source and builds a block with them.

        If the source ends in the middle of the block, the rest of the data is
        filled with the pad byte. If there is no data at all for the block,
        there is no block to send, unless this is the first block: an empty
        source is still sent as one block made of padding.

        Args:
            block_number (Integer): the number of the block to build.

        Returns:
            :class:`.XModemBlock`: the new block, ``None`` if there is no more
                data to send.

        Raises:
            SourceIOException: if the source cannot be read.
        """
        data = bytearray()
        while len(data) < BLOCK_DATA_SIZE:
            chunk = self._source.read(BLOCK_DATA_SIZE - len(data))
            if not chunk:
                break
            data.extend(chunk)

        if not data and self._assembled > 0:
            return None

        if len(data) < BLOCK_DATA_SIZE:
            data.extend([self._pad_byte] * (BLOCK_DATA_SIZE - len(data)))

        self._assembled += 1
        return XModemBlock(block_number, data)

    @property
    def assembled_blocks(self):
        """
        Returns the number of blocks built so far.

        Returns:
            Integer: the number of assembled blocks.
        """
        return self._assembled


def calculate_checksum(data):
    """
    Calculates and returns the checksum verification byte of the given data.

    Args:
        data (Bytearray): the data to calculate its checksum verification byte.

    Returns:
        Integer: the checksum verification byte of the given data.
    """
    checksum = 0
    for byte in data:
        checksum += byte & 0xFF

    return checksum & 0xFF
