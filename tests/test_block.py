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

from scm.xmodem.packets.block import BLOCK_SIZE, BlockAssembler, XModemBlock, calculate_checksum
from scm.xmodem.source import FileSource

SUB = 0x1A


class TrickleStream(io.RawIOBase):
    """Binary stream returning a single byte per read call."""

    def __init__(self, data):
        self._data = bytearray(data)

    def readable(self):
        return True

    def read(self, size=-1):
        if not self._data:
            return b""
        byte = bytes(self._data[:1])
        del self._data[:1]
        return byte


def _assembler(data):
    source = FileSource(io.BytesIO(data))
    source.open()
    return BlockAssembler(source)


def test_checksum_is_low_byte_of_sum():
    payload = bytes(range(128))
    assert calculate_checksum(payload) == sum(payload) & 0xFF
    assert calculate_checksum(bytes([0xFF] * 128)) == (0xFF * 128) & 0xFF
    assert calculate_checksum(bytes(128)) == 0


def test_block_layout():
    payload = bytes(range(100, 228))
    block = XModemBlock(7, payload)
    raw = block.output()

    assert len(raw) == BLOCK_SIZE == len(block)
    assert raw[0] == 0x01
    assert raw[1] == 7
    assert raw[2] == 0xF8
    assert raw[3:131] == payload
    assert raw[131] == sum(payload) & 0xFF
    assert block.block_number == 7
    assert block.data == payload
    assert block.checksum == raw[131]


@pytest.mark.parametrize("number", [0, 1, 127, 128, 254, 255, 256, 513])
def test_block_number_complement(number):
    raw = XModemBlock(number, bytes(128)).output()
    assert raw[1] == number & 0xFF
    assert raw[2] == (~raw[1]) & 0xFF


def test_block_rejects_wrong_data_size():
    with pytest.raises(ValueError):
        XModemBlock(1, bytes(127))


def test_block_str_is_hex():
    assert str(XModemBlock(1, bytes(128))).startswith("01 01 FE 00")


def test_full_block_is_not_padded():
    data = bytes(range(128))
    assembler = _assembler(data)

    block = assembler.assemble(1)
    assert block.data == data
    assert assembler.assemble(2) is None


def test_last_block_padded_with_sub():
    data = bytes(range(128)) + b"\xAA\xBB"
    assembler = _assembler(data)

    assembler.assemble(1)
    last = assembler.assemble(2)
    assert last.data == b"\xAA\xBB" + bytes([SUB] * 126)
    assert last.checksum == (0xAA + 0xBB + SUB * 126) & 0xFF
    assert assembler.assemble(3) is None
    assert assembler.assembled_blocks == 2


def test_empty_source_gives_one_padding_block():
    assembler = _assembler(b"")

    block = assembler.assemble(1)
    assert block.data == bytes([SUB] * 128)
    assert assembler.assemble(2) is None


def test_short_reads_are_gathered():
    data = bytes(range(200))
    source = FileSource(TrickleStream(data))
    source.open()
    assembler = BlockAssembler(source)

    assert assembler.assemble(1).data == data[:128]
    assert assembler.assemble(2).data == data[128:] + bytes([SUB] * 56)
    assert assembler.assemble(3) is None
