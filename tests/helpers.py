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

from scm.xmodem.comm_interface import XModemCommunicationInterface
from scm.xmodem.models.protocol import ControlByte

ACK = bytes([ControlByte.ACK.code])
NAK = bytes([ControlByte.NAK.code])
EOT = bytes([ControlByte.EOT.code])


class FakeClock(object):
    """
    Replaces the ``time`` module used by the sender: sleeping only moves the
    clock forward.
    """

    def __init__(self):
        self.now = 0.0

    def monotonic(self):
        return self.now

    def sleep(self, seconds):
        self.now += seconds


class PeerTransport(XModemCommunicationInterface):
    """
    In-memory link with a scripted receiver. ``reply`` is called with every
    written buffer and returns the bytes the receiver answers with.
    """

    def __init__(self, reply=None, pending=NAK):
        self.writes = []
        self._reply = reply if reply is not None else (lambda frame: ACK)
        self._pending = bytearray(pending)

    def write_bytes(self, data):
        frame = bytes(data)
        self.writes.append(frame)
        self._pending.extend(self._reply(frame))

    def read_available(self):
        data, self._pending = self._pending, bytearray()
        return data

    @property
    def blocks(self):
        return [frame for frame in self.writes if frame != EOT]

    @property
    def eot_count(self):
        return self.writes.count(EOT)


class SlowPeerTransport(PeerTransport):
    """
    Scripted receiver whose answers only become readable ``delay`` seconds
    (of the given clock) after the frame was written.
    """

    def __init__(self, clock, delay, reply=None, pending=NAK):
        super().__init__(reply, pending)
        self._clock = clock
        self._delay = delay
        self._scheduled = []

    def write_bytes(self, data):
        frame = bytes(data)
        self.writes.append(frame)
        self._scheduled.append((self._clock.now + self._delay, self._reply(frame)))

    def read_available(self):
        due = [answer for when, answer in self._scheduled if when <= self._clock.now]
        self._scheduled = [(when, answer) for when, answer in self._scheduled
                           if when > self._clock.now]
        for answer in due:
            self._pending.extend(answer)
        return super().read_available()
