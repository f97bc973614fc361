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

from enum import Enum, unique

from scm.xmodem.util import utils


@unique
class ControlByte(Enum):
    """
    Enumerates the control bytes of the XModem protocol.

    | Inherited properties:
    |     **name** (String): name (ID) of this ControlByte.
    |     **value** (Integer): the value of this ControlByte.
    """

    SOH = (0x01, "Start of header")
    EOT = (0x04, "End of transmission")
    ACK = (0x06, "Acknowledge")
    NAK = (0x15, "Negative acknowledge")
    SUB = (0x1A, "Substitute (padding)")

    def __init__(self, code, description):
        self.__code = code
        self.__description = description

    @property
    def code(self):
        """
        Returns the code of the ControlByte element.

        Returns:
            Integer: the code of the ControlByte element.
        """
        return self.__code

    @property
    def description(self):
        """
        Returns the description of the ControlByte element.

        Returns:
            String: the description of the ControlByte element.
        """
        return self.__description


ControlByte.__doc__ += utils.doc_enum(
    ControlByte, {b.name: "0x%02X - %s" % (b.code, b.description) for b in ControlByte})
