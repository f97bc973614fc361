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

import enum

from serial import Serial, EIGHTBITS, STOPBITS_ONE, PARITY_NONE, SerialException

from scm.xmodem.comm_interface import XModemCommunicationInterface
from scm.xmodem.exception import TransportIOException


class FlowControl(enum.Enum):
    """
    This class represents all available flow controls.
    """

    NONE = None
    SOFTWARE = 0
    HARDWARE_RTS_CTS = 1
    HARDWARE_DSR_DTR = 2


class XModemSerialPort(Serial, XModemCommunicationInterface):
    """
    This class extends the functionality of Serial class (PySerial) to be
    used as the link of an XModem transfer.

    It also introduces a minor change in its behaviour: the serial port is not
    automatically open when instantiated, only when calling open().

    .. seealso::
       | _PySerial: https://github.com/pyserial/pyserial
    """

    __DEFAULT_PORT_TIMEOUT = 0.1  # seconds
    __DEFAULT_DATA_BITS = EIGHTBITS
    __DEFAULT_STOP_BITS = STOPBITS_ONE
    __DEFAULT_PARITY = PARITY_NONE
    __DEFAULT_FLOW_CONTROL = FlowControl.NONE
    __DEFAULT_EXCLUSIVE = True

    def __init__(self, baud_rate, port, data_bits=__DEFAULT_DATA_BITS,
                 stop_bits=__DEFAULT_STOP_BITS, parity=__DEFAULT_PARITY,
                 flow_control=__DEFAULT_FLOW_CONTROL,
                 timeout=__DEFAULT_PORT_TIMEOUT, exclusive=__DEFAULT_EXCLUSIVE):
        """
        Class constructor. Instantiates a new `XModemSerialPort` object with the
        given port parameters.

        Args:
            baud_rate (Integer): Serial port baud rate.
            port (String): Serial port name to use.
            data_bits (Integer, optional, default=8): Serial data bits.
            stop_bits (Float, optional, default=1): Serial stop bits.
            parity (Char, optional, default=`N`): Parity. Default to 'N' (None).
            flow_control (Integer, optional, default=`None`): Flow control.
            timeout (Integer, optional, default=0.1): Read timeout (seconds).
            exclusive (Boolean, optional, default=`True`): Set exclusive access
                mode (POSIX only). A port cannot be opened in exclusive access
                mode if it is already open in exclusive access mode.

        .. seealso::
           | _PySerial: https://github.com/pyserial/pyserial
        """
        flow_settings = {}
        if flow_control == FlowControl.SOFTWARE:
            flow_settings["xonxoff"] = True
        elif flow_control == FlowControl.HARDWARE_DSR_DTR:
            flow_settings["dsrdtr"] = True
        elif flow_control == FlowControl.HARDWARE_RTS_CTS:
            flow_settings["rtscts"] = True
        Serial.__init__(self, port=None, baudrate=baud_rate,
                        bytesize=data_bits, stopbits=stop_bits,
                        parity=parity, timeout=timeout,
                        exclusive=exclusive, **flow_settings)
        self.port = port

    def __str__(self):
        return '{name} {p.portstr!r}'.format(name=self.__class__.__name__, p=self)

    @property
    def is_interface_open(self):
        """
        Returns whether the underlying hardware communication interface is active.

        Returns:
            Boolean. `True` if the interface is active, `False` otherwise.
        """
        return self.is_open

    def write_bytes(self, data):
        """
        Writes the given data to the serial port.

        Args:
            data (Bytearray): The data to write.

        Raises:
            TransportIOException: If there is any error writing the data or
                not all of it could be written.
        """
        try:
            written = self.write(data)
        except SerialException as exc:
            raise TransportIOException(str(exc)) from exc
        if written is not None and written != len(data):
            raise TransportIOException(
                "Only %d of %d bytes were written" % (written, len(data)))

    def read_available(self):
        """
        Asynchronous. Reads all bytes in the serial port buffer. May read 0 bytes.

        Returns:
            Bytearray: The bytes read.

        Raises:
            TransportIOException: If there is any error reading the port.
        """
        try:
            return bytearray(self.read(self.in_waiting))
        except SerialException as exc:
            raise TransportIOException(str(exc)) from exc
