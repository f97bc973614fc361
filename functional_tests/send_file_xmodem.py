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
import tempfile

from scm.xmodem.exception import ReceiverConnectTimeoutException
from scm.xmodem.sender import XModemSender, send_file_xmodem
from scm.xmodem.serial import XModemSerialPort

# TODO: Replace with the serial port where the XModem receiver is connected to.
PORT_RECEIVER = "COM1"
# TODO: Replace with the serial port of an idle link (nothing answering).
PORT_IDLE = "COM2"
# TODO: Replace with the baud rate of both ports.
BAUD_RATE = 9600

FILE_SIZES = (0, 128, 130, 128 * 300)


def main():

    print(" +-----------------------+")
    print(" | XModem Send File Test |")
    print(" +-----------------------+\n")

    receiver = XModemSerialPort(BAUD_RATE, PORT_RECEIVER)
    idle = XModemSerialPort(BAUD_RATE, PORT_IDLE)
    timeout_exception = None

    try:
        receiver.open()
        idle.open()

        for size in FILE_SIZES:
            fd, path = tempfile.mkstemp()
            try:
                os.write(fd, os.urandom(size))
                os.close(fd)
                print("Start the receiver to get a %d bytes file..." % size)
                progress = []
                send_file_xmodem(path, receiver, progress_cb=progress.append)
                assert (size == 0 or progress[-1] == 100)
            finally:
                os.remove(path)

        try:
            XModemSender(idle, os.devnull, response_timeout=5).send_file()
        except ReceiverConnectTimeoutException as e:
            timeout_exception = e

    finally:
        assert (timeout_exception is not None)

        print("Test finished successfully")

        if receiver is not None and receiver.is_open:
            receiver.close()
        if idle is not None and idle.is_open:
            idle.close()


if __name__ == "__main__":
    main()
