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

import threading

from scm.xmodem.exception import TransferCancelledException, XModemException
from scm.xmodem.sender import XModemSender
from scm.xmodem.serial import XModemSerialPort

# TODO: Replace with the serial port where the receiver is connected to.
PORT = "COM1"
# TODO: Replace with the baud rate of the receiver.
BAUD_RATE = 9600
# TODO: Replace with the location of the file to send.
FILE_TO_SEND = "<path_to_file>"


def main():
    print(" +-------------------------------------------+")
    print(" | SCM XModem Library Cancel Transfer Sample |")
    print(" +-------------------------------------------+\n")

    port = XModemSerialPort(BAUD_RATE, PORT)

    try:
        port.open()
        sender = XModemSender(port, FILE_TO_SEND)
        worker = threading.Thread(target=run_transfer, args=(sender,))
        worker.start()

        input("Press <ENTER> to cancel the transfer.\n")
        sender.cancel()
        worker.join()
    finally:
        if port is not None and port.is_open:
            port.close()


def run_transfer(sender):
    try:
        sender.send_file()
        print("File sent successfully!")
    except TransferCancelledException:
        print("Transfer cancelled.")
    except XModemException as e:
        print("ERROR: %s" % str(e))


if __name__ == '__main__':
    main()
