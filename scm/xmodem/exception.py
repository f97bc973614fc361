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


class XModemException(Exception):
    """
    Generic XModem exception. This class and its subclasses indicate
    conditions that an application might want to catch.

    All functionality of this class is the inherited of `Exception
    <https://docs.python.org/3/library/exceptions.html#Exception>`_.
    """
    pass


class XModemTimeoutException(XModemException):
    """
    This exception will be thrown when the remote end does not answer in
    the expected time during a transfer.

    All functionality of this class is the inherited of `Exception
    <https://docs.python.org/3/library/exceptions.html#Exception>`_.
    """
    __DEFAULT_MESSAGE = "There was a timeout while waiting for the remote end."

    def __init__(self, message=__DEFAULT_MESSAGE):
        XModemException.__init__(self, message)


class ReceiverConnectTimeoutException(XModemTimeoutException):
    """
    This exception will be thrown when the receiver does not request the
    transfer start (NAK) in time.
    """
    __DEFAULT_MESSAGE = "Timed out waiting for the receiver to request the transfer."

    def __init__(self, message=__DEFAULT_MESSAGE):
        XModemTimeoutException.__init__(self, message)


class BlockAckTimeoutException(XModemTimeoutException):
    """
    This exception will be thrown when the receiver does not answer a data
    block in time.
    """
    __DEFAULT_MESSAGE = "Timed out waiting for the block acknowledgment."

    def __init__(self, message=__DEFAULT_MESSAGE):
        XModemTimeoutException.__init__(self, message)


class EotAckTimeoutException(XModemTimeoutException):
    """
    This exception will be thrown when the receiver does not acknowledge the
    end of transmission (EOT) in time.
    """
    __DEFAULT_MESSAGE = "Timed out waiting for the end of transmission acknowledgment."

    def __init__(self, message=__DEFAULT_MESSAGE):
        XModemTimeoutException.__init__(self, message)


class MaxRetryExceededException(XModemException):
    """
    This exception will be thrown when a block is rejected (NAK) by the
    receiver more times than allowed.
    """
    __DEFAULT_MESSAGE = "Maximum number of retries reached."

    def __init__(self, message=__DEFAULT_MESSAGE):
        XModemException.__init__(self, message)


class UnexpectedResponseException(XModemException):
    """
    This exception will be thrown when the receiver answers a data block with
    something other than ACK or NAK.
    """

    def __init__(self, response):
        """
        Class constructor.

        Args:
            response (Integer): the unexpected byte received.
        """
        XModemException.__init__(self, "Unexpected response from the receiver: 0x%02X" % response)
        self.response = response


class TransferCancelledException(XModemException):
    """
    This exception will be thrown when the transfer is cancelled locally
    before it finishes.
    """
    __DEFAULT_MESSAGE = "The XModem transfer was cancelled."

    def __init__(self, message=__DEFAULT_MESSAGE):
        XModemException.__init__(self, message)


class TransportIOException(XModemException):
    """
    This exception will be thrown when there is any error reading from or
    writing to the communication interface.

    All functionality of this class is the inherited of `Exception
    <https://docs.python.org/3/library/exceptions.html#Exception>`_.
    """
    __DEFAULT_MESSAGE = "There was an error communicating with the remote end."

    def __init__(self, message=__DEFAULT_MESSAGE):
        XModemException.__init__(self, message)


class SourceIOException(XModemException):
    """
    This exception will be thrown when there is any error reading the file to
    transfer.

    All functionality of this class is the inherited of `Exception
    <https://docs.python.org/3/library/exceptions.html#Exception>`_.
    """
    __DEFAULT_MESSAGE = "There was an error reading the file to transfer."

    def __init__(self, message=__DEFAULT_MESSAGE):
        XModemException.__init__(self, message)
