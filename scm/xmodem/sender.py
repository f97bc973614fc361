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

import logging
import os
import threading
import time

from enum import Enum, unique

from scm.xmodem.exception import BlockAckTimeoutException, \
    EotAckTimeoutException, MaxRetryExceededException, \
    ReceiverConnectTimeoutException, TransferCancelledException, \
    TransportIOException, UnexpectedResponseException
from scm.xmodem.models.protocol import ControlByte
from scm.xmodem.packets.block import BLOCK_DATA_SIZE, BlockAssembler
from scm.xmodem.source import FileSource

_ERROR_VALUE_SRC = "Source must be a non empty path or a binary stream"
_ERROR_VALUE_TRANSPORT = "Transport must provide 'write_bytes', 'write_byte' and 'read_available' methods"
_ERROR_MAX_RETRIES = "Block %d not acknowledged after %d retries"
_ERROR_TIMEOUT_RECEIVER = "Receiver did not request the transfer in %s seconds"
_ERROR_TIMEOUT_BLOCK = "Block %d not acknowledged in %s seconds"
_ERROR_TIMEOUT_EOT = "End of transmission not acknowledged in %s seconds"

_log = logging.getLogger(__name__)


@unique
class _TransferState(Enum):
    """
    This class lists the states of the XModem transfer state machine.
    """
    WAIT_NAK = "Waiting for the receiver"
    BEGIN_SEND = "Sending first block"
    RESEND = "Resending block"
    WAIT_ACK = "Waiting for acknowledgment"
    SEND_NEXT = "Sending next block"
    END_TX = "Sending end of transmission"
    ABORT = "Aborting"
    SUCCESS = "Finished"


class _TransferSession(object):
    """
    Holds the state of a single :meth:`.XModemSender.send_file` call.
    """

    def __init__(self, source):
        self.state = _TransferState.WAIT_NAK
        self.assembler = BlockAssembler(source)
        self.block = None
        self.block_number = 0
        self.retries = 0
        self.no_more_data = False
        # Reset on every wait for a response.
        self.response_deadline = None
        # Set only once, when the first EOT is sent.
        self.eot_deadline = None
        self.error = None
        self.acked_bytes = 0
        self.percent = None

    def abort(self, error):
        self.error = error
        self.state = _TransferState.ABORT


class XModemSender(object):
    """
    Sends a file to a remote end using the XModem protocol (128 bytes blocks
    with checksum).

    The transfer runs in the calling thread and blocks until the remote end
    acknowledges the end of the transmission or the transfer fails. Any
    outcome closes the file source.
    """

    __DEFAULT_NAK_POLL_INTERVAL = 0.8  # seconds
    __DEFAULT_ACK_POLL_INTERVAL = 0.15  # seconds
    __DEFAULT_EOT_POLL_INTERVAL = 1.5  # seconds
    __DEFAULT_RESPONSE_TIMEOUT = 60  # seconds
    __DEFAULT_EOT_ACK_TIMEOUT = 60  # seconds
    __DEFAULT_MAX_RETRIES = 10

    def __init__(self, transport, source, progress_cb=None, cancel_event=None,
                 nak_poll_interval=__DEFAULT_NAK_POLL_INTERVAL,
                 ack_poll_interval=__DEFAULT_ACK_POLL_INTERVAL,
                 eot_poll_interval=__DEFAULT_EOT_POLL_INTERVAL,
                 response_timeout=__DEFAULT_RESPONSE_TIMEOUT,
                 eot_ack_timeout=__DEFAULT_EOT_ACK_TIMEOUT,
                 max_retries=__DEFAULT_MAX_RETRIES):
        """
        Class constructor. Instantiates a new :class:`.XModemSender` with the given parameters.

        Args:
            transport (:class:`.XModemCommunicationInterface`): open link with
                the remote end.
            source (:class:`.FileSource`, String or binary stream): data to send.
            progress_cb (Function, optional): function to execute in order to
                receive transfer progress information. Takes the progress
                percentage as integer. Only called if the size of the data is
                known.
            cancel_event (:class:`threading.Event`, optional): event that
                cancels the transfer when set. It is never cleared by the
                sender.
            nak_poll_interval (Float, optional): seconds between reads while
                waiting for the receiver to start the transfer.
            ack_poll_interval (Float, optional): seconds between reads while
                waiting for a block acknowledgment.
            eot_poll_interval (Float, optional): seconds between reads while
                waiting for the end of transmission acknowledgment.
            response_timeout (Float, optional): seconds to wait for the
                receiver to start the transfer or to answer a block.
            eot_ack_timeout (Float, optional): seconds, counted from the first
                EOT sent, to get the end of transmission acknowledged.
            max_retries (Integer, optional): number of times a rejected block
                is sent again before aborting.
        """
        self._transport = transport
        self._source = source if isinstance(source, FileSource) else FileSource(source)
        self._progress_cb = progress_cb
        self._owns_cancel_event = cancel_event is None
        self._cancel_event = cancel_event if cancel_event is not None else threading.Event()
        self._nak_poll_interval = nak_poll_interval
        self._ack_poll_interval = ack_poll_interval
        self._eot_poll_interval = eot_poll_interval
        self._response_timeout = response_timeout
        self._eot_ack_timeout = eot_ack_timeout
        self._max_retries = max_retries

        self._handlers = {
            _TransferState.WAIT_NAK: self._wait_nak,
            _TransferState.BEGIN_SEND: self._begin_send,
            _TransferState.RESEND: self._resend,
            _TransferState.WAIT_ACK: self._wait_ack,
            _TransferState.SEND_NEXT: self._send_next,
            _TransferState.END_TX: self._end_tx,
            _TransferState.ABORT: self._abort,
        }

    def cancel(self):
        """
        Requests the transfer to stop. The running :meth:`.send_file` raises
        :class:`.TransferCancelledException` at its next polling step.
        If no transfer is running, the next one is cancelled. Once that
        transfer ends, :meth:`.send_file` can be called again.
        """
        self._cancel_event.set()

    def send_file(self):
        """
        Performs the file transfer operation.

        Raises:
            ReceiverConnectTimeoutException: if the receiver does not request
                the transfer in time.
            BlockAckTimeoutException: if a block is not answered in time.
            EotAckTimeoutException: if the end of transmission is not
                acknowledged in time.
            MaxRetryExceededException: if a block is rejected too many times.
            UnexpectedResponseException: if a block is answered with something
                other than ACK or NAK.
            TransferCancelledException: if the transfer is cancelled.
            TransportIOException: if there is any error communicating with the
                remote end.
            SourceIOException: if there is any error reading the file.
        """
        _log.debug("Sending '%s' file through XModem", self._source)
        try:
            self._source.open()
            session = _TransferSession(self._source)
            while session.state != _TransferState.SUCCESS:
                if session.state != _TransferState.ABORT and self._cancel_event.is_set():
                    session.abort(TransferCancelledException())
                self._handlers[session.state](session)
        finally:
            self._source.close()
            if self._owns_cancel_event:
                self._cancel_event.clear()
        _log.debug("File '%s' sent successfully", self._source)

    def _wait_nak(self, session):
        deadline = time.monotonic() + self._response_timeout
        while True:
            if self._cancel_event.is_set():
                session.abort(TransferCancelledException())
                return
            data = self._read()
            if ControlByte.NAK.code in data:
                _log.debug("Receiver requested the transfer")
                session.state = _TransferState.BEGIN_SEND
                return
            if time.monotonic() >= deadline:
                session.abort(ReceiverConnectTimeoutException(
                    _ERROR_TIMEOUT_RECEIVER % self._response_timeout))
                return
            time.sleep(self._nak_poll_interval)

    def _begin_send(self, session):
        session.block_number = 1
        session.block = session.assembler.assemble(session.block_number)
        self._send_block(session)

    def _resend(self, session):
        if session.retries > self._max_retries:
            session.abort(MaxRetryExceededException(
                _ERROR_MAX_RETRIES % (session.block_number, self._max_retries)))
            return
        self._send_block(session)

    def _send_next(self, session):
        session.retries = 0
        session.block_number = (session.block_number + 1) & 0xFF
        block = session.assembler.assemble(session.block_number)
        if block is None:
            session.no_more_data = True
            session.state = _TransferState.END_TX
            return
        session.block = block
        self._send_block(session)

    def _send_block(self, session):
        _log.debug("Sending block %d - retry %d", session.block_number, session.retries)
        self._write(session.block.output())
        session.state = _TransferState.WAIT_ACK

    def _end_tx(self, session):
        if session.eot_deadline is None:
            session.eot_deadline = time.monotonic() + self._eot_ack_timeout
        _log.debug("Sending EOT")
        try:
            self._transport.write_byte(ControlByte.EOT.code)
        except OSError as exc:
            raise TransportIOException(str(exc)) from exc
        session.state = _TransferState.WAIT_ACK

    def _wait_ack(self, session):
        session.response_deadline = time.monotonic() + self._response_timeout
        interval = self._eot_poll_interval if session.no_more_data else self._ack_poll_interval
        while True:
            time.sleep(interval)
            if self._cancel_event.is_set():
                session.abort(TransferCancelledException())
                return
            data = self._read()
            if data or session.no_more_data:
                break
            if time.monotonic() >= session.response_deadline:
                session.abort(BlockAckTimeoutException(
                    _ERROR_TIMEOUT_BLOCK % (session.block_number, self._response_timeout)))
                return

        response = data[0] if data else None
        if session.no_more_data:
            if response == ControlByte.ACK.code:
                session.state = _TransferState.SUCCESS
            elif time.monotonic() >= session.eot_deadline:
                session.abort(EotAckTimeoutException(_ERROR_TIMEOUT_EOT % self._eot_ack_timeout))
            else:
                session.state = _TransferState.END_TX
        elif response == ControlByte.ACK.code:
            self._block_acknowledged(session)
            session.state = _TransferState.SEND_NEXT
        elif response == ControlByte.NAK.code:
            session.retries += 1
            _log.warning("Block %d rejected by the receiver (%d)", session.block_number, session.retries)
            session.state = _TransferState.RESEND
        else:
            session.abort(UnexpectedResponseException(response))

    def _abort(self, session):
        _log.warning("XModem transfer aborted: %s", session.error)
        raise session.error

    def _block_acknowledged(self, session):
        size = self._source.size
        if size is None or self._progress_cb is None:
            return
        session.acked_bytes = min(size, session.acked_bytes + BLOCK_DATA_SIZE)
        percent = (session.acked_bytes * 100) // size if size else 100
        if percent != session.percent:
            session.percent = percent
            self._progress_cb(percent)

    def _read(self):
        try:
            return self._transport.read_available()
        except OSError as exc:
            raise TransportIOException(str(exc)) from exc

    def _write(self, data):
        try:
            self._transport.write_bytes(data)
        except OSError as exc:
            raise TransportIOException(str(exc)) from exc


def send_file_xmodem(src, transport, progress_cb=None, cancel_event=None):
    """
    Sends a file using the XModem protocol to a remote end.

    Args:
        src (String, path-like or binary stream): the file to transfer.
        transport (:class:`.XModemCommunicationInterface`): open link with the
            remote end.
        progress_cb (Function, optional): function to execute in order to receive progress information.

             Takes the following arguments:

                * The progress percentage as integer.

        cancel_event (:class:`threading.Event`, optional): event that cancels
            the transfer when set.

    Raises:
        ValueError: if any input value is not valid.
        XModemException: if there is any error during the file transfer.
    """
    # Sanity checks.
    if isinstance(src, (str, bytes, os.PathLike)):
        if len(os.fspath(src)) == 0:
            raise ValueError(_ERROR_VALUE_SRC)
    elif src is None or not callable(getattr(src, "read", None)):
        raise ValueError(_ERROR_VALUE_SRC)
    for method in ("write_bytes", "write_byte", "read_available"):
        if not callable(getattr(transport, method, None)):
            raise ValueError(_ERROR_VALUE_TRANSPORT)

    sender = XModemSender(transport, src, progress_cb=progress_cb, cancel_event=cancel_event)
    sender.send_file()
