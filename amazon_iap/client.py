# https://developer.amazon.com/docs/in-app-purchasing/iap-rvs-for-android-apps.html
import logging
import time
from urllib.parse import quote

import requests
from urllib3.exceptions import ReadTimeoutError

from .enums import Environment
from .exceptions import IapDecodeError, IapTimeout, IapTransportError, IapVendorRejected
from .response import IapErrorResponse, IapResponse, parse_json
from .session import DEFAULT_TIMEOUT, TimeoutSession

logger = logging.getLogger()

# the sandbox is the RVS Cloud Sandbox that ships with amazon's App Tester, it runs locally
SANDBOX_URL = 'http://localhost:8080/RVSSandbox'
PRODUCTION_URL = 'https://appstore-sdk.amazon.com'


def base_url_for(environment, sandbox_url=SANDBOX_URL):
    return PRODUCTION_URL if environment == Environment.PRODUCTION else sandbox_url


class AmazonIapClient:
    def __init__(self, secret, base_url=SANDBOX_URL, session=None):
        self.base_url = base_url.rstrip('/')
        self.secret = secret
        self.session = session if session is not None else TimeoutSession(DEFAULT_TIMEOUT)

    @classmethod
    def new(cls, secret, environment=Environment.SANDBOX, timeout=DEFAULT_TIMEOUT, sandbox_url=SANDBOX_URL):
        return cls(secret, base_url=base_url_for(environment, sandbox_url), session=TimeoutSession(timeout))

    @classmethod
    def new_with_session(cls, secret, session, environment=Environment.SANDBOX, sandbox_url=SANDBOX_URL):
        "Bring your own session, along with whatever timeout & retry policy is mounted on it"
        return cls(secret, base_url=base_url_for(environment, sandbox_url), session=session)

    def __repr__(self):
        # keep the secret out of logs and tracebacks
        return f'AmazonIapClient(base_url={self.base_url!r})'

    def build_url(self, user_id, receipt_id):
        # user ids are base64 and commonly end in '='
        segments = [quote(value, safe='=') for value in (self.secret, user_id, receipt_id)]
        return '{}/version/1.0/verifyReceiptId/developer/{}/user/{}/receiptId/{}'.format(self.base_url, *segments)

    def deadline_seconds(self, timeout=None):
        "Total seconds the whole call may take, the per-call timeout if given, else the session's, else no limit"
        timeout = timeout if timeout is not None else getattr(self.session, 'timeout', None)
        if isinstance(timeout, tuple):
            # (connect, read) timeouts, the call as a whole gets both
            return None if None in timeout else sum(timeout)
        return timeout

    def read_body(self, resp, deadline):
        if deadline is not None and time.monotonic() > deadline:
            raise requests.exceptions.ReadTimeout('Amazon IAP response headers arrived after the deadline')
        body = bytearray()
        # a byte at a time, so a trickling server can't hold the call open past the deadline
        for chunk in resp.iter_content(chunk_size=1):
            body += chunk
            if deadline is not None and time.monotonic() > deadline:
                raise requests.exceptions.ReadTimeout('Amazon IAP response body not received before the deadline')
        return bytes(body)

    def verify(self, user_id, receipt_id, timeout=None):
        """
        Verify the receipt with amazon. Makes exactly one request, no retries.

        `timeout`, if given, overrides the session's timeout for this call only. It bounds each socket
        read, and is also a deadline on the call as a whole once the response headers have arrived.
        Returns an IapResponse, or raises one of:
          - IapTimeout / IapTransportError if no complete response was received
          - IapVendorRejected, with text exactly that of amazon's message, on any non-200 status
          - IapDecodeError if either the success or error body could not be decoded
        """
        url = self.build_url(user_id, receipt_id)
        seconds = self.deadline_seconds(timeout)
        deadline = time.monotonic() + seconds if seconds is not None else None
        try:
            with self.session.get(url, timeout=timeout, stream=True) as resp:
                status_code = resp.status_code
                body = self.read_body(resp, deadline)
        except requests.exceptions.RequestException as err:
            # requests reports a read timeout part way through the body as a ConnectionError
            if isinstance(err, requests.exceptions.Timeout) or (err.args and isinstance(err.args[0], ReadTimeoutError)):
                logger.debug(f'Amazon IAP verification of receipt `{receipt_id}` for user `{user_id}` timed out')
                raise IapTimeout(err) from err
            # the url, and so the secret, is in the text of most requests errors
            logger.debug(
                f'Amazon IAP verification of receipt `{receipt_id}` for user `{user_id}` '
                f'failed with `{type(err).__name__}`'
            )
            raise IapTransportError(err) from err

        if status_code != 200:
            try:
                error = IapErrorResponse.from_json(parse_json(body))
            except IapDecodeError as err:
                logger.debug(f'Undecodable error body from Amazon IAP with status `{status_code}`: {err}')
                raise
            logger.debug(
                f'Amazon IAP rejected receipt `{receipt_id}` for user `{user_id}` '
                f'with status `{status_code}`: {error.message}'
            )
            raise IapVendorRejected(error.message, status_code=status_code)

        try:
            result = IapResponse.from_json(parse_json(body))
        except IapDecodeError as err:
            logger.debug(f'Undecodable response from Amazon IAP for receipt `{receipt_id}`: {err}')
            raise
        logger.debug(f'Amazon IAP verified receipt `{receipt_id}` for user `{user_id}`')
        return result
