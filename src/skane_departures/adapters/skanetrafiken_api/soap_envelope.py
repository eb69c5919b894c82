"""Unwrapping of Skånetrafiken SOAP responses.

Every operation answers with the same shape::

    <soap:Envelope>
      <soap:Body>
        <GetXxxResponse>
          <GetXxxResult>
            <Code>0</Code>
            <Message/>
            ... payload ...

Only the structure is used; no SOAP semantics beyond it.
"""

import logging

from skane_departures.adapters.skanetrafiken_api.xml_cursor import XmlCursor
from skane_departures.domain.exceptions import ParseError, RemoteFaultError

logger = logging.getLogger(__name__)

SUCCESS_CODE = "0"


def _document_start(body: str) -> str:
    """Return the body from its first markup on, or fail if there is none."""
    head = body.lstrip("\ufeff \t\r\n")
    if not head.startswith("<") or head.startswith("</"):
        raise ParseError(f"Expecting start of document, got {body[:40]!r}")
    return head


def open_response(body: str) -> XmlCursor:
    """Unwrap the envelope and check the result status.

    Args:
        body: Complete response body.

    Returns:
        Cursor positioned right after the status header, inside the result
        element, ready for payload decoding.

    Raises:
        ParseError: If the body is not a well-formed envelope.
        RemoteFaultError: If the status code is not "0".
    """
    cursor = XmlCursor(_document_start(body))

    cursor.enter("Envelope")
    cursor.enter("Body")
    response = cursor.enter()
    result = cursor.enter()

    code = cursor.value_tag("Code")
    message = cursor.opt_value_tag("Message")

    if code != SUCCESS_CODE:
        logger.debug(f"{response}/{result} reported code {code}: {message}")
        raise RemoteFaultError(code, message)

    return cursor
