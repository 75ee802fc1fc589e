"""Response emission: one ``Response`` becomes two ASGI messages."""

from httprouter._internal.asgi import Message, Send, encode_headers
from httprouter.http.response import Response

# Statuses that never carry a body; 1xx is checked by range.
_BODYLESS = frozenset({204, 304})


def response_messages(response: Response) -> tuple[Message, Message]:
    """Build the ``http.response.start`` and ``http.response.body`` messages.

    ``content-type`` comes first, then the response's own headers, then a
    ``content-length`` that always agrees with the body actually sent.
    """
    bodyless = response.status < 200 or response.status in _BODYLESS
    body = b"" if bodyless else response.body_bytes

    headers = encode_headers(
        [
            ("content-type", response.content_type),
            *response.headers,
            ("content-length", str(len(body))),
        ]
    )
    start: Message = {"type": "http.response.start", "status": response.status, "headers": headers}
    return start, {"type": "http.response.body", "body": body}


async def send_response(response: Response, send: Send) -> None:
    start, body = response_messages(response)
    await send(start)
    await send(body)
