"""Port for request signing - driven/secondary port."""

from typing import Protocol

import httpx


class RequestSigner(Protocol):
    """
    Port for authenticating and transmitting HTTP requests.

    Implementations attach whatever authentication their strategy needs
    (a bearer token, a client certificate) and send the request. They must
    be safe to share between concurrent callers.
    """

    def execute(self, request: httpx.Request) -> httpx.Response:
        """
        Authenticate and send a request.

        Args:
            request: The unsigned request to send.

        Returns:
            The server response, whatever its status code.

        Raises:
            TransportError: If the request could not be delivered.
        """
        ...
