"""Domain models for anonymous sessions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionToken:
    """Session identifier handed to the client.

    ``issued`` is true when the token was minted for this request and the
    caller still has to persist it on the client.
    """

    value: str
    issued: bool
