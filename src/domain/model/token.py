from dataclasses import dataclass


@dataclass(frozen=True)
class Claims:
    """Payload carried inside a bearer token.

    ``iat`` and ``exp`` are UNIX timestamps in seconds.
    """
    sub: str
    iat: int
    exp: int
