"""Data models for the auth module."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AuthenticatedUser:
    """What a caller gets back after logging in or presenting a live session.

    Attributes:
        username: The identity's username.
        session_id: The live session's ID, used as the request credential.
    """

    username: str
    session_id: str
