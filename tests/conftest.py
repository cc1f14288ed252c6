"""Test configuration and fixtures."""

import os

import logfire

# Test defaults, applied before any Settings() is built
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret-key-for-hs256-at-least-32-bytes")
os.environ.setdefault("OBSERVABILITY__INSTRUMENT", "false")
os.environ.setdefault("OBSERVABILITY__SEND_TO_LOGFIRE", "false")

logfire.configure(send_to_logfire=False, console=False)


def sign_up_body(index: int = 1) -> dict[str, str]:
    """Valid sign-up payload for a distinct user."""
    return {
        "email": f"email-{index}@test.com",
        "name": f"name-{index}",
        "password": "the-Secret-123",
    }


def idea_body(
    content: str = "My awesome idea", impact=8, ease=5, confidence=4
) -> dict:
    """Idea payload, scoring 17/3 by default."""
    return {
        "content": content,
        "impact": impact,
        "ease": ease,
        "confidence": confidence,
    }
