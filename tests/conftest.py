"""Test configuration and fixtures."""

from uuid import uuid4

import logfire
import pytest

from board.domain.value import UserId

# Spans and events go nowhere during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def u1() -> UserId:
    return UserId(uuid4())


@pytest.fixture
def u2() -> UserId:
    return UserId(uuid4())
