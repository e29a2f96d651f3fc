"""Service test fixtures — controller wired to a fake repository and a named logger."""

import logging

import pytest

from tests.fakes import CONTROLLER_LOGGER, FakeUserRepository
from user_api.services.user_controller import UserController


@pytest.fixture
def repo():
    return FakeUserRepository()


@pytest.fixture
def controller(repo):
    return UserController(repo, logging.getLogger(CONTROLLER_LOGGER))
