import pytest

from fakes import OCTOCAT_REPO


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def octocat_repo():
    return dict(OCTOCAT_REPO)
