import pytest

from cfproxy.config import Settings


@pytest.fixture
def settings():
    return Settings(api_base_url="https://upstream.test/api/")
