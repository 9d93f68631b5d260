import pytest
from availability_proxy.core.config import UpstreamConfig

from tests.helpers import make_config


@pytest.fixture
def upstream_config() -> UpstreamConfig:
    return make_config()
