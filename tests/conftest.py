import pytest

from hex_spiral import settings as settings_module


@pytest.fixture(autouse=True)
def _restore_settings():
    original = settings_module.get_settings()
    yield
    settings_module.configure(original)


@pytest.fixture
def verified():
    """Run the test with round-trip verification switched on."""
    return settings_module.configure(verify_conversions=True)
