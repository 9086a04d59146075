import pytest
from unittest.mock import AsyncMock, MagicMock, patch


@pytest.fixture
def registry_http():
    """
    Replace the HTTP client used by every adapter.

    Yields the AsyncMock standing in for HttpClient().request; tests set its
    side_effect or return_value.
    """
    with patch("company_search.adapters.base.HttpClient") as mock_client:
        instance = MagicMock()
        instance.request = AsyncMock()
        mock_client.return_value = instance
        yield instance.request
