"""
Unit tests for the Supabase user profile repository.
"""

import pytest
from unittest.mock import MagicMock

from app.infrastructure.repositories.user_repository import SupabaseUserProfileRepository


def make_client(rows):
    """Supabase client whose query chain returns ``rows``."""
    client = MagicMock()
    query = client.table.return_value.select.return_value.eq.return_value.limit.return_value
    query.execute.return_value = MagicMock(data=rows)
    return client


class TestSupabaseUserProfileRepository:
    """Test cases for SupabaseUserProfileRepository."""

    @pytest.mark.asyncio
    async def test_get_by_id(self):
        """Test mapping the first row to a profile."""
        client = make_client([{"id": "u1", "email": "a@b.com", "fullName": "Ana"}])
        repository = SupabaseUserProfileRepository(lambda: client, table="profiles")

        user = await repository.get_by_id("u1")

        assert user.id == "u1"
        assert user.email == "a@b.com"
        assert user.display_name == "Ana"
        client.table.assert_called_once_with("profiles")
        client.table.return_value.select.return_value.eq.assert_called_once_with("id", "u1")

    @pytest.mark.asyncio
    async def test_get_by_id_not_found(self):
        """Test an empty result is None."""
        repository = SupabaseUserProfileRepository(lambda: make_client([]))

        assert await repository.get_by_id("missing") is None

    @pytest.mark.asyncio
    async def test_get_by_id_propagates_errors(self):
        """Test client errors are not swallowed here."""
        client = make_client([])
        client.table.side_effect = ConnectionError("unreachable")
        repository = SupabaseUserProfileRepository(lambda: client)

        with pytest.raises(ConnectionError):
            await repository.get_by_id("u1")

    def test_client_is_not_built_on_construction(self):
        """Test constructing the repository does not create a client."""
        factory = MagicMock(side_effect=ValueError("SUPABASE_URL and SUPABASE_SERVICE_KEY must be set"))

        SupabaseUserProfileRepository(factory)

        factory.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_configuration_raises_on_lookup(self):
        """Test a client factory error surfaces from get_by_id."""
        factory = MagicMock(side_effect=ValueError("SUPABASE_URL and SUPABASE_SERVICE_KEY must be set"))
        repository = SupabaseUserProfileRepository(factory)

        with pytest.raises(ValueError):
            await repository.get_by_id("u1")
