"""
Subscriber API — Subscriber Service Unit Tests
================================================

What:  Tests for SubscriberService failure classification and merge logic.
How:   Repository replaced by `mock_repository`; no HTTP, no database.

What we test:
    ✅ Each operation raises the error class its status code needs
    ✅ Foreign exception messages are kept verbatim
    ✅ Application errors from the repository pass through unchanged
    ✅ Partial updates only touch supplied, non-null fields
"""

import pytest
from sqlalchemy.exc import OperationalError

from subscriber_api.exceptions import NotFoundError, StoreUnavailableError, ValidationError
from subscriber_api.schemas.subscriber import SubscriberCreate, SubscriberUpdate
from subscriber_api.services.subscriber_service import SubscriberService


class TestListSubscribers:

    def setup_method(self):
        self.service = SubscriberService()

    @pytest.mark.asyncio
    async def test_maps_rows_to_responses(self, mock_db_session, mock_repository, make_subscriber):
        mock_repository.find_all.return_value = [
            make_subscriber(id="a", name="Ann", email="ann@example.com"),
        ]

        result = await self.service.list_subscribers(mock_db_session)

        assert [r.model_dump(by_alias=True, exclude_none=True) for r in result] == [
            {"id": "a", "name": "Ann", "email": "ann@example.com"}
        ]

    @pytest.mark.asyncio
    async def test_read_failure_is_store_unavailable(self, mock_db_session, mock_repository):
        mock_repository.find_all.side_effect = RuntimeError("Internal Server Error")

        with pytest.raises(StoreUnavailableError) as exc_info:
            await self.service.list_subscribers(mock_db_session)

        assert exc_info.value.message == "Internal Server Error"
        assert exc_info.value.context["error_type"] == "RuntimeError"

    @pytest.mark.asyncio
    async def test_empty_message_falls_back_to_class_name(self, mock_db_session, mock_repository):
        mock_repository.find_all.side_effect = TimeoutError()

        with pytest.raises(StoreUnavailableError, match="TimeoutError"):
            await self.service.list_subscribers(mock_db_session)


class TestFindSubscriber:

    def setup_method(self):
        self.service = SubscriberService()

    @pytest.mark.asyncio
    async def test_found(self, mock_db_session, mock_repository, make_subscriber):
        subscriber = make_subscriber(id="42", name="Ann", email="ann@example.com")
        mock_repository.find_by_id.return_value = subscriber

        assert await self.service.find_subscriber(mock_db_session, "42") is subscriber

    @pytest.mark.asyncio
    async def test_missing_raises_not_found(self, mock_db_session, mock_repository):
        with pytest.raises(NotFoundError) as exc_info:
            await self.service.find_subscriber(mock_db_session, "nope")

        assert exc_info.value.message == "Subscriber with id nope not found"
        assert exc_info.value.resource_id == "nope"

    @pytest.mark.asyncio
    async def test_lookup_failure_is_store_unavailable(self, mock_db_session, mock_repository):
        mock_repository.find_by_id.side_effect = OperationalError("SELECT", {}, Exception("gone"))

        with pytest.raises(StoreUnavailableError):
            await self.service.find_subscriber(mock_db_session, "42")


class TestCreateSubscriber:

    def setup_method(self):
        self.service = SubscriberService()

    @pytest.mark.asyncio
    async def test_builds_from_supplied_fields(self, mock_db_session, mock_repository):
        payload = SubscriberCreate(name="Ann", subscribedToChannel="News")

        result = await self.service.create_subscriber(mock_db_session, payload)

        mock_repository.create.assert_called_once_with(
            {"name": "Ann", "subscribed_to_channel": "News"}
        )
        assert result.id == "generated-id"
        assert result.subscribed_to_channel == "News"

    @pytest.mark.asyncio
    async def test_store_rejection_is_validation_error(self, mock_db_session, mock_repository):
        mock_repository.save.side_effect = Exception("Validation Error")

        with pytest.raises(ValidationError, match="Validation Error"):
            await self.service.create_subscriber(mock_db_session, SubscriberCreate(name="Ann"))

    @pytest.mark.asyncio
    async def test_repository_validation_error_passes_through(self, mock_db_session, mock_repository):
        original = ValidationError(message="Subscriber validation failed: name is required", field="name")
        mock_repository.save.side_effect = original

        with pytest.raises(ValidationError) as exc_info:
            await self.service.create_subscriber(mock_db_session, SubscriberCreate())

        assert exc_info.value is original


class TestUpdateSubscriber:

    def setup_method(self):
        self.service = SubscriberService()

    @pytest.mark.asyncio
    async def test_merges_supplied_fields(self, mock_db_session, mock_repository, make_subscriber):
        subscriber = make_subscriber(name="John Doe", subscribed_to_channel="Example Channel")

        result = await self.service.update_subscriber(
            mock_db_session, subscriber, SubscriberUpdate(subscribedToChannel="New Channel")
        )

        assert result.name == "John Doe"
        assert result.subscribed_to_channel == "New Channel"
        mock_repository.save.assert_awaited_once_with(mock_db_session, subscriber)

    @pytest.mark.asyncio
    async def test_snake_case_names_accepted(self, mock_db_session, mock_repository, make_subscriber):
        subscriber = make_subscriber(name="John Doe", subscribed_to_channel="Example Channel")

        await self.service.update_subscriber(
            mock_db_session, subscriber, SubscriberUpdate(subscribed_to_channel="Other")
        )

        assert subscriber.subscribed_to_channel == "Other"

    @pytest.mark.asyncio
    async def test_store_rejection_is_validation_error(self, mock_db_session, mock_repository, make_subscriber):
        mock_repository.save.side_effect = Exception("Validation Error")

        with pytest.raises(ValidationError, match="Validation Error"):
            await self.service.update_subscriber(
                mock_db_session, make_subscriber(name="John Doe"), SubscriberUpdate(name="New")
            )


class TestDeleteSubscriber:

    def setup_method(self):
        self.service = SubscriberService()

    @pytest.mark.asyncio
    async def test_returns_confirmation(self, mock_db_session, mock_repository, make_subscriber):
        subscriber = make_subscriber(name="John Doe")

        message = await self.service.delete_subscriber(mock_db_session, subscriber)

        assert message == "Deleted Subscriber"
        mock_repository.remove.assert_awaited_once_with(mock_db_session, subscriber)

    @pytest.mark.asyncio
    async def test_removal_failure_is_store_unavailable(self, mock_db_session, mock_repository, make_subscriber):
        mock_repository.remove.side_effect = Exception("Error deleting subscriber")

        with pytest.raises(StoreUnavailableError, match="Error deleting subscriber"):
            await self.service.delete_subscriber(mock_db_session, make_subscriber(name="John Doe"))
