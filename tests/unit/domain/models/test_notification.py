"""
Unit tests for Notification domain model.
"""

from renewdesk.domain.models.notification import (
    NotificationType,
    RelatedEntity,
    RelatedEntityType,
)


class TestNotification:
    """Test cases for Notification domain model."""

    def test_defaults(self, make_notification):
        notification = make_notification()

        assert notification.read is False
        assert notification.related_to is None
        assert notification.type == NotificationType.CONTRACT_EXPIRING

    def test_raw_values_are_coerced(self, make_notification):
        notification = make_notification(
            type="customer-added",
            related_to={"type": "customer", "id": "3"},
        )

        assert notification.type == NotificationType.CUSTOMER_ADDED
        assert notification.related_to == RelatedEntity(RelatedEntityType.CUSTOMER, "3")

    def test_mark_as_read_is_idempotent(self, make_notification):
        notification = make_notification()

        notification.mark_as_read()
        notification.mark_as_read()

        assert notification.read is True

    def test_to_dict(self, make_notification):
        data = make_notification(
            related_to=RelatedEntity(RelatedEntityType.CONTRACT, "1"),
        ).to_dict()

        assert data["type"] == "contract-expiring"
        assert data["related_to"] == {"type": "contract", "id": "1"}
        assert data["date"] == "2023-12-31T00:00:00+00:00"
