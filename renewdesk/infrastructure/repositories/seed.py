"""
Demo records for the in-memory store.
Contract and notification dates are placed relative to ``now`` so the
dashboard always has something expiring.
"""

import logging
from datetime import datetime, timedelta
from decimal import Decimal

from renewdesk.domain.models.contract import Contract, ContractStatus, ContractType
from renewdesk.domain.models.customer import Customer, CustomerStatus
from renewdesk.domain.models.notification import (
    Notification,
    NotificationType,
    RelatedEntity,
    RelatedEntityType,
)
from renewdesk.infrastructure.repositories.in_memory import InMemoryDatabase


logger = logging.getLogger(__name__)


CUSTOMERS = [
    ("1", "ACME Corporation", "info@acme.com", "(555) 123-4567", "John Doe",
     "123 Main St, Anytown, USA", "2023-01-15", CustomerStatus.ACTIVE),
    ("2", "TechCorp Solutions", "contact@techcorp.com", "(555) 987-6543", "Jane Smith",
     "456 Tech Blvd, Silicon Valley, USA", "2023-03-22", CustomerStatus.ACTIVE),
    ("3", "Global Systems Inc.", "support@globalsys.com", "(555) 456-7890", "Michael Johnson",
     "789 Global Ave, Metropolis, USA", "2023-05-10", CustomerStatus.ACTIVE),
    ("4", "Innovative Startups", "hello@innovative.co", "(555) 234-5678", "Emily Chen",
     "321 Innovation Way, Startupville, USA", "2023-07-05", CustomerStatus.INACTIVE),
    ("5", "Enterprise Solutions", "sales@enterprise.biz", "(555) 876-5432", "Robert Wilson",
     "654 Enterprise St, Businesstown, USA", "2023-09-18", CustomerStatus.ACTIVE),
]

# id, customer id, type, name, start offset, end offset, renewal offset, amount, status, notes
CONTRACTS = [
    ("1", "1", ContractType.DOMAIN, "acme.com Domain", -330, 35, 7, "120",
     ContractStatus.ACTIVE, "Annual domain renewal"),
    ("2", "1", ContractType.HOSTING, "Web Hosting Plan", -180, 185, 160, "1200",
     ContractStatus.ACTIVE, "Premium hosting plan with backup"),
    ("3", "2", ContractType.SUPPORT, "IT Support Contract", -25, -5, -20, "5000",
     ContractStatus.EXPIRED, "Renewal pending client approval"),
    ("4", "3", ContractType.DOMAIN, "globalsys.com Domain", -270, 95, 65, "150",
     ContractStatus.ACTIVE, None),
    ("5", "3", ContractType.HOSTING, "Cloud Server", -58, 2, 1, "3600",
     ContractStatus.ACTIVE, "High-performance cloud server package"),
    ("6", "5", ContractType.SUPPORT, "Managed IT Services", -120, 245, 215, "12000",
     ContractStatus.ACTIVE, "Comprehensive managed IT services"),
    ("7", "4", ContractType.DOMAIN, "innovative.co Domain", -340, 25, 10, "95",
     ContractStatus.ACTIVE, None),
]

# id, type, message, related type, related id, age in days, read
NOTIFICATIONS = [
    ("1", NotificationType.CONTRACT_EXPIRING, "ACME Corporation domain renewal due in 7 days",
     RelatedEntityType.CONTRACT, "1", 1, False),
    ("2", NotificationType.CONTRACT_EXPIRED, "TechCorp Solutions IT Support Contract has expired",
     RelatedEntityType.CONTRACT, "3", 5, True),
    ("3", NotificationType.CUSTOMER_ADDED, "New customer Global Systems Inc. has been added",
     RelatedEntityType.CUSTOMER, "3", 10, True),
    ("4", NotificationType.CONTRACT_EXPIRING, "Global Systems Inc. Cloud Server renewal due tomorrow",
     RelatedEntityType.CONTRACT, "5", 1, False),
    ("5", NotificationType.CONTRACT_EXPIRING, "Innovative Startups domain renewal due in 10 days",
     RelatedEntityType.CONTRACT, "7", 2, False),
]


def seed_demo_data(db: InMemoryDatabase, now: datetime) -> InMemoryDatabase:
    """Replace the contents of ``db`` with the demo records."""
    db.clear()

    for cid, name, email, phone, person, address, created, status in CUSTOMERS:
        db.customers.append(Customer(
            id=cid,
            name=name,
            contact_person=person,
            email=email,
            phone=phone,
            address=address,
            created_at=datetime.fromisoformat(created).replace(tzinfo=now.tzinfo),
            status=status,
        ))

    names = {customer.id: customer.name for customer in db.customers}
    for cid, customer_id, ctype, name, start, end, renewal, amount, status, notes in CONTRACTS:
        db.contracts.append(Contract(
            id=cid,
            customer_id=customer_id,
            customer_name=names[customer_id],
            type=ctype,
            name=name,
            start_date=now + timedelta(days=start),
            end_date=now + timedelta(days=end),
            renewal_date=now + timedelta(days=renewal),
            amount=Decimal(amount),
            status=status,
            notes=notes,
        ))

    for nid, ntype, message, related_type, related_id, age, read in NOTIFICATIONS:
        db.notifications.append(Notification(
            id=nid,
            type=ntype,
            message=message,
            date=now - timedelta(days=age),
            read=read,
            related_to=RelatedEntity(related_type, related_id),
        ))

    logger.info(
        f"Seeded {len(db.customers)} customers, {len(db.contracts)} contracts, "
        f"{len(db.notifications)} notifications"
    )
    return db
