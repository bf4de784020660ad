"""
Application layer DTOs.
Data Transfer Objects for API requests and responses.
"""

from .base_dto import *
from .customer_dto import *
from .contract_dto import *
from .notification_dto import *
from .dashboard_dto import *

__all__ = [
    # Base DTOs
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "CreateRequestDTO",
    "UpdateRequestDTO",
    "NotesMixin",
    "ErrorResponseDTO",

    # Customer DTOs
    "CreateCustomerRequestDTO",
    "UpdateCustomerRequestDTO",
    "CustomerResponseDTO",
    "CustomerListResponseDTO",

    # Contract DTOs
    "CreateContractRequestDTO",
    "UpdateContractRequestDTO",
    "RenewContractRequestDTO",
    "ListContractsRequestDTO",
    "ContractResponseDTO",
    "ContractListResponseDTO",
    "ContractSummaryResponseDTO",
    "CustomerContractsResponseDTO",
    "RenewalTermsResponseDTO",

    # Notification DTOs
    "RelatedEntityDTO",
    "NotificationResponseDTO",
    "NotificationListResponseDTO",
    "UnreadCountResponseDTO",

    # Dashboard DTOs
    "UpcomingRenewalDTO",
    "DashboardStatsResponseDTO",
]
