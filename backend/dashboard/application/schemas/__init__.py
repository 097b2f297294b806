from .client import ClientPayload, ClientResponse
from .project import (
    ChecklistItemSchema,
    ProjectPayload,
    ProjectResponse,
    ProjectImageRequest,
    ProjectNotesRequest,
)
from .invoice import InvoicePayload, InvoiceResponse, NextInvoiceIdResponse
from .user import LoginRequest, RegisterRequest, ProfileUpdate, UserResponse
from .navigation import (
    NavigateRequest,
    RenderedViewResponse,
    ModalIntent,
    ModalViewResponse,
    MutationResponse,
)

__all__ = [
    "ClientPayload",
    "ClientResponse",
    "ChecklistItemSchema",
    "ProjectPayload",
    "ProjectResponse",
    "ProjectImageRequest",
    "ProjectNotesRequest",
    "InvoicePayload",
    "InvoiceResponse",
    "NextInvoiceIdResponse",
    "LoginRequest",
    "RegisterRequest",
    "ProfileUpdate",
    "UserResponse",
    "NavigateRequest",
    "RenderedViewResponse",
    "ModalIntent",
    "ModalViewResponse",
    "MutationResponse",
]
