"""Media use cases."""

from .create_media import CreateMediaRequest, CreateMediaResponse, CreateMediaUseCase
from .list_media import ListMediaRequest, ListMediaResponse, ListMediaUseCase
from .remove_media import RemoveMediaRequest, RemoveMediaResponse, RemoveMediaUseCase
from .update_media_status import (
    UpdateMediaStatusRequest,
    UpdateMediaStatusResponse,
    UpdateMediaStatusUseCase,
)

__all__ = [
    "CreateMediaRequest",
    "CreateMediaResponse",
    "CreateMediaUseCase",
    "ListMediaRequest",
    "ListMediaResponse",
    "ListMediaUseCase",
    "RemoveMediaRequest",
    "RemoveMediaResponse",
    "RemoveMediaUseCase",
    "UpdateMediaStatusRequest",
    "UpdateMediaStatusResponse",
    "UpdateMediaStatusUseCase",
]
