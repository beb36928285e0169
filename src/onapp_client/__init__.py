"""Python client for the OnApp cloud management API."""

__version__ = "0.3.0"

from onapp_client.client import Client  # noqa: E402
from onapp_client.domain.chain import GroupKey, build_chain  # noqa: E402
from onapp_client.domain.filters import (  # noqa: E402
    ActionFilter,
    AssociatedObjectFilter,
    ChainFilter,
    ParentFilter,
    find_one,
    matches,
)
from onapp_client.errors import (  # noqa: E402
    ApiError,
    ArgError,
    FieldContractError,
    NotFoundError,
    OnAppError,
    UpstreamError,
)

__all__ = [
    "ActionFilter",
    "ApiError",
    "ArgError",
    "AssociatedObjectFilter",
    "ChainFilter",
    "Client",
    "FieldContractError",
    "GroupKey",
    "NotFoundError",
    "OnAppError",
    "ParentFilter",
    "UpstreamError",
    "__version__",
    "build_chain",
    "find_one",
    "matches",
]
