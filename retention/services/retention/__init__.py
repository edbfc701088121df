"""Release retention bounded context."""

from .errors import DatasetError, InvalidArgument, RetentionError
from .loader import Dataset, DatasetFiles, load_dataset
from .model import (
    Deployment,
    DeploymentEnvironment,
    DeploymentMap,
    Project,
    Release,
    ReleaseRetentionResolution,
)
from .reasons import (
    REASON_TEMPLATE,
    ConsoleReasonSink,
    MockReasonSink,
    ReasonSinkProtocol,
    RetentionReason,
)
from .service import ReleaseRetentionService

__all__ = [
    # errors
    "DatasetError",
    "InvalidArgument",
    "RetentionError",
    # loader
    "Dataset",
    "DatasetFiles",
    "load_dataset",
    # model
    "Deployment",
    "DeploymentEnvironment",
    "DeploymentMap",
    "Project",
    "Release",
    "ReleaseRetentionResolution",
    # reasons
    "REASON_TEMPLATE",
    "ConsoleReasonSink",
    "MockReasonSink",
    "ReasonSinkProtocol",
    "RetentionReason",
    # service
    "ReleaseRetentionService",
]
