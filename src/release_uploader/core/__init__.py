"""Core services - release resolution, asset upload and run workflow."""

from release_uploader.core.protocols import ReleaseRegistry
from release_uploader.core.resolver import ReleaseResolver
from release_uploader.core.uploader import AssetUploader
from release_uploader.core.workflow import UploadWorkflow

__all__ = [
    "AssetUploader",
    "ReleaseRegistry",
    "ReleaseResolver",
    "UploadWorkflow",
]
