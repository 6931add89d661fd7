"""Artifact classification for uploads.

Ops Manager ingests stemcells and product tiles through two separate
endpoints. The only thing that tells them apart on the operator's disk is the
file naming convention, so classification is a pure function of the name and
anything that is not clearly a stemcell is sent to the tile endpoint.
"""

from enum import Enum


class UploadTarget(Enum):
    """Upload endpoint together with its multipart field name."""

    STEMCELL = ("/api/v0/stemcells", "stemcell[file]")
    PRODUCT_TILE = ("/api/v0/available_products", "product[file]")

    def __init__(self, endpoint: str, field_name: str) -> None:
        self.endpoint = endpoint
        self.field_name = field_name

    @property
    def label(self) -> str:
        return "stemcell" if self is UploadTarget.STEMCELL else "product tile"


def classify_artifact(filename: str) -> UploadTarget:
    """Pick the upload target for a file.

    Args:
        filename: File name or path of the artifact.

    Returns:
        UploadTarget.STEMCELL if the name contains "stemcell" and ends with
        ".tgz", UploadTarget.PRODUCT_TILE otherwise.
    """
    if "stemcell" in filename and filename.endswith(".tgz"):
        return UploadTarget.STEMCELL
    return UploadTarget.PRODUCT_TILE
