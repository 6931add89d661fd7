"""Data types for Ops Manager API contracts."""

from pydantic import BaseModel, Field


class Credentials(BaseModel):
    """Bearer credentials issued by the UAA token authority."""

    token: str
    token_type: str = "bearer"
    refresh_token: str | None = None
    expires_in: int | None = None
    target: str | None = Field(
        default=None, description="Ops Manager URL the token was issued for"
    )


class VmType(BaseModel):
    """A named VM type as accepted by the vm_types endpoint."""

    name: str = Field(min_length=1)
    cpu: int = Field(gt=0)
    ram: int = Field(gt=0, description="Memory in MB")
    ephemeral_disk: int = Field(gt=0, description="Ephemeral disk in MB")
