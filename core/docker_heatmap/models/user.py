"""Pydantic v2 models for the signed-in user and the linked Docker Hub account."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StoredCredential(BaseModel):
    """On-disk shape of the persisted bearer credential."""

    token: str


class User(BaseModel):
    """The authenticated user's profile, resolved from the credential."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    github_id: int
    github_username: str
    email: str | None = None
    avatar_url: str = ""
    name: str | None = None
    bio: str | None = None
    public_profile: bool = False
    created_at: str
    updated_at: str

    @property
    def display_name(self) -> str:
        return self.name or self.github_username


class DockerAccount(BaseModel):
    """The Docker Hub account linked to a user."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    docker_username: str
    is_active: bool | None = None
    auto_refresh: bool | None = None
    last_sync_at: str | None = None
    last_sync_error: str | None = None
    sync_in_progress: bool | None = None


class UpdateProfileRequest(BaseModel):
    """Partial profile update; unset fields are left unchanged server-side."""

    name: str | None = None
    bio: str | None = None
    public_profile: bool | None = None


class ConnectDockerRequest(BaseModel):
    """Credentials used to link a Docker Hub account."""

    docker_username: str
    access_token: str
