"""Ownership rules for projects and artworks.

A project has exactly one designer and one client. Designers own the
artworks; clients approve them. Admin overrides are enforced by the API,
not here.
"""

from __future__ import annotations

from typing import Protocol


class HasParticipants(Protocol):
    designer_id: str
    client_id: str


class HasDesigner(Protocol):
    designer_id: str


class HasClient(Protocol):
    client_id: str


def can_access_project(user_id: str, project: HasParticipants) -> bool:
    """Designer and client of a project may both read it."""
    return user_id in (project.designer_id, project.client_id)


def can_edit_art(user_id: str, art: HasDesigner) -> bool:
    return art.designer_id == user_id


def can_approve_art(user_id: str, project: HasClient) -> bool:
    """Only the project's client approves its artworks."""
    return project.client_id == user_id
