# projecthub/store.py
# Storage abstraction for users and projects.
#
# Handlers never touch collections directly; they receive a Store through the
# get_store() dependency. InMemoryStore is the only backend shipped: data lives
# for the life of the process.

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import List, Optional

try:
    from projecthub.errors import ConflictError
    from projecthub.models import Project, User
except ModuleNotFoundError:
    from errors import ConflictError
    from models import Project, User


class Store(ABC):
    """Create/find/update/delete operations the domain handlers rely on."""

    # Users
    @abstractmethod
    def add_user(self, user: User) -> User:
        """Insert a user. Raises ConflictError if the email is taken."""

    @abstractmethod
    def find_user_by_email(self, email: str) -> Optional[User]:
        ...

    # Projects
    @abstractmethod
    def add_project(self, project: Project) -> Project:
        ...

    @abstractmethod
    def get_project(self, project_id: str) -> Optional[Project]:
        ...

    @abstractmethod
    def list_projects(self, category: Optional[str] = None, tag: Optional[str] = None) -> List[Project]:
        """All projects in insertion order; category and tag filters combine with AND."""

    @abstractmethod
    def update_project_status(self, project_id: str, status: str) -> Optional[Project]:
        """Overwrite a project's status. Returns None if the id is unknown."""

    @abstractmethod
    def delete_project(self, project_id: str) -> bool:
        """Remove one project. Returns False if the id is unknown."""


class InMemoryStore(Store):
    """
    Process-lifetime store backed by two insertion-ordered lists.

    Sync route handlers run in a thread pool, so every operation takes the
    lock; the email uniqueness check and the insert happen under one hold.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: List[User] = []
        self._projects: List[Project] = []

    def add_user(self, user: User) -> User:
        with self._lock:
            if any(u.email == user.email for u in self._users):
                raise ConflictError()
            self._users.append(user)
            return user

    def find_user_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            return next((u for u in self._users if u.email == email), None)

    def add_project(self, project: Project) -> Project:
        with self._lock:
            self._projects.append(project)
            return project

    def get_project(self, project_id: str) -> Optional[Project]:
        with self._lock:
            return next((p for p in self._projects if p.id == project_id), None)

    def list_projects(self, category: Optional[str] = None, tag: Optional[str] = None) -> List[Project]:
        with self._lock:
            projects = list(self._projects)

        if category:
            projects = [p for p in projects if p.category == category]
        if tag:
            projects = [p for p in projects if tag in p.tags]
        return projects

    def update_project_status(self, project_id: str, status: str) -> Optional[Project]:
        with self._lock:
            for project in self._projects:
                if project.id == project_id:
                    project.status = status
                    return project
            return None

    def delete_project(self, project_id: str) -> bool:
        with self._lock:
            for index, project in enumerate(self._projects):
                if project.id == project_id:
                    del self._projects[index]
                    return True
            return False


# Process-wide default instance
_default_store = InMemoryStore()


def get_store() -> Store:
    """FastAPI dependency returning the active store (overridable in tests)."""
    return _default_store
