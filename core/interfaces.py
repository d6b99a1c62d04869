from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from core.domain import Project, Resource, Schedule, Task, Valorization


class ProjectRepository(ABC):
    @abstractmethod
    def add(self, project: Project) -> None: ...

    @abstractmethod
    def get(self, project_id: str) -> Optional[Project]: ...

    @abstractmethod
    def get_by_code(self, code: str) -> Optional[Project]: ...

    @abstractmethod
    def list_all(self) -> List[Project]: ...


class ScheduleRepository(ABC):
    @abstractmethod
    def add(self, schedule: Schedule) -> None: ...

    @abstractmethod
    def update(self, schedule: Schedule) -> None: ...

    @abstractmethod
    def delete(self, schedule_id: str) -> None: ...

    @abstractmethod
    def get(self, schedule_id: str) -> Optional[Schedule]: ...

    @abstractmethod
    def list_for_project(self, project_id: str) -> List[Schedule]: ...


class ResourceRepository(ABC):
    @abstractmethod
    def add(self, resource: Resource) -> None: ...

    @abstractmethod
    def get(self, resource_id: str) -> Optional[Resource]: ...

    @abstractmethod
    def list_all(self) -> List[Resource]: ...


class TaskRepository(ABC):
    @abstractmethod
    def add(self, task: Task) -> None: ...

    @abstractmethod
    def get(self, task_id: str) -> Optional[Task]: ...

    @abstractmethod
    def list_by_schedule(self, schedule_id: str) -> List[Task]: ...


class ValorizationRepository(ABC):
    @abstractmethod
    def add(self, valorization: Valorization) -> None: ...

    @abstractmethod
    def update(self, valorization: Valorization) -> None: ...

    @abstractmethod
    def get(self, valorization_id: str) -> Optional[Valorization]: ...

    @abstractmethod
    def list_by_project(self, project_id: str) -> List[Valorization]: ...


__all__ = [
    "ProjectRepository",
    "ScheduleRepository",
    "ResourceRepository",
    "TaskRepository",
    "ValorizationRepository",
]
