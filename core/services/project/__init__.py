from core.services.project.service import ProjectService

__all__ = ["ProjectService"]
