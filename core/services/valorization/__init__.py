from core.services.valorization.service import ValorizationService

__all__ = ["ValorizationService"]
