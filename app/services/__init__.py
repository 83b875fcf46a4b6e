# app/services - Business logic layer
from .response_service import ResponseService
from .export_service import ExportService

__all__ = ['ResponseService', 'ExportService']
