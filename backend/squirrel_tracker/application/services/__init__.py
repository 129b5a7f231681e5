from .detail_viewer import DetailViewer
from .form_session import FormSession, FormState
from .notifier import Notifier
from .sighting_controller import SightingController
from .sighting_service import SightingService
from .sighting_validation import validate_sighting_form

__all__ = [
    "DetailViewer",
    "FormSession",
    "FormState",
    "Notifier",
    "SightingController",
    "SightingService",
    "validate_sighting_form",
]
