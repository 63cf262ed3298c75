"""FormGuard — client-form validation rules for appointment booking and registration."""

from formguard.validators import FormValidator, score_password

__version__ = "1.0.0"

__all__ = ["FormValidator", "score_password", "__version__"]
