from .config import SigningConfig
from .models import SigningFormat

__all__ = [
    "SigningConfig",
    "SigningFormat",
]
