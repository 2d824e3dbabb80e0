"""Infrastructure services."""

from coursepay.infrastructure.services.certificate_number_generator import (
    RandomCertificateNumberGenerator,
)

__all__ = [
    "RandomCertificateNumberGenerator",
]
