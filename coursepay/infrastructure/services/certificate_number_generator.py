import secrets

from coursepay.application.interfaces.certificate_repo import CertificateNumberGenerator
from coursepay.application.interfaces.clock import Clock, SystemClock


class RandomCertificateNumberGenerator(CertificateNumberGenerator):
    """
    Format: CERT-<YYYYMM>-<8 uppercase hex chars>.

    Example: CERT-202610-9F2C41AB
    """

    TOKEN_BYTES = 4

    def __init__(self, clock: Clock | None = None):
        self._clock = clock or SystemClock()

    async def next_number(self) -> str:
        period = self._clock.now().strftime("%Y%m")
        return f"CERT-{period}-{secrets.token_hex(self.TOKEN_BYTES).upper()}"
