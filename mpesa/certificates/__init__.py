"""
Safaricom public certificates used to encrypt initiator passwords.

The PEM files ship inside the package and are read once at import.
"""

from importlib import resources


def _read(name: str) -> str:
    return resources.files(__name__).joinpath(name).read_text(encoding='utf-8')


SANDBOX_CERTIFICATE = _read('sandbox.cer')
PRODUCTION_CERTIFICATE = _read('production.cer')

__all__ = ['SANDBOX_CERTIFICATE', 'PRODUCTION_CERTIFICATE']
