import base64

from cryptography import x509
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from mpesa.errors import EncryptionError


def encrypt_initiator_password(password: str, certificate_pem: str) -> str:
    """
    Encrypt the initiator password against a Safaricom X.509 certificate.

    The password is encrypted with the certificate's RSA public key under
    PKCS#1 v1.5 padding, so two calls never produce the same ciphertext.

    Returns the base64 ``SecurityCredential`` value.
    """
    try:
        certificate = x509.load_pem_x509_certificate(certificate_pem.encode())
        public_key = certificate.public_key()
    except (ValueError, TypeError, AttributeError) as exc:
        raise EncryptionError(f"could not load certificate - {exc}") from exc

    if not isinstance(public_key, rsa.RSAPublicKey):
        raise EncryptionError("certificate does not carry an RSA public key")

    try:
        ciphertext = public_key.encrypt(password.encode(), padding.PKCS1v15())
    except (ValueError, TypeError) as exc:
        # never echo the password back
        raise EncryptionError(f"RSA encryption failed - {type(exc).__name__}") from None

    return base64.b64encode(ciphertext).decode()
