from dataclasses import dataclass


@dataclass(frozen=True)
class AuthenticationResponse:
    """Body of a successful ``oauth/v1/generate`` call."""
    access_token: str
    expires_in: int

    def __repr__(self):
        return f"AuthenticationResponse(access_token='***', expires_in={self.expires_in})"
