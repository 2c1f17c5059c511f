"""Exceptions raised across the package."""


class _DefaultMessageError(Exception):
    """Exception whose message falls back to a per-class default."""

    default_message = "error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)


class ProofError(_DefaultMessageError):
    """A zero-knowledge proof did not verify."""

    default_message = "Error while verifying"


class VerifyShareError(_DefaultMessageError):
    """A secret share does not match the published commitments."""

    default_message = "share does not match commitments"


class DeserializationError(_DefaultMessageError, ValueError):
    """Bytes do not encode a valid scalar or point."""

    default_message = "failed to deserialize"


class NotOnCurve(_DefaultMessageError, ValueError):
    """Coordinates do not describe a point on the curve."""

    default_message = "point is not on the curve"


class MacError(_DefaultMessageError):
    """A message authentication code did not verify."""

    default_message = "MAC verification failed"