class SRPError(Exception):
    pass

class UnsupportedGroup(SRPError, ValueError):
    """No standard group exists for the requested bit length."""
class WrongGroupError(SRPError):
    """Both sides (or a saved session and its restorer) must use the same
    params. Using different ones would silently produce different keys."""
class Overflow(SRPError, ValueError):
    """A number is wider than the byte width it is being encoded into."""
class DegenerateEphemeral(SRPError):
    """The freshly generated public value was zero modulo N. Callers never
    see this: a new private exponent is drawn instead."""

class AuthenticationFailed(SRPError):
    """The exchange did not authenticate. Deliberately vague: a wrong
    password, a forged public value and a bad proof all look the same."""
    def __init__(self, *args):
        SRPError.__init__(self, "authentication failed")
class InvalidPublicValue(AuthenticationFailed):
    """The peer's public value (or the scrambler derived from it) was zero
    modulo N."""
class ProofMismatch(AuthenticationFailed):
    """The peer's proof did not match ours."""

class SessionNotEstablished(SRPError):
    """The session key is only available after both proofs have checked
    out."""
class OutOfOrder(SRPError):
    """A session method was called in the wrong state. Each session is good
    for exactly one exchange, in order."""
class SerializedTooEarly(SRPError):
    pass
class WrongSideSerialized(SRPError):
    """You tried to unserialize data stored for the other side."""
