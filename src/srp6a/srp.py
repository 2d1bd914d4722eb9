import os, json, hmac, logging
from binascii import hexlify, unhexlify
from enum import Enum
from hashlib import sha256
from hkdf import Hkdf
from .errors import (DegenerateEphemeral, InvalidPublicValue, ProofMismatch,
                     SessionNotEstablished, OutOfOrder, SerializedTooEarly,
                     WrongSideSerialized, WrongGroupError)
from .hashes import hash_padded
from .params import Params, DefaultParams
from .util import unbiased_randrange, bytes_to_number
from .verifier import compute_x

logger = logging.getLogger(__name__)

class State(Enum):
    INIT = "init"
    EPHEMERAL_SENT = "ephemeral-sent"
    PROOF_SENT = "proof-sent" # client only
    AUTHENTICATED = "authenticated"
    FAILED = "failed"

SideClient = "client"
SideServer = "server"

# Client (knows I, P)                 Server (knows I, s, v)
#
# a = random(1, N)
# A = g^a % N             -- I, A -->
#                                      b = random(1, N)
#                         <-- s, B --  B = (k*v + g^b) % N
# abort if B % N == 0
# u = H(pad(A) | pad(B))               u = H(pad(A) | pad(B))
# abort if u == 0                      abort if A % N == 0 or u == 0
# x = H(s | H(I | ":" | P))
# S = (B - k*g^x) ^ (a + u*x) % N      S = (A * v^u) ^ b % N
# K = H(pad(S))                        K = H(pad(S))
# M1 = H(pad(A) | pad(B) | K) -- M1 -->
#                                      abort unless M1 matches
#                         <-- M2 --    M2 = H(pad(A) | M1 | K)
# abort unless M2 matches
#
# to serialize intermediate state, remember the private exponent and what
# the side was constructed with. And which params.

class _SRPBase:
    "This class manages one side of an SRP-6a exchange."

    side = None # set by the subclass

    def __init__(self, identity, params=DefaultParams, entropy_f=os.urandom):
        assert isinstance(identity, bytes), repr(identity)
        assert isinstance(params, Params), repr(params)
        self.identity = identity
        self.params = params
        self.entropy_f = entropy_f

        self.state = State.INIT
        self.A = None
        self.B = None
        self._private = None
        self._K = None

    def _require(self, method, *states):
        if self.state not in states:
            raise OutOfOrder("%s() cannot be called in state %s"
                             % (method, self.state.value))

    def _transition(self, state):
        logger.debug("%s %r: %s -> %s", self.side, self.identity,
                     self.state.value, state.value)
        self.state = state

    def _generate_ephemeral(self):
        g = self.params.group
        while True:
            private = unbiased_randrange(1, g.N, self.entropy_f)
            try:
                public = self._compute_public(private)
            except DegenerateEphemeral:
                logger.debug("%s %r: degenerate ephemeral, drawing again",
                             self.side, self.identity)
                continue
            return private, public

    def _scrambler(self):
        # u = H(pad(A) | pad(B))
        g = self.params.group
        A, B = bytes_to_number(self.A), bytes_to_number(self.B)
        return bytes_to_number(hash_padded(self.params.hash, [A, B],
                                           g.element_size_bytes))

    def _session_key_from_secret(self, S):
        return self.params.hash.hash(self.params.group.element_to_bytes(S))

    def _client_proof(self, K):
        return self.params.hash.hash(self.A + self.B + K)

    def _server_proof(self, M1, K):
        return self.params.hash.hash(self.A + M1 + K)

    def _wipe(self):
        self._private = None

    def _abort(self):
        self._wipe()
        self._K = None
        self._transition(State.FAILED)
        logger.info("%s %r: authentication failed", self.side, self.identity)

    def session_key(self):
        if self.state is not State.AUTHENTICATED:
            raise SessionNotEstablished("no session key in state %s"
                                        % self.state.value)
        return self._K

    def derive_key(self, info, length=32, salt=b""):
        """Expand the session key into an application key with
        HKDF-SHA256. Use a different 'info' for each purpose."""
        assert isinstance(info, bytes), repr(info)
        h = Hkdf(salt=salt, input_key_material=self.session_key(),
                 hash=sha256)
        return h.expand(info, length)

    def serialize(self):
        if self.state is State.INIT:
            raise SerializedTooEarly("call .start() before .serialize()")
        self._require("serialize", State.EPHEMERAL_SENT)
        return json.dumps(self._serialize_to_dict()).encode("ascii")

    @classmethod
    def from_serialized(klass, data, params=DefaultParams):
        d = json.loads(data.decode("ascii"))
        if d.get("side") != klass.side:
            raise WrongSideSerialized
        return klass._deserialize_from_dict(d, params)

    def _check_restored_params(self, d):
        if d["hashed_params"] != self.params.fingerprint():
            err = ("from_serialized() must be called with the same"
                   " params= that were used to create the serialized data."
                   " These are different somehow.")
            raise WrongGroupError(err)

    def _restore_ephemeral(self, private_hex):
        private = bytes_to_number(unhexlify(private_hex.encode("ascii")))
        self._private = private
        public = self._compute_public(private)
        self._transition(State.EPHEMERAL_SENT)
        return self.params.group.element_to_bytes(public)

def _should_be_unused(count): raise NotImplementedError


class SRPClient(_SRPBase):
    side = SideClient

    def __init__(self, identity, password,
                 params=DefaultParams, entropy_f=os.urandom):
        _SRPBase.__init__(self, identity, params=params, entropy_f=entropy_f)
        assert isinstance(password, bytes)
        self._password = password
        self.salt = None
        self.M1 = None
        self._expected_M2 = None

    def _compute_public(self, a):
        g = self.params.group
        A = pow(g.g, a, g.N)
        if A % g.N == 0:
            raise DegenerateEphemeral
        return A

    def start(self):
        """Generate our ephemeral key pair and return A for the server."""
        self._require("start", State.INIT)
        self._private, A = self._generate_ephemeral()
        self.A = self.params.group.element_to_bytes(A)
        self._transition(State.EPHEMERAL_SENT)
        return self.A

    def process_challenge(self, salt, B_bytes):
        """Take the server's (salt, B) and return our proof M1.

        Raises InvalidPublicValue, before any proof is computed, if B is
        zero modulo N or the scrambling parameter u comes out zero. A
        server that could send B=0 would otherwise learn S without knowing
        the verifier."""
        self._require("process_challenge", State.EPHEMERAL_SENT)
        assert isinstance(salt, bytes), repr(salt)
        g = self.params.group
        N = g.N
        B = g.bytes_to_element(B_bytes)
        if B % N == 0 or B >= N:
            self._abort()
            raise InvalidPublicValue()
        self.B = B_bytes
        self.salt = salt
        u = self._scrambler()
        if u == 0:
            self._abort()
            raise InvalidPublicValue()

        x = compute_x(self.identity, salt, self._password, self.params)
        # B - k*g^x can go negative, so bring the base back into [0, N)
        base = (B - self.params.k * pow(g.g, x, N)) % N
        S = pow(base, self._private + u * x, N)
        K = self._session_key_from_secret(S)
        self.M1 = self._client_proof(K)
        self._expected_M2 = self._server_proof(self.M1, K)
        self._K = K
        self._wipe()
        self._transition(State.PROOF_SENT)
        return self.M1

    def verify_server(self, M2):
        """Check the server's proof M2. Raises ProofMismatch if the server
        does not know our verifier (or we typed the wrong password)."""
        self._require("verify_server", State.PROOF_SENT)
        if not hmac.compare_digest(M2, self._expected_M2):
            self._abort()
            raise ProofMismatch()
        self._expected_M2 = None
        self._transition(State.AUTHENTICATED)

    def _wipe(self):
        _SRPBase._wipe(self)
        self._password = None

    def _abort(self):
        _SRPBase._abort(self)
        self._expected_M2 = None

    def _serialize_to_dict(self):
        g = self.params.group
        d = {"hashed_params": self.params.fingerprint(),
             "side": self.side,
             "identity": hexlify(self.identity).decode("ascii"),
             "password": hexlify(self._password).decode("ascii"),
             "private": hexlify(g.element_to_bytes(self._private)).decode("ascii"),
             }
        return d

    @classmethod
    def _deserialize_from_dict(klass, d, params):
        self = klass(identity=unhexlify(d["identity"].encode("ascii")),
                     password=unhexlify(d["password"].encode("ascii")),
                     params=params, entropy_f=_should_be_unused)
        self._check_restored_params(d)
        self.A = self._restore_ephemeral(d["private"])
        return self


class SRPServer(_SRPBase):
    side = SideServer

    def __init__(self, identity, salt, verifier,
                 params=DefaultParams, entropy_f=os.urandom):
        _SRPBase.__init__(self, identity, params=params, entropy_f=entropy_f)
        assert isinstance(salt, bytes), repr(salt)
        g = params.group
        if isinstance(verifier, bytes):
            verifier = g.bytes_to_element(verifier)
        if not 0 < verifier < g.N:
            raise ValueError("verifier out of range")
        self.salt = salt
        self._v = verifier

    def _compute_public(self, b):
        g = self.params.group
        B = (self.params.k * self._v + pow(g.g, b, g.N)) % g.N
        if B == 0:
            raise DegenerateEphemeral
        return B

    def start(self):
        """Generate our ephemeral key pair and return (salt, B) for the
        client."""
        self._require("start", State.INIT)
        self._private, B = self._generate_ephemeral()
        self.B = self.params.group.element_to_bytes(B)
        self._transition(State.EPHEMERAL_SENT)
        return self.salt, self.B

    def verify_client(self, A_bytes, M1):
        """Take the client's A and proof M1, and return our proof M2.

        Raises InvalidPublicValue if A is zero modulo N (or u is zero), and
        ProofMismatch if M1 is wrong. Both do the same amount of work
        before failing, and both are AuthenticationFailed with the same
        message, so the client cannot tell them apart."""
        self._require("verify_client", State.EPHEMERAL_SENT)
        g = self.params.group
        N = g.N
        A = g.bytes_to_element(A_bytes)
        self.A = A_bytes
        u = self._scrambler()
        valid = (A % N != 0) and (A < N) and (u != 0)
        if not valid:
            # finish the computation on a throwaway value, so a forged A
            # costs as long as a wrong password
            A, u = 1, self.params.hash.hash_int(A_bytes) | 1

        S = pow((A * pow(self._v, u, N)) % N, self._private, N)
        K = self._session_key_from_secret(S)
        matched = hmac.compare_digest(M1, self._client_proof(K))
        if not valid:
            self._abort()
            raise InvalidPublicValue()
        if not matched:
            self._abort()
            raise ProofMismatch()

        M2 = self._server_proof(M1, K)
        self._K = K
        self._wipe()
        self._transition(State.AUTHENTICATED)
        return M2

    def _serialize_to_dict(self):
        g = self.params.group
        d = {"hashed_params": self.params.fingerprint(),
             "side": self.side,
             "identity": hexlify(self.identity).decode("ascii"),
             "salt": hexlify(self.salt).decode("ascii"),
             "verifier": hexlify(g.element_to_bytes(self._v)).decode("ascii"),
             "private": hexlify(g.element_to_bytes(self._private)).decode("ascii"),
             }
        return d

    @classmethod
    def _deserialize_from_dict(klass, d, params):
        g = params.group
        verifier = unhexlify(d["verifier"].encode("ascii"))
        if len(verifier) != g.element_size_bytes:
            raise WrongGroupError("verifier was stored for another group")
        self = klass(identity=unhexlify(d["identity"].encode("ascii")),
                     salt=unhexlify(d["salt"].encode("ascii")),
                     verifier=verifier,
                     params=params, entropy_f=_should_be_unused)
        self._check_restored_params(d)
        self.B = self._restore_ephemeral(d["private"])
        return self
