from .srp import SRPClient, SRPServer, State
from .errors import (SRPError, AuthenticationFailed, InvalidPublicValue,
                     ProofMismatch, UnsupportedGroup, SessionNotEstablished)
from .params import (Params, DefaultParams, lookup, check_params,
                     Params1024, Params1536, Params2048, Params3072, Params4096)
from .verifier import derive, create_salted_verifier
SRPClient, SRPServer, State # hush pyflakes
SRPError, AuthenticationFailed, InvalidPublicValue, ProofMismatch
UnsupportedGroup, SessionNotEstablished
Params, DefaultParams, lookup, check_params
Params1024, Params1536, Params2048, Params3072, Params4096
derive, create_salted_verifier

__version__ = "0.1.0"
