from hashlib import sha256
from .errors import WrongGroupError
from .groups import GROUPS, lookup_group
from .hashes import SHA1, hash_padded
from .util import bytes_to_number

# k is the SRP-6a multiplier, k = H(pad(N) | pad(g)). Both N and g are
# padded to the width of N: hashing g at its natural one-byte length is a
# well-known interop bug that yields a different k on each side, and thus
# different keys, with no error anywhere.
#
# Since k depends on the hash, a Params binds one group to one HashEngine.
# Both sides must agree on both.

class Params:
    def __init__(self, group, hash=SHA1):
        self.group = group
        self.hash = hash
        width = group.element_size_bytes
        self.k_bytes = hash_padded(hash, [group.N, group.g], width)
        self.k = bytes_to_number(self.k_bytes)
        self._frozen = True

    def __setattr__(self, name, value):
        if getattr(self, "_frozen", False):
            raise AttributeError("params are immutable")
        object.__setattr__(self, name, value)

    def fingerprint(self):
        # enough to tell whether two Params would produce the same keys
        g = self.group
        pieces = [g.element_to_bytes(g.N), g.element_to_bytes(g.g),
                  self.hash.name.encode("ascii"), self.k_bytes]
        return sha256(b"".join(pieces)).hexdigest()

    def __repr__(self):
        return "<Params %d-bit %s>" % (self.group.element_size_bits,
                                       self.hash.name)

Params1024 = Params(GROUPS[1024])
Params1536 = Params(GROUPS[1536])
Params2048 = Params(GROUPS[2048])
Params3072 = Params(GROUPS[3072])
Params4096 = Params(GROUPS[4096])

_DEFAULT_PARAMS = {
    1024: Params1024,
    1536: Params1536,
    2048: Params2048,
    3072: Params3072,
    4096: Params4096,
    }

DefaultParams = Params2048

def lookup(bits, hash=None, groups=GROUPS):
    """Return the Params for a standard group size.

    With the default hash and registry this is one of the shared module
    constants. Otherwise a new (equally immutable) Params is built. Raises
    UnsupportedGroup for any size not in the registry.
    """
    group = lookup_group(bits, groups)
    if hash is None or hash is SHA1:
        if groups is GROUPS:
            return _DEFAULT_PARAMS[bits]
        hash = SHA1
    return Params(group, hash)

def check_params(params, bits, hash=None):
    """Fail before a session starts if the configured params do not match
    what was negotiated out of band."""
    expected = lookup(bits, hash=hash)
    if params.fingerprint() != expected.fingerprint():
        raise WrongGroupError("expected %r, configured with %r"
                              % (expected, params))
