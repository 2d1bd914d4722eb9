import hashlib
from .util import number_to_bytes, bytes_to_number

"""Interface specification for a HashEngine.

Every hash computed by the protocol (x, u, k, K, M1, M2) goes through one
of these, so a deployment can pick a different digest without touching the
padding or ordering rules:

    h = SHA1 # or SHA256, SHA512, HashEngine("sha3_256")

    digest = h.hash(data)         # bytes, h.digest_size long
    i = h.hash_int(data)          # the same digest as a big-endian integer
    name = h.name                 # recorded when sessions are serialized

SHA1 is the default because RFC 5054 (and its published test vectors)
uses it.
"""

class HashEngine:
    def __init__(self, name):
        self.name = name
        self.digest_size = hashlib.new(name).digest_size

    def hash(self, data):
        assert isinstance(data, bytes), repr(data)
        return hashlib.new(self.name, data).digest()

    def hash_int(self, data):
        return bytes_to_number(self.hash(data))

    def __repr__(self):
        return "<HashEngine %s>" % self.name

SHA1 = HashEngine("sha1")
SHA256 = HashEngine("sha256")
SHA512 = HashEngine("sha512")

def hash_padded(h, values, width):
    # every value is padded to the full group width, never its natural
    # length: peers that disagree on this silently derive different keys
    return h.hash(b"".join([number_to_bytes(v, width) for v in values]))
