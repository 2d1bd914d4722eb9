import os
from .params import DefaultParams

# I = identity (username), P = password, s = salt
# x = H(s | H(I | ":" | P))
# v = g^x % N
#
# The inner hash keeps I and P apart: without it, ("ab", "c") and ("a",
# "bc") would hash the same. x must never leave this process; v is what the
# server stores, next to s.

def compute_x(identity, salt, password, params=DefaultParams):
    assert isinstance(identity, bytes), repr(identity)
    assert isinstance(salt, bytes), repr(salt)
    assert isinstance(password, bytes)
    h = params.hash
    inner = h.hash(b"".join([identity, b":", password]))
    return h.hash_int(salt + inner)

def derive(identity, salt, password, params=DefaultParams):
    """Return (x, v) for this identity/salt/password. Pure: nothing is
    retained, and callers should only persist v."""
    g = params.group
    x = compute_x(identity, salt, password, params)
    v = pow(g.g, x, g.N)
    return x, v

def create_salted_verifier(identity, password, params=DefaultParams,
                           salt_len=16, entropy_f=os.urandom):
    """Registration helper: pick a fresh random salt and return
    (salt, verifier_bytes), both ready to hand to a credential store."""
    salt = entropy_f(salt_len)
    assert len(salt) == salt_len
    _, v = derive(identity, salt, password, params)
    return salt, params.group.element_to_bytes(v)
