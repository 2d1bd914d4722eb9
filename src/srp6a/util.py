import os, binascii
from .errors import Overflow

def size_bits(maxval):
    return maxval.bit_length() or 1

def size_bytes(maxval):
    return (size_bits(maxval) + 7) // 8

def number_to_bytes(num, width):
    """Encode a non-negative integer as exactly 'width' big-endian bytes,
    left-padded with zeros. Raises Overflow if it does not fit."""
    if num < 0:
        raise Overflow("cannot encode negative number")
    if num >> (8 * width):
        raise Overflow("number does not fit in %d bytes" % width)
    fmt_str = "%0" + str(2*width) + "x"
    s = binascii.unhexlify((fmt_str % num).encode("ascii"))
    assert len(s) == width
    return s

def bytes_to_number(s):
    if not isinstance(s, bytes):
        raise TypeError("expected bytes, got %r" % type(s))
    if not s:
        return 0
    return int(binascii.hexlify(s), 16)

def generate_mask(maxval):
    num_bytes = size_bytes(maxval)
    num_bits = size_bits(maxval)
    leftover_bits = num_bits % 8
    if leftover_bits:
        top_byte_mask_int = (0x1 << leftover_bits) - 1
    else:
        top_byte_mask_int = 0xff
    assert 0 <= top_byte_mask_int <= 0xff
    return (top_byte_mask_int, num_bytes)

def random_list_of_ints(count, entropy_f=os.urandom):
    # return a list of ints, each 0<=x<=255, for masking
    return list(entropy_f(count))
def mask_list_of_ints(top_byte_mask_int, list_of_ints):
    return [top_byte_mask_int & list_of_ints[0]] + list_of_ints[1:]
def list_of_ints_to_number(l):
    return bytes_to_number(bytes(l))

def unbiased_randrange(start, stop, entropy_f):
    """Return a random integer k such that start <= k < stop, uniformly
    distributed across that range, like random.randrange but
    cryptographically bound and unbiased.

    r(1,N) provides a private exponent for any of the SRP groups.
    """

    # we generate a random binary string up to 7 bits larger than we really
    # need, mask that down to be the right number of bits, then compare
    # against the range and try again if it's wrong. This will take a random
    # number of tries, but on average less than two

    # first we get 0<=number<(stop-start)
    maxval = stop - start

    top_byte_mask_int, num_bytes = generate_mask(maxval)
    while True:
        enough_bytes = random_list_of_ints(num_bytes, entropy_f)
        assert len(enough_bytes) == num_bytes
        candidate_bytes = mask_list_of_ints(top_byte_mask_int, enough_bytes)
        candidate_int = list_of_ints_to_number(candidate_bytes)
        if candidate_int < maxval:
            return start + candidate_int
