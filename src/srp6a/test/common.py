from hashlib import sha256
from itertools import count
from srp6a.util import number_to_bytes

class PRG:
    # this returns a callable which, when invoked with an integer N, will
    # return N pseudorandom bytes derived from the seed
    def __init__(self, seed):
        self.generator = self.block_generator(seed)

    def __call__(self, numbytes):
        return b"".join([next(self.generator) for i in range(numbytes)])

    def block_generator(self, seed):
        assert isinstance(seed, type(b""))
        for counter in count():
            cseed = b"".join([b"prng-",
                              str(counter).encode("ascii"),
                              b"-",
                              seed])
            block = sha256(cseed).digest()
            for i in range(len(block)):
                yield block[i:i+1]

class Fixed:
    # replays a fixed list of byte strings, one per call, instead of
    # randomness. Each chunk must have exactly the requested length.
    def __init__(self, *chunks):
        self.chunks = list(chunks)

    def __call__(self, numbytes):
        chunk = self.chunks.pop(0)
        assert len(chunk) == numbytes, (len(chunk), numbytes)
        return chunk

def pinned_exponent(private, group):
    # private exponents are drawn as 1+r, r uniform in [0, N-1). Feeding
    # r = private-1 back in pins the exponent to a known value.
    return Fixed(number_to_bytes(private - 1, group.element_size_bytes))
