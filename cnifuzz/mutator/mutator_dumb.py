import random
import struct

#
# A dumb mutator employing several different fuzzing techniques
#

# Amount of data to mutate
MIN_CORRUPT = 0.005
MAX_CORRUPT = 0.03


def byteFlip(data, offset, rand):
    """Flip all bits in the byte"""
    return bytes([ data[offset] ^ 0xFF ]), 1


def bitFlip(data, offset, rand):
    """Flip a random bit in the byte"""
    bit = 1 << rand.randrange(0, 8)
    return bytes([ data[offset] ^ bit ]), 1


def randomReplace(data, offset, rand):
    """Replace a byte with a random byte"""
    return bytes([ rand.randrange(0, 256) ]), 1


def arithmetic(data, offset, rand):
    """Perform arithmetic on varying sized values"""
    length, pattern, value_max = rand.choice([(1, "<b", 0x7f), (2, "<h", 0x7fff),
                                              (4, "<l", 0x7fffffff)])
    tmp = data[offset:offset + length]
    if len(tmp) < length:
        return tmp, len(tmp)

    value = struct.unpack(pattern, tmp)[0]

    # Slide the value
    value += rand.randrange(-5, 6)

    value_min = -1 * (value_max + 1)
    if value > value_max:
        value = (value & value_max) + value_min
    elif value < value_min:
        value = (value & value_max) * -1

    return struct.pack(pattern, value), length


MUTATORS = [
    byteFlip,
    bitFlip,
    randomReplace,
    arithmetic,
]


class MutatorDumb(object):
    """
    In-process mutator, for when no external mutation engine is around.

    Corrupts a small random amount of bytes of the input.
    """

    def __init__(self, seed):
        self.rand = random.Random(seed)


    def mutate(self, data):
        size = len(data)
        if size == 0:
            return data

        # Generate a bunch of offsets for data we are going to corrupt and sort them
        corrupt_pct = (self.rand.random() * (MAX_CORRUPT - MIN_CORRUPT)) + MIN_CORRUPT
        offsets = sorted(set(
            self.rand.randint(0, size - 1) for _ in range(int(size * corrupt_pct) + 1)))

        out = bytearray()
        current = 0
        for offset in offsets:
            # a previous (multibyte) mutation may have covered this offset
            if offset < current:
                continue
            out += data[current:offset]

            mutator = self.rand.choice(MUTATORS)
            mutatedData, consumed = mutator(data, offset, self.rand)
            out += mutatedData
            current = offset + consumed

        out += data[current:]
        return bytes(out)
