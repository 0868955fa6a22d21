import random
import string

ENTRY_ID_LENGTH = 6
_ALLOWED = set(string.ascii_uppercase + string.digits)


def generate_entry_id(name: str, rng: random.Random = None) -> str:
    """Build a 6 character label for a stock entry from a product name.

    The uppercase initials of each word are combined with a zero padded
    random number, shuffled and cut to six characters. Nothing checks the
    result against existing entries, so treat it as a label and never as a key.
    """
    rng = rng or random
    initials = "".join(word[0] for word in name.split()).upper()
    initials = "".join(c for c in initials if c in _ALLOWED)

    chars = list(initials + f"{rng.randint(0, 9998):04d}")
    while len(chars) < ENTRY_ID_LENGTH:
        chars.append(rng.choice(string.digits))

    rng.shuffle(chars)
    return "".join(chars[:ENTRY_ID_LENGTH])
