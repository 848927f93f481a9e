import argparse
import sys
from enum import IntEnum

UINT32_MASK = 0xFFFFFFFF
DOMAIN_MAX = 10
OUT_OF_DOMAIN_STATUS = -1


class Verdict(IntEnum):
    NOT_PRIME = 0
    PRIME = 1
    OUT_OF_DOMAIN = OUT_OF_DOMAIN_STATUS


class OutOfDomainError(ValueError):
    """Raised when a strict check is asked about a value above DOMAIN_MAX."""


def to_uint32(a):
    """
    Reduce an integer to the unsigned 32-bit range.

    Negative values wrap the same way a C `unsigned int` parameter does,
    so -1 becomes 4294967295.

    Args:
        a: The integer to convert

    Returns:
        a modulo 2**32
    """
    # bool is an int subclass but never a meaningful input here
    if isinstance(a, bool) or not isinstance(a, int):
        raise TypeError(f"Expected an unsigned integer, got {type(a).__name__}")
    return a & UINT32_MASK


def first_divisor(a):
    """
    Find the smallest factor of a by linear trial division.

    Args:
        a: The number to factor

    Returns:
        The smallest i in [2, a) dividing a, or a itself if there is none
    """
    a = to_uint32(a)
    i = 2
    while i < a:
        if a % i == 0:
            return i
        i += 1

    return a


def classify(a) -> Verdict:
    """
    Decide whether a is a prime no larger than DOMAIN_MAX.

    Args:
        a: The number to check

    Returns:
        Verdict.PRIME or Verdict.NOT_PRIME for a <= 10,
        Verdict.OUT_OF_DOMAIN otherwise
    """
    a = to_uint32(a)
    if a > DOMAIN_MAX:
        return Verdict.OUT_OF_DOMAIN

    if a > 1 and first_divisor(a) == a:
        return Verdict.PRIME
    return Verdict.NOT_PRIME


def is_small_prime(a) -> int:
    """
    Integer status form of classify().

    Returns:
        1 if a is prime, 0 if not, OUT_OF_DOMAIN_STATUS (-1) when a > 10
    """
    return int(classify(a))


def require_small_prime(a) -> bool:
    """Strict form of classify(): raises OutOfDomainError for a > 10."""
    verdict = classify(a)
    if verdict is Verdict.OUT_OF_DOMAIN:
        raise OutOfDomainError(
            f"{to_uint32(a)} is outside the supported range [0, {DOMAIN_MAX}]"
        )
    return verdict is Verdict.PRIME


def describe(a) -> str:
    """
    Human-readable verdict for the CLI.

    Args:
        a: The number to check; reported after the 32-bit wrap

    Returns:
        A one-line description naming the value that was checked
    """
    a = to_uint32(a)
    verdict = classify(a)
    if verdict is Verdict.PRIME:
        return f"{a} is prime"
    if verdict is Verdict.NOT_PRIME:
        return f"{a} is not prime (smallest factor: {first_divisor(a)})"
    return f"{a} is out of range (only 0..{DOMAIN_MAX} are checked)"


def main(argv=None):
    parser = argparse.ArgumentParser(description="Check small numbers for primality")
    parser.add_argument("numbers", nargs="*", type=int, help="Numbers to check (default: 0..11)")
    args = parser.parse_args(argv)

    numbers = args.numbers or list(range(DOMAIN_MAX + 2))
    for num in numbers:
        print(describe(num))
    return 0


if __name__ == "__main__":
    sys.exit(main())
