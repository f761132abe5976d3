"""
Quadratic residue table for a prime modulus.
"""

from typing import Dict

from .mod_utils import check_modulus


def build_residue_table(p: int) -> Dict[int, int]:
    """
    Map every quadratic residue mod p to its smallest square root.

    Since i^2 = (p - i)^2 (mod p), scanning i = 0 .. (p-1)//2 finds every
    residue. The first (smallest) i seen for a residue is kept.

    Args:
        p: Prime modulus

    Returns:
        {residue: root}
    """
    check_modulus(p)
    table: Dict[int, int] = {}

    for i in range((p - 1) // 2 + 1):
        r = i * i % p
        if r not in table:
            table[r] = i

    return table
