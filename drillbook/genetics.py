"""DNA strand comparison and RNA-to-protein translation."""

from __future__ import annotations

_PROTEINS = {
    **dict.fromkeys(("UCU", "UCC", "UCA", "UCG"), "Serine"),
    **dict.fromkeys(("UUU", "UUC"), "Phenylalanine"),
    **dict.fromkeys(("UUA", "UUG"), "Leucine"),
    **dict.fromkeys(("UAU", "UAC"), "Tyrosine"),
    **dict.fromkeys(("UGU", "UGC"), "Cysteine"),
    "UGG": "Tryptophan",
    "AUG": "Methionine",
}

_STOP_CODONS = frozenset({"UAA", "UAG", "UGA"})


class StopCodon(Exception):
    """Raised when a codon marks the end of translation."""

    def __init__(self, message: str = "STOP Codon") -> None:
        super().__init__(message)


class InvalidCodonError(ValueError):
    """Raised when a codon matches no known protein."""

    def __init__(self, message: str = "Invalid Codon") -> None:
        super().__init__(message)


def hamming_distance(a: str, b: str) -> int:
    """Count the positions at which two strands differ.

    Raises ValueError when the strands are not the same length.
    """
    left, right = a.encode(), b.encode()
    if len(left) != len(right):
        raise ValueError("strands must be of equal length")
    return sum(x != y for x, y in zip(left, right))


def from_codon(codon: str) -> str:
    """Return the protein a codon encodes.

    Raises StopCodon for a stop codon and InvalidCodonError for an unknown one.
    """
    if codon in _STOP_CODONS:
        raise StopCodon()
    try:
        return _PROTEINS[codon]
    except KeyError:
        raise InvalidCodonError() from None


def from_rna(rna: str) -> list[str]:
    """Translate an RNA sequence into proteins, stopping at the first stop codon.

    An incomplete codon at the end is ignored. Raises InvalidCodonError on an
    unknown codon.
    """
    proteins = []
    nucleotides = iter(rna)
    for triple in zip(nucleotides, nucleotides, nucleotides):
        try:
            proteins.append(from_codon("".join(triple)))
        except StopCodon:
            break
    return proteins