
"""
exchange.py
Implements the provably fair random exchange as an explicit state machine:
Created (FairExchange) -> Committed -> CounterpartyContributed -> Revealed.
Each state is its own class, so the combined result only exists on RevealedExchange and
the committed number can never be chosen after seeing the counterparty's input.
Related modules:
- random_source.py: Draws the committer's secret number.
- commitment.py: Binds that number to the published digest.
- engine.py: Runs one exchange per first-move decision and per roll.
"""

from dataclasses import dataclass, field
from typing import Optional

from .commitment import Commitment, CommitmentScheme
from .random_source import SecureRandomSource


class ProtocolStateError(RuntimeError):
    """
    Raised when an exchange state is advanced twice. A programming error, not user-recoverable.
    """
    pass


class _SingleUse:
    """Guards a state object so that it can be advanced exactly once."""
    _spent = False

    def _advance(self, transition: str) -> None:
        if self._spent:
            raise ProtocolStateError(f"{type(self).__name__}.{transition}() was already called")
        self._spent = True


class FairExchange(_SingleUse):
    """
    Created state. Holds the range and the collaborators; nothing is drawn yet.
    """
    def __init__(self, range_: int, random_source: Optional[SecureRandomSource] = None, scheme: Optional[CommitmentScheme] = None):
        """
        Args:
            range_ (int): Size of the outcome space, at least 2.
            random_source (SecureRandomSource, optional): Source of the own number.
            scheme (CommitmentScheme, optional): Commitment scheme; shares random_source by default.
        Raises:
            ValueError: If range_ is not an integer >= 2.
        """
        if isinstance(range_, bool) or not isinstance(range_, int) or range_ < 2:
            raise ValueError(f"exchange range must be an integer >= 2, got {range_!r}")
        self.range = range_
        self.random_source = random_source or SecureRandomSource()
        self.scheme = scheme or CommitmentScheme(self.random_source)

    def commit(self) -> "CommittedExchange":
        """
        Draw the own number and commit to it.
        Returns:
            CommittedExchange: Exposes only the digest.
        """
        self._advance("commit")
        own_number = self.random_source.uniform(self.range)
        commitment = self.scheme.commit(own_number)
        return CommittedExchange(self.range, own_number, commitment, self.scheme)


class CommittedExchange(_SingleUse):
    """
    Committed state. The digest is public; the own number and key stay private.
    """
    def __init__(self, range_: int, own_number: int, commitment: Commitment, scheme: CommitmentScheme):
        self.range = range_
        self._own_number = own_number
        self._commitment = commitment
        self._scheme = scheme

    @property
    def digest(self) -> str:
        return self._commitment.digest

    def contribute(self, value: int) -> "ContributedExchange":
        """
        Accept the counterparty's number, always reduced modulo the range.
        Args:
            value (int): Counterparty contribution (any integer).
        Returns:
            ContributedExchange: Ready to reveal.
        Raises:
            TypeError: If value is not an integer.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"counterparty contribution must be an integer, got {value!r}")
        self._advance("contribute")
        return ContributedExchange(self.range, self._own_number, value % self.range, self._commitment, self._scheme)


class ContributedExchange(_SingleUse):
    """
    CounterpartyContributed state. Both numbers are fixed; only reveal() remains.
    """
    def __init__(self, range_: int, own_number: int, counterparty_number: int, commitment: Commitment, scheme: CommitmentScheme):
        self.range = range_
        self.counterparty_number = counterparty_number
        self._own_number = own_number
        self._commitment = commitment
        self._scheme = scheme

    @property
    def digest(self) -> str:
        return self._commitment.digest

    def reveal(self) -> "RevealedExchange":
        """Disclose own number and key; the combined result becomes available."""
        self._advance("reveal")
        return RevealedExchange(
            range=self.range,
            own_number=self._own_number,
            counterparty_number=self.counterparty_number,
            key=self._commitment.key,
            digest=self._commitment.digest,
            scheme=self._scheme,
        )


@dataclass(frozen=True)
class RevealedExchange:
    """
    Revealed state: everything is public and the result is defined.
    Fields:
        range (int): Outcome space size.
        own_number (int): Committer's number.
        counterparty_number (int): Counterparty's number, already reduced mod range.
        key (bytes): Revealed HMAC key.
        digest (str): Digest published at commit time.
    """
    range: int
    own_number: int
    counterparty_number: int
    key: bytes
    digest: str
    scheme: CommitmentScheme = field(repr=False, compare=False)

    @property
    def result(self) -> int:
        return (self.own_number + self.counterparty_number) % self.range

    @property
    def key_hex(self) -> str:
        return self.key.hex()

    def verify(self) -> bool:
        """Recheck that the revealed key and number match the digest published at commit time."""
        return self.scheme.verify(self.key, self.own_number, self.digest)
