"""Track how far a set of ranked kanji strays from a target rank.

Kanji are added by frequency rank. Once as many kanji have been added as
there are keys to hold them, every further addition reports an offset: the
number of kanji between the highest kept rank and the target rank.
"""

# Returned while the keys are still being filled.
UNFILLED = 0x7FFF


class RankCoverage:
    """Offset of the kept kanji from a target rank as kanji are added."""

    def __init__(self, target_rank, key_capacity):
        self.reset(target_rank, key_capacity)

    def reset(self, target_rank, key_capacity):
        """Forget every added rank and start over with new limits."""
        self.target_rank = target_rank
        self._keys_unfilled = key_capacity
        self._ranks = set()
        self._position = 0
        self._offset = 0

    def _count_in_range(self, start_rank, end_rank):
        return sum(1 for rank in self._ranks if start_rank < rank <= end_rank)

    def add_kanji(self, rank):
        """Add a kanji of ``rank`` and return the current offset.

        Returns UNFILLED until the keys are full. Raises ValueError if the
        rank was already added.
        """
        if rank in self._ranks:
            raise ValueError(f"rank already added: {rank}")
        self._ranks.add(rank)

        if self._keys_unfilled > 0:
            self._keys_unfilled -= 1
            if self._keys_unfilled:
                return UNFILLED
            self._position = max(self._ranks)
            self._offset = self._count_in_range(self.target_rank, self._position)
            return self._offset

        if self._position > rank:
            self._position -= 1
            while self._position not in self._ranks:
                self._position -= 1

        if rank <= self.target_rank:
            self._offset -= 1

        return self._offset