"""Organ systems that record balance results, and the organism that draws them."""

from __future__ import annotations

ORGANS_PER_SYSTEM = 100
HEADER = "ORGANIZMA"
MUTATION_HEADER = "ORGANIZMA (MUTASYON)"
HEADER_WIDTH = 42
MUTATION_HEADER_WIDTH = 48


class OrganSystem:
    """Balance and mutation flags for up to a hundred organs."""

    def __init__(self) -> None:
        self.organs: list[bool] = []
        self.mutations: list[bool] = []

    def add_organ(self, balanced: bool) -> None:
        """Record a new organ; raise IndexError when the system is full."""
        if len(self.organs) >= ORGANS_PER_SYSTEM:
            raise IndexError("organ system is full")
        self.organs.append(bool(balanced))
        self.mutations.append(False)

    def set_mutation(self, healthy: bool) -> None:
        """Set the mutation flag of the most recently added organ."""
        if not self.mutations:
            raise IndexError("organ system has no organs")
        self.mutations[-1] = bool(healthy)


def _row(flags: list[bool]) -> str:
    padded = flags + [False] * (ORGANS_PER_SYSTEM - len(flags))
    return "".join(" " if flag else "#" for flag in padded)


class Organism:
    """A chain of organ systems; the last one is still being filled."""

    def __init__(self) -> None:
        self.systems: list[OrganSystem] = [OrganSystem()]

    @property
    def current(self) -> OrganSystem:
        return self.systems[-1]

    def new_system(self) -> OrganSystem:
        """Start and return a new system at the end of the chain."""
        system = OrganSystem()
        self.systems.append(system)
        return system

    def _render(self, title: str, width: int, mutation: bool) -> str:
        lines = [title.rjust(width)]
        for system in self.systems[:-1]:
            lines.append(_row(system.mutations if mutation else system.organs))
        return "".join(f"{line}\n" for line in lines)

    def render(self) -> str:
        """Draw every completed system: a blank for a balanced organ, '#' otherwise."""
        return self._render(HEADER, HEADER_WIDTH, mutation=False)

    def render_mutation(self) -> str:
        """Draw every completed system by its mutation flags."""
        return self._render(MUTATION_HEADER, MUTATION_HEADER_WIDTH, mutation=True)