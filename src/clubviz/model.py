"""Club and person entities rendered by the grid visualizer.

These are the read-only collaborators the visualizer consumes: a club exposes
its members and trait counts, a person exposes its trait and the clubs it
belongs to. `build_random_snapshot` assembles a reproducible population for
the CLI and the viewer.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple
import numpy as np

from clubviz.config import TRAITS


class Person:
    """An individual with a binary trait and a list of club memberships."""

    def __init__(self, id, trait: str):
        if trait not in TRAITS:
            raise ValueError(f'trait must be one of {TRAITS}, got {trait!r}')
        self.id = id
        self.trait = trait
        self.clubs: List[Club] = []

    def __repr__(self):
        return f'Person(id={self.id!r}, trait={self.trait!r})'


class Club:
    """A group of people. Membership is kept in insertion order."""

    def __init__(self, id, members: Optional[Sequence[Person]] = None):
        self.id = id
        self.members: List[Person] = []
        for person in members or ():
            self.add_member(person)

    def add_member(self, person: Person) -> None:
        if person in self.members:
            return
        self.members.append(person)
        if self not in person.clubs:
            person.clubs.append(self)

    def remove_member(self, person: Person) -> None:
        if person in self.members:
            self.members.remove(person)
        if self in person.clubs:
            person.clubs.remove(self)

    def get_trait_count(self, trait: str) -> int:
        return sum(1 for p in self.members if p.trait == trait)

    def get_member_count(self) -> int:
        return len(self.members)

    def __repr__(self):
        return f'Club(id={self.id!r}, members={len(self.members)})'


def build_random_snapshot(n_clubs: int, n_people: int, clubs_per_person: int = 1,
                          r_share: float = 0.5,
                          rng: Optional[np.random.Generator] = None) -> Tuple[List[Club], List[Person]]:
    """Create `n_clubs` clubs (ids 1..n) and `n_people` people (ids 1..n).

    Args:
        n_clubs: number of clubs, >= 0.
        n_people: number of people, >= 0.
        clubs_per_person: memberships per person, clipped to `n_clubs`.
        r_share: probability that a person carries trait 'R'.
        rng: numpy Generator; a fresh unseeded one is used when omitted.

    Returns:
        (clubs, people) with memberships wired in both directions.
    """
    if n_clubs < 0 or n_people < 0:
        raise ValueError('n_clubs and n_people must be non-negative')
    if not 0.0 <= r_share <= 1.0:
        raise ValueError('r_share must be within [0, 1]')
    rng = rng if rng is not None else np.random.default_rng()

    clubs = [Club(i + 1) for i in range(n_clubs)]
    people = []
    k = min(max(int(clubs_per_person), 0), n_clubs)
    for i in range(n_people):
        trait = 'R' if rng.random() < r_share else 'B'
        person = Person(i + 1, trait)
        if k > 0:
            for idx in rng.choice(n_clubs, size=k, replace=False):
                clubs[int(idx)].add_member(person)
        people.append(person)
    return clubs, people
