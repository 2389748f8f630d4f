"""Trait legend collaborator: receives population-wide trait counts after each draw."""
import logging

from clubviz.config import TRAITS

logger = logging.getLogger(__name__)


class TraitLegend:
    """Keeps the most recent trait counts and formats them for display."""

    def __init__(self):
        self.counts = {t: 0 for t in TRAITS}
        self.updates = 0

    def update_legend(self, counts) -> None:
        self.counts = {t: int(counts.get(t, 0)) for t in TRAITS}
        self.updates += 1
        logger.debug('legend updated: %s', self.counts)

    def caption(self) -> str:
        return ' | '.join(f'{t}: {self.counts[t]}' for t in TRAITS)
