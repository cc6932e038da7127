"""Governance split: how a project's value is shared between three buckets."""

from projecthub.models.common import CamelModel

GOVERNANCE_TOTAL = 100


class GovernanceSplit(CamelModel):
    contributors_share: int
    community_share: int
    sustainability_share: int

    def total(self) -> int:
        return self.contributors_share + self.community_share + self.sustainability_share
