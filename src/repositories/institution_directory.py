"""Static institution lookup."""

from typing import Iterable

from src.models.institution import Institution


class InstitutionDirectory:
    """Read-only mapping of institution id to display metadata."""

    def __init__(self, institutions: Iterable[Institution] = ()):
        self._institutions = {institution.id: institution for institution in institutions}

    def find_by_id(self, institution_id: str) -> Institution | None:
        return self._institutions.get(institution_id)

    def __contains__(self, institution_id: object) -> bool:
        return institution_id in self._institutions

    def __len__(self) -> int:
        return len(self._institutions)
