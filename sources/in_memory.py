from __future__ import annotations

from typing import Dict, Iterable, List, Mapping

from models import CompanyRecord, RelationRecord


class InMemoryRecordSource:
    """Record source over collections already parsed by the caller."""

    def __init__(
        self,
        companies: Mapping[str, CompanyRecord] | Iterable[CompanyRecord],
        relations: Iterable[RelationRecord],
    ) -> None:
        if isinstance(companies, Mapping):
            self.companies: Dict[str, CompanyRecord] = dict(companies)
        else:
            self.companies = {c.code: c for c in companies}
        self.relations: List[RelationRecord] = list(relations)

    def load_companies(self) -> Dict[str, CompanyRecord]:
        return dict(self.companies)

    def load_relations(self) -> List[RelationRecord]:
        return list(self.relations)
