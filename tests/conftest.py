from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'services.tree_builder'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


COMPANIES_CSV = """company_code,company_name,level,country,city,founded_year,annual_revenue,employees
A,Alpha Holdings,1,United States,Cupertino,1976,394328000000,164000
B,Beta Manufacturing,2,China,Shenzhen,1995,50000000,2000
C,Gamma Labs,2,United States,Austin,2005,8000000,40
D,Delta Studio,3,China,Shenzhen,2015,500,0
"""

RELATIONSHIPS_CSV = """company_code,parent_company
A,
B,A
C,A
D,B
"""


def make_company(code: str, level: int = 1, country: str = "United States", city: str = "Cupertino",
                 founded_year: int = 2000, annual_revenue: float = 1000000, employees: int = 100,
                 name: str | None = None):
    from models import CompanyRecord

    return CompanyRecord(
        code=code,
        name=name or f"Company {code}",
        level=level,
        country=country,
        city=city,
        founded_year=founded_year,
        annual_revenue=annual_revenue,
        employees=employees,
    )


def make_relation(code: str, parent: str | None = None):
    from models import RelationRecord

    return RelationRecord(code=code, parent_code=parent)


@pytest.fixture
def sample_companies():
    return {
        "A": make_company("A", level=1, country="United States", city="Cupertino", founded_year=1976,
                          annual_revenue=394328000000, employees=164000, name="Alpha Holdings"),
        "B": make_company("B", level=2, country="China", city="Shenzhen", founded_year=1995,
                          annual_revenue=50000000, employees=2000, name="Beta Manufacturing"),
        "C": make_company("C", level=2, country="United States", city="Austin", founded_year=2005,
                          annual_revenue=8000000, employees=40, name="Gamma Labs"),
        "D": make_company("D", level=3, country="China", city="Shenzhen", founded_year=2015,
                          annual_revenue=500, employees=0, name="Delta Studio"),
    }


@pytest.fixture
def sample_relations():
    return [
        make_relation("A"),
        make_relation("B", "A"),
        make_relation("C", "A"),
        make_relation("D", "B"),
    ]


@pytest.fixture
def sample_store(sample_companies, sample_relations):
    from services.hierarchy_store import HierarchyStore
    from sources.in_memory import InMemoryRecordSource

    store = HierarchyStore(InMemoryRecordSource(sample_companies, sample_relations))
    store.initialize()
    return store


@pytest.fixture
def csv_files(tmp_path):
    companies = tmp_path / "companies.csv"
    relationships = tmp_path / "relationships.csv"
    companies.write_text(COMPANIES_CSV, encoding="utf-8")
    relationships.write_text(RELATIONSHIPS_CSV, encoding="utf-8")
    return companies, relationships
