from datetime import datetime
from typing import List, Optional, Sequence, Tuple

import pytest
from bs4 import BeautifulSoup

from bolan_compare.model.models import InterestRateRecord

BOUNDARY_LABELS = ("60%", "61-74%", "75-79%", "80-85%")
TERM_ROWS = ("3 mån", "1 år", "5 år")


def _table_html(
    header_title: str,
    boundary_labels: Sequence[str],
    rows: Sequence[Tuple[str, Sequence[str]]],
) -> str:
    header = "".join(f"<td>{label}</td>" for label in boundary_labels)
    body = ""
    for title, cells in rows:
        body += f"<tr><td>{title}</td>" + "".join(f"<td>{cell}</td>" for cell in cells) + "</tr>"
    return (
        "<table><tbody>"
        f"<tr><td>{header_title}</td>{header}</tr>"
        f"{body}"
        "</tbody></table>"
    )


def default_rows(terms: Sequence[str] = TERM_ROWS, offset: int = 0) -> List[Tuple[str, List[str]]]:
    """每列 4 格，利率依序遞增，方便檢查順序"""
    rows = []
    for i, term in enumerate(terms):
        rows.append((term, [f"{i + offset},{j}5 %" for j in range(len(BOUNDARY_LABELS))]))
    return rows


@pytest.fixture
def build_page():
    """產生測試用的利率頁面

    tables 為 List[(header_title, boundary_labels, rows)]
    """
    def _build(tables: Optional[Sequence[tuple]] = None) -> BeautifulSoup:
        if tables is None:
            tables = [
                ("<b>Belåningsgrad</b>", BOUNDARY_LABELS, default_rows()),
                ("<b>Belåningsgrad</b> med LO-rabatt", BOUNDARY_LABELS, default_rows(offset=1)),
            ]
        html = "<html><body><h1>Aktuella bolåneräntor</h1>"
        for header_title, labels, rows in tables:
            html += f"<div class='rates'>{_table_html(header_title, labels, rows)}</div>"
        html += "</body></html>"
        return BeautifulSoup(html, "html.parser")
    return _build


@pytest.fixture
def crawled_at() -> datetime:
    return datetime(2024, 3, 1, 6, 30, 0)


class ListSink:
    """收集爬蟲送出的資料"""
    def __init__(self):
        self.records: List[InterestRateRecord] = []

    async def send(self, record: InterestRateRecord) -> None:
        self.records.append(record)


@pytest.fixture
def sink() -> ListSink:
    return ListSink()


@pytest.fixture
def make_rows():
    return default_rows


@pytest.fixture
def header_labels() -> Tuple[str, ...]:
    return BOUNDARY_LABELS


@pytest.fixture
def make_records(crawled_at):
    """產生 n 筆合法的 list 利率資料，bank 用來區分來源"""
    from decimal import Decimal
    from bolan_compare.model.models import RateType, Term

    def _make(n: int, bank: str = "Test Bank") -> List[InterestRateRecord]:
        terms = list(Term)
        return [
            InterestRateRecord(
                bank=bank,
                nominal_rate=Decimal(i),
                effective_rate=Decimal(i),
                term=terms[i % len(terms)],
                rate_type=RateType.LIST,
                changed_on=crawled_at.date(),
                last_crawled_at=crawled_at,
            )
            for i in range(n)
        ]
    return _make
