import asyncio

import pytest

from bolan_compare.crawler.dummy import DummyCrawler
from bolan_compare.model.models import DUMMY_BANK, RateType, Term


@pytest.mark.asyncio
async def test_dummy_emits_valid_records(sink):
    """假爬蟲不連網，送出的資料仍需通過 model 驗證"""
    await DummyCrawler(count=3, interval=0).produce(sink)

    assert len(sink.records) == 3
    assert [r.term for r in sink.records] == [Term.THREE_MONTHS, Term.ONE_YEAR, Term.TWO_YEARS]
    assert all(r.bank == DUMMY_BANK for r in sink.records)
    assert all(r.rate_type == RateType.LIST and r.discount_boundary is None for r in sink.records)


@pytest.mark.asyncio
async def test_dummy_cadence(sink):
    loop = asyncio.get_running_loop()
    start = loop.time()
    await DummyCrawler(count=3, interval=0.05).produce(sink)
    assert loop.time() - start >= 0.09
    assert len(sink.records) == 3


def test_dummy_defaults():
    crawler = DummyCrawler()
    assert crawler.count == DummyCrawler.DEFAULT_COUNT
    assert crawler.interval == DummyCrawler.DEFAULT_INTERVAL
