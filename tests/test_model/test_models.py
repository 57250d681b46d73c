import pytest
from datetime import date, datetime
from decimal import Decimal
from pydantic import ValidationError

from bolan_compare.model.models import (
    CANONICAL_BOUNDARIES,
    DANSKE_BANK,
    LTV_0_60,
    LTV_60_75,
    LTV_75_80,
    LTV_80_85,
    InterestRateRecord,
    RateType,
    RatioDiscountBoundary,
    Term,
)


def make_record(**overrides) -> InterestRateRecord:
    values = dict(
        bank=DANSKE_BANK,
        nominal_rate=Decimal("3.45"),
        effective_rate=Decimal("3.51"),
        term=Term.THREE_MONTHS,
        rate_type=RateType.RATIO_DISCOUNTED,
        discount_boundary=LTV_0_60,
        union_discount=False,
        changed_on=date(2024, 3, 1),
        last_crawled_at=datetime(2024, 3, 1, 6, 30),
    )
    values.update(overrides)
    return InterestRateRecord(**values)


def test_term_enumeration():
    """期限只有 3 個月與 1~10 年"""
    assert len(Term) == 11
    assert Term.THREE_MONTHS.value == "3m"
    assert [t.value for t in Term][1:] == [f"{n}y" for n in range(1, 11)]


def test_canonical_boundaries():
    """四個固定的成數區間"""
    assert CANONICAL_BOUNDARIES == (LTV_0_60, LTV_60_75, LTV_75_80, LTV_80_85)
    assert (LTV_0_60.min_ratio, LTV_0_60.max_ratio) == (Decimal("0"), Decimal("0.60"))
    assert (LTV_60_75.min_ratio, LTV_60_75.max_ratio) == (Decimal("0.60"), Decimal("0.75"))
    assert (LTV_75_80.min_ratio, LTV_75_80.max_ratio) == (Decimal("0.75"), Decimal("0.80"))
    assert (LTV_80_85.min_ratio, LTV_80_85.max_ratio) == (Decimal("0.80"), Decimal("0.85"))


def test_boundary_is_half_open():
    assert LTV_60_75.contains(Decimal("0.60"))
    assert LTV_60_75.contains(Decimal("0.7499"))
    assert not LTV_60_75.contains(Decimal("0.75"))
    assert not LTV_0_60.contains(Decimal("0.60"))


@pytest.mark.parametrize("min_ratio,max_ratio", [
    ("0.75", "0.60"),
    ("0.60", "0.60"),
    ("-0.1", "0.5"),
    ("0.5", "1.5"),
])
def test_invalid_boundary(min_ratio, max_ratio):
    with pytest.raises(ValidationError):
        RatioDiscountBoundary(min_ratio=Decimal(min_ratio), max_ratio=Decimal(max_ratio))


def test_record_requires_boundary_for_ratio_discounted():
    with pytest.raises(ValidationError):
        make_record(discount_boundary=None)


def test_record_rejects_boundary_for_other_types():
    with pytest.raises(ValidationError):
        make_record(rate_type=RateType.LIST)
    record = make_record(rate_type=RateType.LIST, discount_boundary=None)
    assert record.discount_boundary is None


@pytest.mark.parametrize("field", ["nominal_rate", "effective_rate"])
def test_record_rejects_negative_rates(field):
    with pytest.raises(ValidationError):
        make_record(**{field: Decimal("-0.01")})


def test_record_is_immutable():
    record = make_record()
    with pytest.raises(ValidationError):
        record.nominal_rate = Decimal("1.00")


def test_record_key_separates_union_discount():
    """一般利率與工會優惠利率的語意鍵不同"""
    regular = make_record()
    union = make_record(union_discount=True)
    assert regular.key() != union.key()
    assert regular.key() == make_record(nominal_rate=Decimal("9.99")).key()
    assert regular.key() == (DANSKE_BANK, Term.THREE_MONTHS, RateType.RATIO_DISCOUNTED, LTV_0_60, False)


def test_record_json_round_trip():
    record = make_record()
    restored = InterestRateRecord.model_validate(record.model_dump(mode="json"))
    assert restored == record
    assert restored.key() == record.key()
