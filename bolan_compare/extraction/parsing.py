"""把網頁上的文字轉成利率資料的純函式工具"""
import re
from decimal import Decimal, InvalidOperation
from typing import List, Mapping, Optional, Sequence, Tuple

from bs4.element import NavigableString, PageElement, PreformattedString

from bolan_compare.model.models import (
    ParseError,
    RatioDiscountBoundary,
    StructuralError,
    Term,
)

_WHITESPACE = re.compile(r"\s+")


def get_all_text(node: Optional[PageElement]) -> str:
    """深度優先收集節點底下所有文字，直接串接後合併空白並去頭尾

    相鄰的文字節點之間不插入空白，被行內標籤切開的數字（如 3,<b>45</b>）
    才能保持完整。註解、doctype 等非內文節點不計入。&nbsp; 視為一般空白。
    """
    parts: List[str] = []

    def walk(current: PageElement) -> None:
        if isinstance(current, NavigableString):
            if not isinstance(current, PreformattedString):
                parts.append(str(current))
            return
        for child in getattr(current, "children", ()):
            walk(child)

    if node is not None:
        walk(node)
    text = "".join(parts).replace("\u00a0", " ")
    return _WHITESPACE.sub(" ", text).strip()


def normalize_label(text: str) -> str:
    """移除所有空白，作為標籤查表用的 key"""
    return _WHITESPACE.sub("", text)


def parse_term(label: str, term_labels: Mapping[str, Term]) -> Term:
    """把列標題（如 "3 mån"、"1 år"）轉成 Term，查不到就失敗"""
    cleaned = normalize_label(label)
    term = term_labels.get(cleaned)
    if term is None:
        raise StructuralError(f"無法解析期限：'{label}' (清理後：'{cleaned}')")
    return term


def parse_discount_boundaries(
    labels: Sequence[str],
    boundary_labels: Mapping[str, RatioDiscountBoundary],
) -> List[RatioDiscountBoundary]:
    """把表頭欄位（如 "61-74%"）轉成成數區間，任何一欄失敗則整個失敗"""
    out: List[RatioDiscountBoundary] = []
    for label in labels:
        cleaned = normalize_label(label)
        boundary = boundary_labels.get(cleaned)
        if boundary is None:
            raise StructuralError(f"無法解析成數區間：'{label}' (清理後：'{cleaned}')")
        out.append(boundary)
    return out


class RateCellParser:
    """解析利率儲存格文字為 (名目利率, 實質利率)

    儲存格的格式依網站而異，所以做成可設定的物件，由各網站的
    ExtractionConfig 帶入。

    Args:
        decimal_separator: 小數點符號，瑞典格式為 ","
        strip_chars: 解析前要移除的符號
        effective_from_second_figure: 儲存格有第二個數字時是否當成實質利率；
            否則實質利率沿用第一個數字
    """

    def __init__(
        self,
        decimal_separator: str = ",",
        strip_chars: str = "%*()",
        effective_from_second_figure: bool = True,
    ):
        self.decimal_separator = decimal_separator
        self.strip_chars = strip_chars
        self.effective_from_second_figure = effective_from_second_figure

    def sanitize(self, text: str) -> str:
        sanitized = text
        for char in self.strip_chars:
            sanitized = sanitized.replace(char, " ")
        return _WHITESPACE.sub(" ", sanitized).strip()

    def parse_number(self, token: str, cell: str) -> Decimal:
        normalized = token.replace(self.decimal_separator, ".")
        try:
            value = Decimal(normalized)
        except InvalidOperation:
            raise ParseError(f"無法解析數字 '{token}'（儲存格：'{cell}'）")
        if not value.is_finite() or value < 0:
            raise ParseError(f"利率必須是非負的有限數字 '{token}'（儲存格：'{cell}'）")
        # -0 與 0 視為相同
        if value.is_zero():
            value = value.copy_abs()
        return value

    def __call__(self, cell: str) -> Tuple[Decimal, Decimal]:
        tokens = self.sanitize(cell).split(" ")
        if not tokens[0]:
            raise ParseError(f"儲存格沒有任何數字：'{cell}'")

        nominal = self.parse_number(tokens[0], cell)
        if self.effective_from_second_figure and len(tokens) > 1:
            effective = self.parse_number(tokens[1], cell)
        else:
            effective = self.parse_number(tokens[0], cell)
        return nominal, effective

    def __repr__(self) -> str:
        return (
            f"RateCellParser(decimal_separator={self.decimal_separator!r}, "
            f"strip_chars={self.strip_chars!r}, "
            f"effective_from_second_figure={self.effective_from_second_figure!r})"
        )
